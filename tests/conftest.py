import sys
from datetime import UTC, datetime
from pathlib import Path

import pytest

# Ensure the package is importable without installation when running tests locally
pkg_src = Path(__file__).resolve().parents[1] / "src"
if str(pkg_src) not in sys.path:
    sys.path.insert(0, str(pkg_src))

from staking_lab.core import PoolCatalog  # noqa: E402
from staking_lab.sources import SampleMarketSource  # noqa: E402

T0 = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def t0() -> datetime:
    return T0


@pytest.fixture
def sample_catalog() -> PoolCatalog:
    """pool1: NGN 12.5% min 100 / 30 days; pool2: DANGOTE 8.5% min 1000 / 90 days."""

    return PoolCatalog(SampleMarketSource().fetch_pools())
