import math

import pytest

from staking_lab.core.errors import InvalidArgument
from staking_lab.rewards import estimate_reward, reward_rate


def test_sample_pool_reward() -> None:
    reward = estimate_reward(1000, 12.5, 30)
    assert reward == pytest.approx(1000 * 0.125 * 30 / 365)
    assert round(reward, 2) == 10.27


def test_zero_apy_yields_zero_reward() -> None:
    for principal, days in [(1.0, 1), (50_000.0, 365), (123.45, 90)]:
        assert estimate_reward(principal, 0, days) == 0.0


@pytest.mark.parametrize(
    ("low", "high"),
    [
        ((100.0, 10.0, 30), (200.0, 10.0, 30)),
        ((100.0, 5.0, 30), (100.0, 10.0, 30)),
        ((100.0, 10.0, 30), (100.0, 10.0, 31)),
    ],
)
def test_monotonic_in_each_argument(low: tuple, high: tuple) -> None:
    assert estimate_reward(*low) <= estimate_reward(*high)


def test_full_year_matches_apy() -> None:
    assert estimate_reward(1000, 8.5, 365) == pytest.approx(85.0)


@pytest.mark.parametrize(
    "args",
    [
        (0, 10, 30),
        (-5, 10, 30),
        (100, -1, 30),
        (100, 10, 0),
        (100, 10, -7),
        (100, 10, 2.5),
        (math.nan, 10, 30),
        (math.inf, 10, 30),
        ("100", 10, 30),
        (True, 10, 30),
    ],
)
def test_invalid_arguments_rejected(args: tuple) -> None:
    with pytest.raises(InvalidArgument):
        estimate_reward(*args)


def test_reward_rate() -> None:
    assert reward_rate(1000, 10.0) == pytest.approx(1.0)
    assert reward_rate(0, 10.0) == 0.0
