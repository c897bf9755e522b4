import pytest

from staking_lab.core import Asset, Pool, PoolCatalog, PoolNotFound, PoolStats

NGN = Asset(id="1", symbol="NGN", name="Naira Token")
GTB = Asset(id="3", symbol="GTB", name="Guaranty Trust Bank", price=42.3, type="stock")


@pytest.fixture
def pools() -> list[Pool]:
    return [
        Pool(id="short", asset=NGN, apy=6.0, min_stake=10, lock_period_days=7, total_staked=5_000),
        Pool(id="long", asset=NGN, apy=14.0, min_stake=100, lock_period_days=180, total_staked=1_000),
        Pool(
            id="closed",
            asset=GTB,
            apy=20.0,
            min_stake=500,
            lock_period_days=60,
            total_staked=9_000,
            is_active=False,
        ),
    ]


@pytest.fixture
def catalog(pools: list[Pool]) -> PoolCatalog:
    return PoolCatalog(pools)


def test_list_pools_preserves_insertion_order(catalog: PoolCatalog) -> None:
    assert [p.id for p in catalog.list_pools()] == ["short", "long", "closed"]
    # restartable
    assert [p.id for p in catalog] == [p.id for p in catalog]
    assert len(catalog) == 3


def test_get_pool(catalog: PoolCatalog) -> None:
    assert catalog.get_pool("long").apy == 14.0
    assert "long" in catalog
    with pytest.raises(PoolNotFound):
        catalog.get_pool("missing")


def test_pool_not_found_is_a_lookup_error(catalog: PoolCatalog) -> None:
    with pytest.raises(LookupError):
        catalog.get_pool("missing")


@pytest.mark.parametrize(
    ("kwargs", "expected"),
    [
        ({"active_only": True}, ["short", "long"]),
        ({"min_apy": 10.0}, ["long", "closed"]),
        ({"symbols": ["GTB"]}, ["closed"]),
        ({"max_lock_days": 60}, ["short", "closed"]),
    ],
)
def test_filter_respects_criteria(
    catalog: PoolCatalog, kwargs: dict[str, object], expected: list[str]
) -> None:
    filtered = catalog.filter(**kwargs)
    assert isinstance(filtered, PoolCatalog)
    assert filtered is not catalog
    assert [p.id for p in filtered] == expected
    assert len(catalog) == 3


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("apy", ["closed", "long", "short"]),
        ("total_staked", ["closed", "short", "long"]),
        ("lock_period", ["short", "closed", "long"]),
    ],
)
def test_sorted_by(catalog: PoolCatalog, key: str, expected: list[str]) -> None:
    assert [p.id for p in catalog.sorted_by(key)] == expected
    assert [p.id for p in catalog] == ["short", "long", "closed"]


def test_sorted_by_unknown_key(catalog: PoolCatalog) -> None:
    with pytest.raises(ValueError):
        catalog.sorted_by("name")


def test_stats(catalog: PoolCatalog) -> None:
    stats = catalog.stats()
    assert stats.total_pools == 3
    assert stats.total_staked == 15_000
    assert stats.highest_apy == 20.0
    assert stats.average_apy == pytest.approx(40.0 / 3)


def test_stats_empty_catalog() -> None:
    assert PoolCatalog().stats() == PoolStats(0.0, 0.0, 0.0, 0)


def test_to_dataframe(catalog: PoolCatalog) -> None:
    df = catalog.to_dataframe()
    assert list(df["id"]) == ["short", "long", "closed"]
    assert list(df["symbol"]) == ["NGN", "NGN", "GTB"]
    assert not df.loc[df["id"] == "closed", "is_active"].item()
