def test_imports():
    import staking_lab  # noqa: F401
    import staking_demo  # noqa: F401


def test_modules_carry_docstrings():
    from staking_lab import ledger, service
    from staking_lab.analytics import portfolio

    for module in (ledger, portfolio, service):
        assert module.__doc__
