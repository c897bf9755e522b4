from pathlib import Path

import pytest

from staking_demo import apply_env_overrides, load_config, main

CONFIG = Path(__file__).resolve().parents[1] / "configs" / "demo.toml"


def test_loads_config_file() -> None:
    cfg = load_config(CONFIG)
    assert cfg["wallet_balance"] == 50_000.0
    assert [s["pool"] for s in cfg["stakes"]] == ["pool1", "pool2"]
    assert cfg["catalog"] == {"active_only": True, "sort_by": "lock_period"}
    assert cfg["output"]["show"] is False
    assert cfg["output"]["outdir"] is None


def test_missing_config_uses_defaults(tmp_path: Path) -> None:
    cfg = load_config(tmp_path / "missing.toml")
    assert cfg["stakes"][0]["pool"] == "pool1"
    assert cfg["pools_csv"] is None


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STAKING_WALLET_BALANCE", "1234.5")
    monkeypatch.setenv("STAKING_OUTDIR", "/tmp/out")
    cfg = apply_env_overrides(load_config(None))
    assert cfg["wallet_balance"] == 1234.5
    assert cfg["output"]["outdir"] == "/tmp/out"


def test_main_writes_report(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    import matplotlib

    matplotlib.use("Agg")
    monkeypatch.setenv("STAKING_CONFIG", str(CONFIG))
    monkeypatch.setenv("STAKING_OUTDIR", str(tmp_path))
    main()
    out = capsys.readouterr().out
    assert "Staking Successful" in out
    assert "Minimum Stake Required" in out
    assert (tmp_path / "stakes.csv").exists()
    assert (tmp_path / "breakdown.png").exists()
