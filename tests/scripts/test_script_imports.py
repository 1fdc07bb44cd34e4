from __future__ import annotations

import importlib.util
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]
SCRIPTS_ROOT = REPO_ROOT / "scripts"


def _load(relative_path: Path):
    script_path = SCRIPTS_ROOT / relative_path
    assert script_path.exists(), f"Script not found: {script_path}"

    spec = importlib.util.spec_from_file_location(f"hive_script_smoke_{relative_path.stem}", script_path)
    assert spec and spec.loader, f"Unable to build import spec for {script_path}"
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)  # type: ignore[union-attr]
    return module


@pytest.mark.parametrize("relative_path", [Path("examples/run_hive_query.py")])
def test_script_loads_without_errors(relative_path: Path) -> None:
    assert _load(relative_path) is not None


def test_example_script_runs_in_mocked_mode(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("HIVE_SECRETS_PATH", str(tmp_path / "missing.toml"))
    monkeypatch.delenv("HIVE_API_KEY", raising=False)
    monkeypatch.chdir(tmp_path)
    module = _load(Path("examples/run_hive_query.py"))
    monkeypatch.setattr("hive_intelligence.config._discover_project_root", lambda: None)

    exit_code = module.main(["What is the current price of Ethereum?", "--json"])

    assert exit_code == 0
    assert '"response": "Mocked data:' in capsys.readouterr().out


@pytest.fixture
def offline_script(tmp_path, monkeypatch):
    monkeypatch.setenv("HIVE_SECRETS_PATH", str(tmp_path / "missing.toml"))
    monkeypatch.delenv("HIVE_API_KEY", raising=False)
    monkeypatch.chdir(tmp_path)
    module = _load(Path("examples/run_hive_query.py"))
    monkeypatch.setattr("hive_intelligence.config._discover_project_root", lambda: None)
    return module


def test_example_script_verify_reports_mode(offline_script, capsys):
    assert offline_script.main(["--verify"]) == 1
    assert capsys.readouterr().out.startswith("[mocked] ")

    assert offline_script.main(["--verify", "--api-key", "token", "--json"]) == 0
    assert '"mode": "live"' in capsys.readouterr().out


def test_example_script_strict_refuses_mocked_mode(offline_script, capsys):
    exit_code = offline_script.main(["What is the current price of Ethereum?", "--strict"])

    assert exit_code == 2
    assert "API key is not configured" in capsys.readouterr().err
