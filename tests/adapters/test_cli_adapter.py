"""Adapter tests for CLI entrypoint."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from enum_pipeline.cli import main


pytestmark = pytest.mark.adapter


def _write_config(tmp_path: Path, world: dict) -> Path:
    path = tmp_path / "world.yaml"
    path.write_text(yaml.safe_dump({"world": world}, sort_keys=False), encoding="utf-8")
    return path


def test_cli_run_command_smoke(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write_config(
        tmp_path,
        {"Nx": 5, "Ny": 5, "dt_s": 1.0, "diffusivity": 0.1, "sources": [{"x": 2, "y": 2, "amount": 1.0}]},
    )

    rc = main(["run", str(path), "--ticks", "3"])
    captured = capsys.readouterr()

    assert rc == 0
    assert "Done. Grid=(5, 5), ticks=3, t=3s" in captured.out
    assert "Total: 3" in captured.out
    assert "Peak:" in captured.out


def test_cli_run_invalid_config_exits_2(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write_config(tmp_path, {"Nx": 0, "Ny": 5})

    with pytest.raises(SystemExit) as excinfo:
        main(["run", str(path)])

    assert excinfo.value.code == 2
    assert "world.Nx must be > 0" in capsys.readouterr().err


def test_cli_run_failed_step_exits_2(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write_config(tmp_path, {"Nx": 3, "Ny": 3, "diffusivity": 2.0})

    with pytest.raises(SystemExit) as excinfo:
        main(["run", str(path)])

    assert excinfo.value.code == 2
    assert "Step 0 (Diffuse) failed" in capsys.readouterr().err


def test_cli_selfcheck(capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["selfcheck", "--no-smoke"])
    assert rc == 0
    assert "[OK] numpy" in capsys.readouterr().out
