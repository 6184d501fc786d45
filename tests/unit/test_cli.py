from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest
import yaml

pytest.importorskip("typer")


def _run_cli(*args: str, cwd: Path, check: bool = True) -> subprocess.CompletedProcess[bytes]:
    command = [sys.executable, "-m", "ucs2kit", *args]
    env = os.environ.copy()
    module_root = Path(__file__).resolve().parents[2] / "src"
    env["PYTHONPATH"] = (
        f"{module_root}{os.pathsep}{env['PYTHONPATH']}"
        if env.get("PYTHONPATH")
        else str(module_root)
    )
    return subprocess.run(
        command,
        check=check,
        cwd=cwd,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        env=env,
    )


def test_cli_reports_version(tmp_path: Path) -> None:
    from ucs2kit.version import __version__

    result = _run_cli("version", cwd=tmp_path)
    assert result.stdout.decode("utf-8").strip() == __version__


def test_cli_decode_prints_units(tmp_path: Path) -> None:
    sample = tmp_path / "sample.txt"
    sample.write_bytes("A\u0300\u00e9".encode("utf-8"))
    plain = _run_cli("decode", str(sample), cwd=tmp_path)
    assert plain.stdout.decode("utf-8").strip() == "0041 0300 00E9"
    composed = _run_cli("decode", str(sample), "--precompose", cwd=tmp_path)
    assert composed.stdout.decode("utf-8").strip() == "00C0 00E9"


def test_cli_decode_then_encode_files(tmp_path: Path) -> None:
    sample = tmp_path / "sample.txt"
    sample.write_bytes("Ça coûte 5€".encode("utf-8"))
    ucs2 = tmp_path / "sample.ucs2"
    back = tmp_path / "back.txt"
    _run_cli("decode", str(sample), "-o", str(ucs2), cwd=tmp_path)
    assert ucs2.read_bytes() == "Ça coûte 5€".encode("utf-16-be")
    _run_cli("encode", str(ucs2), "-o", str(back), cwd=tmp_path)
    assert back.read_bytes() == sample.read_bytes()


def test_cli_config_terminates_output(tmp_path: Path) -> None:
    config = tmp_path / "config.yaml"
    config.write_text("transcode:\n  terminate: true\n", encoding="utf-8")
    sample = tmp_path / "sample.txt"
    sample.write_bytes(b"hi")
    ucs2 = tmp_path / "sample.ucs2"
    _run_cli("--config", str(config), "decode", str(sample), "-o", str(ucs2), cwd=tmp_path)
    assert ucs2.read_bytes() == b"\x00h\x00i\x00\x00"


def test_cli_count(tmp_path: Path) -> None:
    sample = tmp_path / "sample.txt"
    sample.write_bytes(b"ab\xc3\xa9\x80zz")
    result = _run_cli("count", str(sample), cwd=tmp_path)
    assert result.stdout.decode("utf-8").strip() == "3"


def test_cli_compose(tmp_path: Path) -> None:
    found = _run_cli("compose", "U+0041", "0x0300", cwd=tmp_path)
    assert found.stdout.decode("utf-8").strip() == "U+00C0"
    missing = _run_cli("compose", "41", "41", cwd=tmp_path, check=False)
    assert missing.returncode == 1
    invalid = _run_cli("compose", "10000", "41", cwd=tmp_path, check=False)
    assert invalid.returncode == 2


def test_cli_init_config_writes_defaults(tmp_path: Path) -> None:
    target = tmp_path / "conf" / "config.yaml"
    _run_cli("init-config", "--destination", str(target), cwd=tmp_path)
    data = yaml.safe_load(target.read_text(encoding="utf-8"))
    assert data == {"logging": {"level": "INFO"}, "transcode": {"precompose": False, "terminate": False}}
    again = _run_cli("init-config", "--destination", str(target), cwd=tmp_path, check=False)
    assert again.returncode == 1
    _run_cli("init-config", "--destination", str(target), "--force", cwd=tmp_path)
