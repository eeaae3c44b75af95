from __future__ import annotations

import json
import runpy
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
for part in ("apps/cli", "packages/core", "packages/encoder", "packages/emitter"):
    sys.path.insert(0, str(ROOT / part))

import imgheader_app.__main__ as cli_main
from imgheader_app.cli import main
from PIL import Image


def test_main_passes_through_args(monkeypatch) -> None:
    calls: list[list[str]] = []
    monkeypatch.setattr(cli_main, "_cli_main", lambda argv=None: calls.append(list(argv or [])) or 0)

    rc = cli_main.main(["config", "show"])
    assert rc == 0
    assert calls == [["config", "show"]]


def test_main_module_runpath_without_package_context() -> None:
    main_path = ROOT / "apps" / "cli" / "imgheader_app" / "__main__.py"
    result = runpy.run_path(str(main_path))
    assert "main" in result


def test_convert_end_to_end(tmp_path, capsys) -> None:
    src = tmp_path / "logo.png"
    Image.new("L", (9, 1), 255).save(src)
    out = tmp_path / "logo.h"

    rc = main(["--config", str(tmp_path / "cfg.json"), "convert", str(src), str(out), "-o", "wb1"])

    assert rc == 0
    text = out.read_text(encoding="utf-8")
    assert "#define LOGO_LENGTH LOGO_HEIGHT * LOGO_PIXEL_SIZE * LOGO_WIDTH_BYTES + 1\n" in text
    assert "uint8_t LOGO[LOGO_LENGTH] = {\n0xff, 0x80, \n};\n" in text
    summary = json.loads(capsys.readouterr().out)
    assert summary["symbol_name"] == "LOGO"
    assert summary["byte_count"] == 2


def test_unsupported_mode_exit_code(tmp_path) -> None:
    src = tmp_path / "logo.png"
    Image.new("L", (2, 2)).save(src)
    out = tmp_path / "logo.h"

    rc = main(["-qq", "--config", str(tmp_path / "cfg.json"), "convert", str(src), str(out), "-o", "gcode"])

    assert rc == 1
    assert not out.exists()


def test_config_init_and_show(tmp_path, capsys) -> None:
    cfg = tmp_path / "cfg.json"
    assert main(["--config", str(cfg), "config", "init"]) == 0
    assert cfg.exists()
    assert main(["-qq", "--config", str(cfg), "config", "init"]) == 1
    capsys.readouterr()

    assert main(["--config", str(cfg), "config", "show"]) == 0
    shown = json.loads(capsys.readouterr().out)
    assert shown["output"]["color_mode"] == "gray8"
    assert shown["path"] == str(cfg)


def test_run_length_overflow_exit_code(tmp_path) -> None:
    src = tmp_path / "checker.png"
    img = Image.new("L", (300, 300))
    img.putdata([255 * ((x + y) % 2) for y in range(300) for x in range(300)])
    img.save(src)
    out = tmp_path / "checker.h"

    rc = main(["-qq", "--config", str(tmp_path / "cfg.json"), "convert", str(src), str(out), "-o", "wbzip"])

    assert rc == 1
    assert not out.exists()
