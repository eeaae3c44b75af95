"""Persistent conversion defaults schema and load/save helpers."""

from __future__ import annotations

import json
import logging
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from imgheader_emitter.models import DEFAULT_INCLUDES, ByteOrder, Dialect, NumericBase
from imgheader_encoder.models import ColorMode
from imgheader_encoder.normalize import ResizeFilter

logger = logging.getLogger(__name__)

CONFIG_VERSION = 1


@dataclass
class OutputConfig:
    color_mode: str = ColorMode.GRAY8.value
    numeric_base: str = NumericBase.HEX.value
    byte_order: str = ByteOrder.LE.value
    dialect: str = Dialect.C.value
    includes: list[str] = field(default_factory=lambda: list(DEFAULT_INCLUDES))
    full_background: bool = False


@dataclass
class ImageConfig:
    black_level: int = 128
    inverse_color: bool = False
    blur: float | None = None
    resize_filter: str = ResizeFilter.TRIANGLE.value


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    output: OutputConfig = field(default_factory=OutputConfig)
    image: ImageConfig = field(default_factory=ImageConfig)


def config_path() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "imgheader" / "config.json"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "imgheader" / "config.json"
    return Path.home() / ".config" / "imgheader" / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _enum_value(enum_type, value: Any, default: str) -> str:
    try:
        return enum_type(value).value
    except ValueError:
        logger.warning("Unknown %s '%s' in config, using '%s'", enum_type.__name__, value, default)
        return default


def _normalize_output(cfg: AppConfig) -> None:
    out = cfg.output
    out.color_mode = _enum_value(ColorMode, out.color_mode, ColorMode.GRAY8.value)
    out.numeric_base = _enum_value(NumericBase, out.numeric_base, NumericBase.HEX.value)
    out.byte_order = _enum_value(ByteOrder, out.byte_order, ByteOrder.LE.value)
    out.dialect = _enum_value(Dialect, out.dialect, Dialect.C.value)
    if isinstance(out.includes, str):
        out.includes = [out.includes]
    out.includes = [str(inc) for inc in (out.includes or [])]
    out.full_background = bool(out.full_background)


def _normalize_image(cfg: AppConfig) -> None:
    img = cfg.image
    try:
        level = int(img.black_level)
    except (TypeError, ValueError):
        level = ImageConfig.black_level
    img.black_level = max(0, min(255, level))
    img.inverse_color = bool(img.inverse_color)
    if img.blur is not None:
        img.blur = float(max(0.0, img.blur))
    img.resize_filter = _enum_value(ResizeFilter, img.resize_filter, ResizeFilter.TRIANGLE.value)


def _migrate(raw: dict[str, Any]) -> dict[str, Any]:
    try:
        version = int(raw.get("config_version", 1))
    except (TypeError, ValueError):
        version = 1
    data = dict(raw)

    if version > CONFIG_VERSION:
        logger.warning("Config version %d is newer than %d, unknown keys are ignored", version, CONFIG_VERSION)

    data.setdefault("output", {})
    data.setdefault("image", {})
    data["config_version"] = CONFIG_VERSION
    return data


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", path, exc)
        return AppConfig()
    if not isinstance(raw, dict):
        return AppConfig()

    data = _migrate(raw)
    cfg = AppConfig(
        config_version=data["config_version"],
        output=_merge(OutputConfig, data["output"]),
        image=_merge(ImageConfig, data["image"]),
    )

    _normalize_output(cfg)
    _normalize_image(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
