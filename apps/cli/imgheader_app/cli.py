"""CLI entrypoints for image conversion and settings management."""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict
from pathlib import Path

from imgheader_core import (
    AppConfig,
    ConfigError,
    ConversionError,
    ConversionRequest,
    config_path,
    convert,
    load_config,
    save_config,
)
from imgheader_core.logging_setup import configure_logging, get_logger, level_from_verbosity
from imgheader_emitter import ByteOrder, Dialect, NumericBase
from imgheader_encoder import ColorMode, ResizeFilter, ResizeKind, ResizeRequest


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _config_file(args: argparse.Namespace) -> Path:
    return Path(args.config).expanduser() if args.config else config_path()


def _black_level(value: str) -> int:
    try:
        level = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid black level: {value!r}") from None
    if not 0 <= level <= 255:
        raise argparse.ArgumentTypeError("black level must be within 0..255")
    return level


def _pick(value, default):
    return default if value is None else value


def build_request(args: argparse.Namespace, cfg: AppConfig) -> ConversionRequest:
    resize = None
    try:
        if args.resize:
            resize = ResizeRequest(
                kind=ResizeKind(args.resize),
                width=args.width,
                height=args.height,
                filter=ResizeFilter(_pick(args.filter, cfg.image.resize_filter)),
            )
        request = ConversionRequest(
            input_path=Path(args.input),
            output_path=Path(args.output),
            color_mode=ColorMode(_pick(args.out_color, cfg.output.color_mode)),
            numeric_base=NumericBase(_pick(args.output_view, cfg.output.numeric_base)),
            byte_order=ByteOrder(_pick(args.ending, cfg.output.byte_order)),
            dialect=Dialect(_pick(args.out_lang, cfg.output.dialect)),
            symbol_name=args.name_variable,
            guard_name=args.protect,
            includes=tuple(_pick(args.include_c, cfg.output.includes)),
            black_level=_pick(args.black_level, cfg.image.black_level),
            inverse_color=_pick(args.inverse_color, cfg.image.inverse_color),
            full_background=_pick(args.full_background, cfg.output.full_background),
            blur=_pick(args.blur, cfg.image.blur),
            resize=resize,
        )
        # Reject bad names or levels before the input is read.
        request.render_config()
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc
    return request


def cmd_convert(args: argparse.Namespace) -> int:
    cfg = load_config(_config_file(args))
    request = build_request(args, cfg)
    result = convert(request)
    _print_json(asdict(result))
    return 0


def cmd_config_show(args: argparse.Namespace) -> int:
    path = _config_file(args)
    payload = asdict(load_config(path))
    payload["path"] = str(path)
    _print_json(payload)
    return 0


def cmd_config_init(args: argparse.Namespace) -> int:
    path = _config_file(args)
    if path.exists() and not args.force:
        raise ConfigError(f"Config already exists (use --force to overwrite): {path}")
    save_config(AppConfig(), path)
    _print_json({"written": str(path)})
    return 0


def _add_resize_commands(convert_cmd: argparse.ArgumentParser) -> None:
    resize_sub = convert_cmd.add_subparsers(dest="resize", required=False, metavar="RESIZE")
    helps = {
        ResizeKind.FIT: "Resize to fit inside WIDTHxHEIGHT, keeping aspect ratio",
        ResizeKind.EXACT: "Resize to exactly WIDTHxHEIGHT",
        ResizeKind.FILL: "Resize to cover WIDTHxHEIGHT, then crop",
    }
    for kind, text in helps.items():
        cmd = resize_sub.add_parser(kind.value, help=text)
        cmd.add_argument("--width", type=int, required=True)
        cmd.add_argument("--height", type=int, required=True)
        cmd.add_argument("--filter", choices=[f.value for f in ResizeFilter], default=None)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="imgheader", description="Embed images as C or Rust array sources")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More log output (repeatable)")
    parser.add_argument("-q", "--quiet", action="count", default=0, help="Less log output (repeatable)")
    parser.add_argument("--config", default=None, help="Path to settings JSON (default: per-user config)")
    parser.add_argument("--log-file", default=None, help="Also write JSON-lines logs to this file")
    sub = parser.add_subparsers(dest="command", required=True)

    convert_cmd = sub.add_parser("convert", help="Convert an image into a generated source file")
    convert_cmd.add_argument("input", help="Input image")
    convert_cmd.add_argument("output", help="Output file")
    convert_cmd.add_argument("-o", "--out-color", choices=[m.value for m in ColorMode], default=None)
    convert_cmd.add_argument("--output-view", choices=[b.value for b in NumericBase], default=None)
    convert_cmd.add_argument("--protect", default=None, help="define protect for C header")
    convert_cmd.add_argument("--include-c", action="append", default=None, help="Include libs for C header")
    convert_cmd.add_argument("--out-lang", choices=[d.value for d in Dialect], default=None)
    convert_cmd.add_argument("-n", "--name-variable", default=None, help="Name of const variable")
    convert_cmd.add_argument("-i", "--inverse-color", action="store_true", default=None, help="Inverse colors")
    convert_cmd.add_argument("--blur", type=float, default=None, help="Blur image")
    convert_cmd.add_argument(
        "--black-level", type=_black_level, default=None, help="Black level for monochrome out-color"
    )
    convert_cmd.add_argument("--ending", choices=[o.value for o in ByteOrder], default=None, help="Ending out pixel")
    convert_cmd.add_argument(
        "--full-background",
        action="store_true",
        default=None,
        help="Fill ssd1306 pages with 0xFF/0x00 instead of 1/0",
    )
    _add_resize_commands(convert_cmd)
    convert_cmd.set_defaults(func=cmd_convert)

    config_cmd = sub.add_parser("config", help="Inspect or create the settings file")
    config_sub = config_cmd.add_subparsers(dest="config_cmd", required=True)
    show_cmd = config_sub.add_parser("show", help="Print effective settings")
    show_cmd.set_defaults(func=cmd_config_show)
    init_cmd = config_sub.add_parser("init", help="Write default settings")
    init_cmd.add_argument("--force", action="store_true")
    init_cmd.set_defaults(func=cmd_config_init)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(
        level=level_from_verbosity(args.verbose, args.quiet),
        log_file=Path(args.log_file) if args.log_file else None,
    )
    try:
        return int(args.func(args))
    except ConversionError as exc:
        get_logger().error("%s", exc, extra={"event": "convert_failed"})
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
