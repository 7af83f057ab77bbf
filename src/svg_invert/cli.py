# src/svg_invert/cli.py
import argparse
import logging
import sys
from pathlib import Path

from .config import load_invert_config
from .errors import InvertSvgError
from .pipeline.orchestrator import SvgInverter
from .utils.load_config import ConfigFileNotFound, ConfigParseError, ConfigTypeError
from .utils.log import enable_topics

log = logging.getLogger(__name__)

DEFAULT_SUFFIX = "-inverted.svg"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="svg-invert",
        description="Invert fill/stroke colors of SVG documents.",
    )
    parser.add_argument(
        "inputs",
        nargs="*",
        type=Path,
        help="SVG files to invert (reads stdin when omitted)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output file (single input or stdin only; default stdout)",
    )
    parser.add_argument(
        "--suffix",
        default=DEFAULT_SUFFIX,
        help=f"Suffix for per-file outputs (default {DEFAULT_SUFFIX})",
    )
    parser.add_argument("--config", type=Path, help="JSON file with output formatting options")
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    return parser


def _output_path(path: Path, suffix: str) -> Path:
    return path.with_name(path.stem + suffix)


def _invert_to(inverter: SvgInverter, source, output: Path | None) -> None:
    if output is None:
        inverter.invert(source, sys.stdout.buffer)
        sys.stdout.buffer.flush()
        return
    with output.open("wb") as sink:
        inverter.invert(source, sink)


def main(argv=None) -> int:
    """CLI: invert stdin to stdout, or each given file to a suffixed sibling."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        enable_topics("all")
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)
    if args.output is not None and len(args.inputs) > 1:
        parser.error("--output accepts a single input file")

    try:
        inverter = SvgInverter(config=load_invert_config(args.config))

        if not args.inputs:
            _invert_to(inverter, sys.stdin.buffer, args.output)
        elif args.output is not None:
            with args.inputs[0].open("rb") as source:
                _invert_to(inverter, source, args.output)
        else:
            for path in args.inputs:
                if path.name.endswith(args.suffix):
                    log.info("Skipping already inverted file %s", path)
                    continue
                target = _output_path(path, args.suffix)
                log.info("Inverting %s -> %s", path, target)
                with path.open("rb") as source:
                    _invert_to(inverter, source, target)
    except (InvertSvgError, ConfigFileNotFound, ConfigParseError, ConfigTypeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
