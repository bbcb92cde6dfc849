"""Generate Rust JNI bindings for the classes on a JVM classpath."""

import argparse
import logging
from pathlib import Path

from jvm_bindgen.errors import BindgenError
from jvm_bindgen.run_generation import run_generation

logger = logging.getLogger(__name__)


def _configure_logging(verbosity: int) -> None:
    """Map -v/-vv onto logging levels."""
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level, format="%(levelname)s %(name)s: %(message)s"
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    ap = argparse.ArgumentParser(
        description="Generate Rust JNI bindings from JVM class metadata.",
    )
    ap.add_argument(
        "-c",
        "--classpath",
        action="append",
        default=[],
        type=Path,
        help="Classpath location holding class snapshots (repeatable, in order)",
    )
    ap.add_argument(
        "-r",
        "--root",
        default="",
        help="Only include classes whose name starts with this prefix, e.g. com.foo.",
    )
    ap.add_argument(
        "-o",
        "--out-dir",
        type=Path,
        default=Path("output/src/bindings"),
        help="Directory receiving the generated modules",
    )
    ap.add_argument(
        "--config",
        help="Path to the configuration file (created if missing)",
    )
    ap.add_argument(
        "--workers",
        type=int,
        help="Number of parallel workers (default: from config)",
    )
    ap.add_argument(
        "--skip-failures",
        action="store_true",
        help="Skip classes that fail to extract instead of aborting",
    )
    ap.add_argument(
        "--no-format",
        action="store_true",
        help="Do not run rustfmt on the generated code",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log output (-v info, -vv debug)",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the binding generator."""
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    try:
        return run_generation(args)
    except BindgenError as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
