"""Orchestration logic for generating Rust bindings from JVM classes."""

import argparse
import logging
from typing import Any

from jvm_bindgen.bridge import JvmBridge
from jvm_bindgen.class_tree import build_class_tree
from jvm_bindgen.compute_config_hash import compute_config_hash
from jvm_bindgen.errors import SetupError
from jvm_bindgen.load_config import load_config
from jvm_bindgen.snapshot_bridge import SnapshotBridge
from jvm_bindgen.type_mapper import TypeMapper
from jvm_bindgen.write_bindings import write_bindings

logger = logging.getLogger(__name__)


def _settings(args: argparse.Namespace, config: dict[str, Any]) -> dict[str, Any]:
    """Combine command line flags with the configuration file."""
    extraction = config["extraction"]
    return {
        "workers": args.workers or extraction["workers"],
        "skip_failures": args.skip_failures or extraction["skip_failures"],
        "rustfmt": config["generator"]["rustfmt"] and not args.no_format,
    }


def run_generation(
    args: argparse.Namespace, bridge: JvmBridge | None = None
) -> int:
    """Execute the full generation pipeline.

    ``bridge`` defaults to a SnapshotBridge over ``args.classpath``; it is
    created once here and handed to extraction.
    """
    config = load_config(args.config)
    settings = _settings(args, config)

    if bridge is None:
        if not args.classpath:
            msg = "No classpath given"
            raise SetupError(msg)
        logger.debug("Using classpath: %s", ":".join(map(str, args.classpath)))
        bridge = SnapshotBridge(args.classpath)

    classes = build_class_tree(
        bridge,
        args.root,
        workers=settings["workers"],
        skip_failures=settings["skip_failures"],
    )
    if not classes:
        logger.warning("No classes found in package %r", args.root)

    generator = config["generator"]
    mapper = TypeMapper(generator["mappings"], generator["module_root"])

    out_root = args.out_dir.resolve()
    try:
        out_root.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        msg = f"Cannot create output directory {out_root}: {e}"
        raise SetupError(msg) from e

    written = write_bindings(
        classes,
        mapper,
        out_root,
        workers=settings["workers"],
        rustfmt=settings["rustfmt"],
        config_hash=compute_config_hash(config),
    )

    print(f"Generated {written} Rust bindings into: {out_root}")
    return 0
