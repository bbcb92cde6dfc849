"""Logic for writing generated bindings to disk."""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from jvm_bindgen.class_binding import build_class_binding
from jvm_bindgen.errors import OutputCollisionError, SetupError
from jvm_bindgen.format_source import format_source
from jvm_bindgen.models import ClassEntry, class_table
from jvm_bindgen.output_file_for_class import output_file_for_class
from jvm_bindgen.render_class import render_class
from jvm_bindgen.type_mapper import TypeMapper

logger = logging.getLogger(__name__)


def plan_outputs(classes: list[ClassEntry], out_root: Path) -> dict[Path, ClassEntry]:
    """Assign every class its output file, refusing shared paths."""
    planned: dict[Path, ClassEntry] = {}
    for entry in classes:
        path = output_file_for_class(out_root, entry.name)
        other = planned.get(path)
        if other is not None:
            msg = f"{entry.name} and {other.name} would both be written to {path}"
            raise OutputCollisionError(msg)
        planned[path] = entry
    return planned


def _write_one(
    path: Path,
    entry: ClassEntry,
    mapper: TypeMapper,
    known: dict[str, ClassEntry],
    *,
    rustfmt: bool,
    config_hash: str | None,
) -> int:
    """Render and write a single class; return its number of pending notes."""
    binding = build_class_binding(entry, mapper, known)
    source = render_class(binding, config_hash=config_hash)
    if rustfmt:
        source = format_source(source)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source, encoding="utf-8")
    except OSError as e:
        msg = f"Cannot write {path}: {e}"
        raise SetupError(msg) from e

    for note in binding.pending:
        logger.info("%s: pending %s", entry.name, note)
    return len(binding.pending)


def write_bindings(
    classes: list[ClassEntry],
    mapper: TypeMapper,
    out_root: Path,
    *,
    workers: int = 8,
    rustfmt: bool = True,
    config_hash: str | None = None,
) -> int:
    """Write one ``.rs`` file per class; return the number of files written.

    Paths are planned up front so no two tasks ever share a file. The first
    failure cancels the remaining work and is re-raised.
    """
    planned = plan_outputs(classes, out_root)
    known = class_table(classes)
    total = len(planned)
    print(f"Writing {total} bindings...")

    written = 0
    pending = 0
    with ThreadPoolExecutor(max_workers=max(1, workers)) as executor:
        futures = {
            executor.submit(
                _write_one,
                path,
                entry,
                mapper,
                known,
                rustfmt=rustfmt,
                config_hash=config_hash,
            ): entry
            for path, entry in planned.items()
        }
        try:
            for future in as_completed(futures):
                pending += future.result()
                written += 1
                if written % 50 == 0:
                    print(f"  ... wrote {written}/{total} bindings")
        except BaseException:
            for future in futures:
                future.cancel()
            raise

    if pending:
        logger.warning(
            "%d wrappers contain placeholders; search the output for TODO", pending
        )
    return written
