"""A JvmBridge backed by reflection data dumped to YAML snapshots.

Each snapshot holds the output of reflective calls for a set of classes::

    classes:
      - name: com.foo.Bar
        interface: false
        annotation: false
        interfaces: [java.lang.Runnable]
        methods:
          - name: run
            modifiers: 1
            parameters: []
            returns: void
            declaring_class: com.foo.Bar

Classpath locations are searched in order and the first definition of a
class wins, the way a class loader resolves duplicates.
"""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from jvm_bindgen.bridge import RawMethod
from jvm_bindgen.errors import SetupError

logger = logging.getLogger(__name__)

SNAPSHOT_SUFFIXES = (".yml", ".yaml")


def _is_ignored(class_name: str) -> bool:
    """Skip module descriptors and META-INF entries."""
    return class_name.endswith("module-info") or class_name.startswith("META-INF")


def _snapshot_files(location: Path) -> list[Path]:
    """List the snapshot files of one classpath location."""
    if location.is_dir():
        return sorted(
            p for p in location.rglob("*") if p.suffix in SNAPSHOT_SUFFIXES
        )
    if location.is_file():
        return [location]
    msg = f"Classpath location does not exist: {location}"
    raise SetupError(msg)


def load_snapshot(path: Path) -> list[dict[str, Any]]:
    """Load the class records of a snapshot file."""
    try:
        doc = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        msg = f"Cannot read snapshot {path}: {e}"
        raise SetupError(msg) from e
    classes = doc.get("classes") if isinstance(doc, dict) else None
    if not isinstance(classes, list):
        msg = f"Snapshot {path} has no 'classes' list"
        raise SetupError(msg)
    return [c for c in classes if isinstance(c, dict) and c.get("name")]


def _raw_method(record: dict[str, Any], owner: str) -> RawMethod:
    """Build a RawMethod from a snapshot method record."""
    return RawMethod(
        name=str(record["name"]),
        modifiers=int(record.get("modifiers") or 0),
        parameter_types=tuple(str(p) for p in record.get("parameters") or []),
        return_type=str(record.get("returns") or "void"),
        declaring_class=str(record.get("declaring_class") or owner),
    )


class SnapshotBridge:
    """Serves reflective queries from snapshot files on a classpath."""

    def __init__(self, classpath: Iterable[str | Path]) -> None:
        """Load every snapshot found on ``classpath``."""
        self.records: dict[str, dict[str, Any]] = {}
        for location in classpath:
            for path in _snapshot_files(Path(location)):
                self._add_snapshot(path)
        logger.info("Loaded %d classes from snapshots", len(self.records))

    def _add_snapshot(self, path: Path) -> None:
        for record in load_snapshot(path):
            name = str(record["name"])
            if _is_ignored(name):
                continue
            if name in self.records:
                logger.debug("%s already defined; ignoring copy in %s", name, path)
                continue
            self.records[name] = record

    def _record(self, class_name: str) -> dict[str, Any]:
        try:
            return self.records[class_name]
        except KeyError:
            msg = f"Class not found on classpath: {class_name}"
            raise LookupError(msg) from None

    def class_names(self) -> list[str]:
        """Names of all classes on the classpath."""
        return list(self.records)

    def is_interface(self, class_name: str) -> bool:
        """Whether the class is an interface (annotations included)."""
        record = self._record(class_name)
        return bool(record.get("interface") or record.get("annotation"))

    def is_annotation(self, class_name: str) -> bool:
        """Whether the class is an annotation type."""
        return bool(self._record(class_name).get("annotation"))

    def interfaces(self, class_name: str) -> list[str]:
        """Interfaces the class directly implements."""
        return [str(i) for i in self._record(class_name).get("interfaces") or []]

    def declared_methods(self, class_name: str) -> list[RawMethod]:
        """Methods declared by the class itself."""
        methods = self._record(class_name).get("methods") or []
        return [_raw_method(m, class_name) for m in methods]
