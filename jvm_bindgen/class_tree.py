"""Build the ClassEntry model from a JvmBridge."""

import logging
import re
from concurrent.futures import ThreadPoolExecutor, as_completed

from jvm_bindgen.bridge import JvmBridge, RawMethod
from jvm_bindgen.descriptors import parse_class_name
from jvm_bindgen.errors import ExtractionError, MalformedDescriptorError
from jvm_bindgen.models import ClassEntry, ClassKind, MethodEntry
from jvm_bindgen.rename import has_rust_name

logger = logging.getLogger(__name__)

VOID = "void"
# Outer$1 (anonymous) and Outer$1Local (local class)
ANONYMOUS_RE = re.compile(r"\$\d")


def is_anonymous(class_name: str) -> bool:
    """Anonymous and local classes; nothing outside their method can name them."""
    return bool(ANONYMOUS_RE.search(class_name))


def is_bindable(class_name: str) -> bool:
    """Whether a class gets a binding of its own."""
    if is_anonymous(class_name):
        logger.debug("Skipping anonymous or local class %s", class_name)
        return False
    if not has_rust_name(class_name):
        logger.debug("Skipping %s: no Rust name", class_name)
        return False
    return True


def class_kind(bridge: JvmBridge, class_name: str) -> ClassKind:
    """Classify a class; annotations are interfaces too, so test them first."""
    if bridge.is_annotation(class_name):
        return ClassKind.ANNOTATION
    if bridge.is_interface(class_name):
        return ClassKind.INTERFACE
    return ClassKind.CLASS


def method_entry(raw: RawMethod) -> MethodEntry:
    """Convert reflective method data into a MethodEntry."""
    return_type = None
    if raw.return_type != VOID:
        return_type = parse_class_name(raw.return_type)
    return MethodEntry(
        name=raw.name,
        is_static=raw.is_static,
        arguments=tuple(parse_class_name(p) for p in raw.parameter_types),
        return_type=return_type,
        declaring_class=raw.declaring_class,
    )


def extract_class(bridge: JvmBridge, class_name: str) -> ClassEntry:
    """Introspect a single class."""
    logger.debug("Exploring class %s", class_name)
    kind = class_kind(bridge, class_name)
    methods = tuple(method_entry(m) for m in bridge.declared_methods(class_name))
    logger.debug("Found %d methods for %s", len(methods), class_name)
    interfaces = tuple(dict.fromkeys(bridge.interfaces(class_name)))
    return ClassEntry(
        name=class_name, kind=kind, methods=methods, interfaces=interfaces
    )


def _extract_or_skip(
    bridge: JvmBridge, class_name: str, *, skip_failures: bool
) -> ClassEntry | None:
    """Extract a class, applying the per-class error policy."""
    try:
        return extract_class(bridge, class_name)
    except MalformedDescriptorError as e:
        logger.warning("Skipping %s: %s", class_name, e)
        return None
    except Exception as e:
        if skip_failures:
            logger.warning("Skipping %s: extraction failed: %s", class_name, e)
            return None
        raise ExtractionError(class_name, e) from e


def build_class_tree(
    bridge: JvmBridge,
    root: str,
    *,
    workers: int = 8,
    skip_failures: bool = False,
) -> list[ClassEntry]:
    """Extract every class whose name starts with ``root``, sorted by name.

    Classes are introspected in parallel. By default the first failure aborts
    the run; with ``skip_failures`` failing classes are logged and left out.
    Malformed type names always skip only the class they appear in.
    """
    names = sorted(
        n for n in bridge.class_names() if n.startswith(root) and is_bindable(n)
    )
    logger.info("Found %d classes in package %s", len(names), root or "<all>")

    entries: list[ClassEntry] = []
    with ThreadPoolExecutor(max_workers=max(1, workers)) as executor:
        futures = [
            executor.submit(_extract_or_skip, bridge, n, skip_failures=skip_failures)
            for n in names
        ]
        try:
            for future in as_completed(futures):
                entry = future.result()
                if entry is not None:
                    entries.append(entry)
        except BaseException:
            for future in futures:
                future.cancel()
            raise

    return sorted(entries, key=lambda e: e.name)
