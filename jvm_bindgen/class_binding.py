"""Typed description of the Rust module generated for one JVM class."""

import dataclasses
import logging
from collections.abc import Mapping
from dataclasses import dataclass

from jvm_bindgen.method_binding import MethodBinding, build_method_binding
from jvm_bindgen.models import ClassEntry, ClassKind
from jvm_bindgen.rename import has_rust_name, rename_class_fq
from jvm_bindgen.type_mapper import TypeMapper

logger = logging.getLogger(__name__)

MARKER_PREFIX = "Is"


@dataclass(frozen=True)
class ClassBinding:
    """A handle struct, its marker traits and its method wrappers."""

    java_name: str  # com.foo.Bar$Baz
    java_path: str  # com/foo/Bar$Baz, the name JNI expects
    rust_path: str  # com::foo::bar_p::Baz
    rust_name: str  # Baz
    kind: ClassKind
    marker_trait: str | None
    implements: tuple[str, ...]
    methods: tuple[MethodBinding, ...]

    @property
    def pending(self) -> list[str]:
        """Notes of every wrapper left with placeholders."""
        return [f"{m.rust_name}: {note}" for m in self.methods for note in m.pending]


def marker_trait_name(rust_name: str) -> str:
    """Name of the member-less trait standing for a Java interface."""
    return f"{MARKER_PREFIX}{rust_name}"


def marker_trait_path(interface: str, mapper: TypeMapper) -> str:
    """Full path of the marker trait generated for ``interface``."""
    module, _, name = mapper.binding_path(interface).rpartition("::")
    trait = marker_trait_name(name)
    return f"{module}::{trait}" if module else trait


def _unique_names(methods: list[MethodBinding]) -> list[MethodBinding]:
    """Give overloads distinct names: ``foo``, ``foo_1``, ``foo_2``..."""
    taken = {m.rust_name for m in methods}
    seen: set[str] = set()
    result = []
    for method in methods:
        name = method.rust_name
        if name in seen:
            counter = 1
            while f"{name}_{counter}" in taken:
                counter += 1
            name = f"{name}_{counter}"
            taken.add(name)
            method = dataclasses.replace(method, rust_name=name)
        seen.add(name)
        result.append(method)
    return result


def build_class_binding(
    entry: ClassEntry,
    mapper: TypeMapper,
    known_classes: Mapping[str, ClassEntry] | None = None,
) -> ClassBinding:
    """Describe the generated module for ``entry``.

    When ``known_classes`` is given, marker impls are only emitted for
    interfaces that get a binding of their own; others are logged and
    left out since their trait would not exist.
    """
    rust_path = rename_class_fq(entry.name).replace(".", "::")
    rust_name = rust_path.rpartition("::")[2]

    marker = None
    if entry.kind in (ClassKind.INTERFACE, ClassKind.ANNOTATION):
        marker = marker_trait_name(rust_name)

    implements = []
    for interface in entry.interfaces:
        if known_classes is not None and interface not in known_classes:
            logger.debug(
                "%s implements %s which has no binding", entry.name, interface
            )
            continue
        if not has_rust_name(interface):
            logger.debug("%s implements unnameable %s", entry.name, interface)
            continue
        implements.append(marker_trait_path(interface, mapper))

    methods = [
        binding
        for binding in (build_method_binding(m, mapper) for m in entry.methods)
        if binding is not None
    ]
    skipped = len(entry.methods) - len(methods)
    if skipped:
        logger.debug("Skipped %d synthetic methods of %s", skipped, entry.name)

    return ClassBinding(
        java_name=entry.name,
        java_path=entry.name.replace(".", "/"),
        rust_path=rust_path,
        rust_name=rust_name,
        kind=entry.kind,
        marker_trait=marker,
        implements=tuple(implements),
        methods=tuple(_unique_names(methods)),
    )
