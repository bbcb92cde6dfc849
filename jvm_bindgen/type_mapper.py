"""Mapping of JVM types onto Rust type expressions.

Primitives map to fixed-width Rust scalars, classes to the renamed module path
of their generated binding (or to an operator-configured override), and
arrays to ``Vec``. Only some array shapes can be marshalled by the emitter;
:class:`MappedType` carries a ``complete`` flag so callers can mark the rest.
"""

import logging
from dataclasses import dataclass

from jvm_bindgen.descriptors import encode_descriptor
from jvm_bindgen.models import ArrayRef, ObjectRef, Primitive, PrimitiveKind, TypeRef
from jvm_bindgen.rename import rename_class_fq

logger = logging.getLogger(__name__)

DEFAULT_MODULE_ROOT = "crate::bindings"

PRIMITIVE_RUST_TYPES: dict[PrimitiveKind, str] = {
    PrimitiveKind.BOOLEAN: "bool",
    PrimitiveKind.BYTE: "u8",
    PrimitiveKind.CHAR: "u16",
    PrimitiveKind.SHORT: "i16",
    PrimitiveKind.INT: "i32",
    PrimitiveKind.LONG: "i64",
    PrimitiveKind.FLOAT: "f32",
    PrimitiveKind.DOUBLE: "f64",
}

# Two-dimensional arrays the emitter knows how to handle.
MAX_SUPPORTED_DIMENSIONS = 2
SUPPORTED_2D_ARRAYS = frozenset({PrimitiveKind.INT, PrimitiveKind.BYTE})


@dataclass(frozen=True)
class MappedType:
    """A Rust type expression and whether it is fully supported."""

    text: str
    complete: bool = True


def strip_descriptor_punctuation(class_name: str) -> str:
    """Remove descriptor characters the JVM leaves in some class names.

    ``[Ljava.lang.String;`` and ``Ljava/lang/String;`` both become
    ``java.lang.String``.
    """
    name = class_name.lstrip("[")
    if name.startswith("L") and name.endswith(";"):
        name = name[1:-1]
    return name.rstrip(";").replace("/", ".")


def is_first_class(type_ref: TypeRef) -> bool:
    """Whether values of this type can be passed without placeholders."""
    if not isinstance(type_ref, ArrayRef):
        return True
    dims = type_ref.dimensions
    if dims == 1:
        return True
    inner = type_ref.innermost
    return (
        dims == MAX_SUPPORTED_DIMENSIONS
        and isinstance(inner, Primitive)
        and inner.kind in SUPPORTED_2D_ARRAYS
    )


class TypeMapper:
    """Resolves JVM types to Rust types, honouring configured mappings."""

    def __init__(
        self,
        mappings: dict[str, str] | None = None,
        module_root: str = DEFAULT_MODULE_ROOT,
    ) -> None:
        """Create a mapper over a ``canonical path -> Rust type`` table."""
        self.mappings = dict(mappings or {})
        self.module_root = module_root

    def descriptor(self, type_ref: TypeRef) -> str:
        """The JNI descriptor of ``type_ref``; mappings never affect it."""
        return encode_descriptor(type_ref)

    def canonical_path(self, class_name: str) -> str:
        """The renamed ``::`` path of a class, used as the mapping key."""
        renamed = rename_class_fq(strip_descriptor_punctuation(class_name))
        return renamed.replace(".", "::")

    def object_type(self, class_name: str) -> str:
        """The Rust type for a class: the mapping override or its binding."""
        mapped = self.mappings.get(self.canonical_path(class_name))
        if mapped is not None:
            return mapped
        return self.binding_path(class_name)

    def binding_path(self, class_name: str) -> str:
        """The path of the generated binding, ignoring mappings."""
        path = self.canonical_path(class_name)
        if self.module_root:
            return f"{self.module_root}::{path}"
        return path

    def rust_type(self, type_ref: TypeRef) -> MappedType:
        """Map ``type_ref`` to a Rust type expression."""
        if isinstance(type_ref, Primitive):
            return MappedType(PRIMITIVE_RUST_TYPES[type_ref.kind])
        if isinstance(type_ref, ObjectRef):
            return MappedType(self.object_type(type_ref.class_name))

        element = type_ref.element
        text = f"Vec<{self.rust_type(element).text}>"
        complete = is_first_class(type_ref)
        if not complete:
            logger.debug(
                "Array type %s is only partially supported",
                encode_descriptor(type_ref),
            )
        return MappedType(text, complete)
