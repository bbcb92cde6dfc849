"""Tests for JVM to Rust type mapping."""

import pytest

from jvm_bindgen.models import ArrayRef, ObjectRef, Primitive, PrimitiveKind
from jvm_bindgen.type_mapper import (
    MappedType,
    TypeMapper,
    is_first_class,
    strip_descriptor_punctuation,
)

INT = Primitive(PrimitiveKind.INT)
BYTE = Primitive(PrimitiveKind.BYTE)
DOUBLE = Primitive(PrimitiveKind.DOUBLE)
STRING = ObjectRef("java.lang.String")


@pytest.mark.parametrize(
    ("kind", "rust"),
    [
        (PrimitiveKind.INT, "i32"),
        (PrimitiveKind.BYTE, "u8"),
        (PrimitiveKind.DOUBLE, "f64"),
        (PrimitiveKind.FLOAT, "f32"),
        (PrimitiveKind.SHORT, "i16"),
        (PrimitiveKind.CHAR, "u16"),
        (PrimitiveKind.BOOLEAN, "bool"),
        (PrimitiveKind.LONG, "i64"),
    ],
)
def test_primitive_types(kind: PrimitiveKind, rust: str) -> None:
    """Primitives map to fixed-width Rust scalars."""
    assert TypeMapper().rust_type(Primitive(kind)) == MappedType(rust)


def test_object_type_uses_renamed_path() -> None:
    """Unmapped classes point at their generated binding."""
    mapper = TypeMapper()
    assert mapper.rust_type(STRING).text == "crate::bindings::java::lang::String"
    nested = ObjectRef("com.foo.impl.Bar$Baz")
    assert mapper.rust_type(nested).text == "crate::bindings::com::foo::impl_k::bar_p::Baz"


def test_object_type_without_module_root() -> None:
    """An empty module root yields the bare renamed path."""
    mapper = TypeMapper(module_root="")
    assert mapper.rust_type(STRING).text == "java::lang::String"


def test_mapping_override_wins() -> None:
    """A configured mapping replaces the default path verbatim."""
    mapper = TypeMapper({"java::lang::String": "ejni::JavaString<'a>"})
    assert mapper.rust_type(STRING).text == "ejni::JavaString<'a>"
    assert mapper.rust_type(ArrayRef(STRING)).text == "Vec<ejni::JavaString<'a>>"


def test_mapping_never_changes_descriptor() -> None:
    """Descriptors always use the real JVM name."""
    mapper = TypeMapper({"java::lang::String": "String"})
    assert mapper.descriptor(STRING) == "Ljava/lang/String;"


def test_binding_path_ignores_mappings() -> None:
    """The generated binding's own path is unaffected by overrides."""
    mapper = TypeMapper({"java::lang::String": "String"})
    assert mapper.binding_path("java.lang.String") == "crate::bindings::java::lang::String"


def test_strip_descriptor_punctuation() -> None:
    """Residual descriptor characters are removed from class names."""
    assert strip_descriptor_punctuation("[Ljava.lang.String;") == "java.lang.String"
    assert strip_descriptor_punctuation("Ljava/lang/String;") == "java.lang.String"
    assert strip_descriptor_punctuation("java.lang.String") == "java.lang.String"


def test_punctuated_class_name_resolves_like_clean_one() -> None:
    """A class name with leftover punctuation maps to the same type."""
    mapper = TypeMapper({"java::lang::String": "ejni::JavaString<'a>"})
    dirty = ObjectRef("[Ljava.lang.String;")
    assert mapper.rust_type(dirty).text == "ejni::JavaString<'a>"


def test_array_types() -> None:
    """Arrays become Vec, recursively."""
    mapper = TypeMapper()
    assert mapper.rust_type(ArrayRef(INT)) == MappedType("Vec<i32>")
    assert mapper.rust_type(ArrayRef(ArrayRef(BYTE))) == MappedType("Vec<Vec<u8>>")
    assert mapper.rust_type(ArrayRef(STRING)).text == (
        "Vec<crate::bindings::java::lang::String>"
    )


def test_deep_arrays_are_flagged_incomplete() -> None:
    """Unsupported array shapes keep best-effort text but are marked."""
    mapper = TypeMapper()
    deep = mapper.rust_type(ArrayRef(ArrayRef(ArrayRef(INT))))
    assert deep.text == "Vec<Vec<Vec<i32>>>"
    assert not deep.complete

    double_2d = mapper.rust_type(ArrayRef(ArrayRef(DOUBLE)))
    assert double_2d.text == "Vec<Vec<f64>>"
    assert not double_2d.complete

    objects_2d = mapper.rust_type(ArrayRef(ArrayRef(STRING)))
    assert not objects_2d.complete


def test_is_first_class() -> None:
    """Scalars, objects, 1-D arrays and int/byte 2-D arrays are supported."""
    assert is_first_class(INT)
    assert is_first_class(STRING)
    assert is_first_class(ArrayRef(STRING))
    assert is_first_class(ArrayRef(ArrayRef(INT)))
    assert is_first_class(ArrayRef(ArrayRef(BYTE)))
    assert not is_first_class(ArrayRef(ArrayRef(DOUBLE)))
    assert not is_first_class(ArrayRef(ArrayRef(STRING)))
    assert not is_first_class(ArrayRef(ArrayRef(ArrayRef(BYTE))))
