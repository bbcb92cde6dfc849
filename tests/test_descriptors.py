"""Tests for JNI descriptors and Class.getName() parsing."""

import pytest

from jvm_bindgen.descriptors import (
    decode_descriptor,
    encode_descriptor,
    method_descriptor,
    parse_class_name,
)
from jvm_bindgen.errors import MalformedDescriptorError
from jvm_bindgen.models import ArrayRef, ObjectRef, Primitive, PrimitiveKind

INT = Primitive(PrimitiveKind.INT)
STRING = ObjectRef("java.lang.String")


@pytest.mark.parametrize(
    ("kind", "letter"),
    [
        (PrimitiveKind.BOOLEAN, "Z"),
        (PrimitiveKind.BYTE, "B"),
        (PrimitiveKind.CHAR, "C"),
        (PrimitiveKind.SHORT, "S"),
        (PrimitiveKind.INT, "I"),
        (PrimitiveKind.LONG, "J"),
        (PrimitiveKind.FLOAT, "F"),
        (PrimitiveKind.DOUBLE, "D"),
    ],
)
def test_primitive_descriptors(kind: PrimitiveKind, letter: str) -> None:
    """Every primitive has a one-letter descriptor that decodes back."""
    assert encode_descriptor(Primitive(kind)) == letter
    assert decode_descriptor(letter) == Primitive(kind)


def test_object_descriptor() -> None:
    """Classes use slash-separated names wrapped in L...;."""
    assert encode_descriptor(STRING) == "Ljava/lang/String;"
    assert decode_descriptor("Ljava/lang/String;") == STRING


def test_nested_class_descriptor_keeps_dollar() -> None:
    """The nesting marker is part of the JVM name and must survive."""
    assert encode_descriptor(ObjectRef("com.foo.Bar$Baz")) == "Lcom/foo/Bar$Baz;"


def test_array_descriptors() -> None:
    """Each array dimension adds a leading bracket."""
    assert encode_descriptor(ArrayRef(ArrayRef(INT))) == "[[I"
    assert encode_descriptor(ArrayRef(STRING)) == "[Ljava/lang/String;"
    assert decode_descriptor("[[[I") == ArrayRef(ArrayRef(ArrayRef(INT)))


def test_method_descriptor() -> None:
    """Arguments are concatenated; no return value is V."""
    assert method_descriptor([], None) == "()V"
    assert method_descriptor([INT, STRING], INT) == "(ILjava/lang/String;)I"
    assert method_descriptor([ArrayRef(INT)], ArrayRef(STRING)) == (
        "([I)[Ljava/lang/String;"
    )


@pytest.mark.parametrize("text", ["", "Q", "[", "Ljava/lang/String", "L;", "II"])
def test_decode_malformed(text: str) -> None:
    """Unknown markers, truncation and trailing text are rejected."""
    with pytest.raises(MalformedDescriptorError):
        decode_descriptor(text)


def test_parse_class_name_primitives_and_classes() -> None:
    """Keywords are primitives, dotted names are classes."""
    assert parse_class_name("int") == INT
    assert parse_class_name("boolean") == Primitive(PrimitiveKind.BOOLEAN)
    assert parse_class_name("java.lang.String") == STRING
    assert parse_class_name("com.foo.Bar$Baz") == ObjectRef("com.foo.Bar$Baz")


def test_parse_class_name_arrays() -> None:
    """Array names are descriptors with dots, nested per dimension."""
    assert parse_class_name("[I") == ArrayRef(INT)
    assert parse_class_name("[[B") == ArrayRef(
        ArrayRef(Primitive(PrimitiveKind.BYTE))
    )
    assert parse_class_name("[Ljava.lang.String;") == ArrayRef(STRING)
    assert parse_class_name("[[Ljava.lang.String;") == ArrayRef(ArrayRef(STRING))


@pytest.mark.parametrize("name", ["", "[Q", "[Ljava.lang.String", ";foo"])
def test_parse_class_name_malformed(name: str) -> None:
    """Names with broken descriptor syntax are reported."""
    with pytest.raises(MalformedDescriptorError):
        parse_class_name(name)


def test_malformed_is_value_error() -> None:
    """Callers catching ValueError also see descriptor errors."""
    with pytest.raises(ValueError, match="Unrecognized"):
        decode_descriptor("X")
