"""Data models for classes, methods and types extracted from the JVM."""

from dataclasses import dataclass
from enum import Enum


class ClassKind(Enum):
    """What kind of type a JVM class is."""

    CLASS = "class"
    INTERFACE = "interface"
    ANNOTATION = "annotation"


class PrimitiveKind(Enum):
    """The eight JVM primitive types, valued by their descriptor letter."""

    BOOLEAN = "Z"
    BYTE = "B"
    CHAR = "C"
    SHORT = "S"
    INT = "I"
    LONG = "J"
    FLOAT = "F"
    DOUBLE = "D"

    @property
    def java_name(self) -> str:
        """The Java keyword for this primitive, e.g. ``int``."""
        return self.name.lower()

    @classmethod
    def from_java_name(cls, name: str) -> "PrimitiveKind | None":
        """Look up a primitive by its Java keyword."""
        try:
            return cls[name.upper()] if name.islower() else None
        except KeyError:
            return None


@dataclass(frozen=True)
class Primitive:
    """A primitive type such as ``int``."""

    kind: PrimitiveKind


@dataclass(frozen=True)
class ObjectRef:
    """A reference to a class by its fully qualified name."""

    class_name: str


@dataclass(frozen=True)
class ArrayRef:
    """An array; multi-dimensional arrays nest one ArrayRef per dimension."""

    element: "TypeRef"

    @property
    def dimensions(self) -> int:
        """Number of array dimensions."""
        depth = 1
        element = self.element
        while isinstance(element, ArrayRef):
            depth += 1
            element = element.element
        return depth

    @property
    def innermost(self) -> "Primitive | ObjectRef":
        """The non-array type at the bottom of the nesting."""
        element = self.element
        while isinstance(element, ArrayRef):
            element = element.element
        return element


TypeRef = Primitive | ObjectRef | ArrayRef


@dataclass(frozen=True)
class MethodEntry:
    """A method declared on a JVM class."""

    name: str
    is_static: bool
    arguments: tuple[TypeRef, ...]
    return_type: TypeRef | None
    declaring_class: str


@dataclass(frozen=True)
class ClassEntry:
    """A JVM class with its declared methods and implemented interfaces."""

    name: str  # com.foo.Outer$Inner
    kind: ClassKind
    methods: tuple[MethodEntry, ...] = ()
    interfaces: tuple[str, ...] = ()


def class_table(classes: list[ClassEntry]) -> dict[str, ClassEntry]:
    """Index classes by their fully qualified name."""
    return {c.name: c for c in classes}
