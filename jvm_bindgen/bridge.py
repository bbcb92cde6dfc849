"""The capability through which class metadata is read from a JVM."""

from dataclasses import dataclass
from typing import Protocol

STATIC_MODIFIER = 0x0008


@dataclass(frozen=True)
class RawMethod:
    """A ``java.lang.reflect.Method`` as reported by reflection.

    Type names use ``Class.getName()`` form: ``int``, ``java.lang.String``,
    ``[I``, ``[Ljava.lang.String;`` and ``void`` for no return value.
    """

    name: str
    modifiers: int
    parameter_types: tuple[str, ...]
    return_type: str
    declaring_class: str

    @property
    def is_static(self) -> bool:
        """Check the ``static`` access flag."""
        return bool(self.modifiers & STATIC_MODIFIER)


class JvmBridge(Protocol):
    """Reflective access to the classes on a classpath.

    Created once per run and passed to the code that needs it.
    """

    def class_names(self) -> list[str]:
        """Names of all classes on the classpath."""
        ...

    def is_interface(self, class_name: str) -> bool:
        """``Class.isInterface()``."""
        ...

    def is_annotation(self, class_name: str) -> bool:
        """``Class.isAnnotation()``."""
        ...

    def interfaces(self, class_name: str) -> list[str]:
        """Names of the interfaces a class directly implements."""
        ...

    def declared_methods(self, class_name: str) -> list[RawMethod]:
        """``Class.getDeclaredMethods()``."""
        ...
