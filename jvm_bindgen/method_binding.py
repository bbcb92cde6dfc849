"""Typed description of one generated Rust wrapper function."""

import logging
from dataclasses import dataclass

from jvm_bindgen.descriptors import method_descriptor
from jvm_bindgen.marshalling import marshal_argument, unmarshal_return
from jvm_bindgen.models import ArrayRef, MethodEntry, ObjectRef, TypeRef
from jvm_bindgen.rename import has_rust_name, rename_member
from jvm_bindgen.type_mapper import MappedType, TypeMapper

logger = logging.getLogger(__name__)

# lambda$run$0, access$000 and other compiler generated names
SYNTHETIC_MARKER = "$"
LAMBDA_MARKER = "lambda$"


@dataclass(frozen=True)
class Parameter:
    """A wrapper parameter, always named ``arg<index>``."""

    name: str
    rust_type: MappedType


@dataclass(frozen=True)
class MethodBinding:
    """Everything needed to render one wrapper around a JVM method."""

    rust_name: str
    java_name: str
    java_class: str  # slash form, e.g. com/foo/Bar$Baz
    descriptor: str
    is_static: bool
    parameters: tuple[Parameter, ...]
    return_type: MappedType | None
    marshalling: tuple[str, ...]
    unmarshalling: tuple[str, ...]
    pending: tuple[str, ...] = ()

    @property
    def complete(self) -> bool:
        """False when the wrapper contains placeholders."""
        return not self.pending


def is_synthetic(method: MethodEntry) -> bool:
    """Check if a method is compiler generated (lambdas, bridges, accessors)."""
    if SYNTHETIC_MARKER in method.name:
        return True
    return any(
        isinstance(arg, ObjectRef) and LAMBDA_MARKER in arg.class_name
        for arg in method.arguments
    )


def unnameable_types(method: MethodEntry) -> list[str]:
    """Classes in the signature that have no Rust name, e.g. ``Foo$``."""
    types: list[TypeRef] = list(method.arguments)
    if method.return_type is not None:
        types.append(method.return_type)
    names = []
    for type_ref in types:
        if isinstance(type_ref, ArrayRef):
            type_ref = type_ref.innermost
        if isinstance(type_ref, ObjectRef) and not has_rust_name(type_ref.class_name):
            names.append(type_ref.class_name)
    return names


def build_method_binding(
    method: MethodEntry, mapper: TypeMapper
) -> MethodBinding | None:
    """Describe the wrapper for ``method``.

    None for synthetic methods and for methods whose signature mentions a
    class that has no Rust name.
    """
    if is_synthetic(method):
        return None
    unnameable = unnameable_types(method)
    if unnameable:
        logger.warning(
            "Skipping %s.%s: no Rust name for %s",
            method.declaring_class,
            method.name,
            ", ".join(unnameable),
        )
        return None

    parameters = []
    marshalling: list[str] = []
    pending: list[str] = []
    for idx, arg in enumerate(method.arguments):
        parameters.append(Parameter(f"arg{idx}", mapper.rust_type(arg)))
        snippet = marshal_argument(idx, arg)
        marshalling.extend(snippet.lines)
        if snippet.pending:
            pending.append(f"arg{idx}: {snippet.pending}")

    return_type = None
    if method.return_type is not None:
        return_type = mapper.rust_type(method.return_type)
    decoded = unmarshal_return(method.return_type)
    if decoded.pending:
        pending.append(f"return: {decoded.pending}")

    return MethodBinding(
        rust_name=rename_member(method.name),
        java_name=method.name,
        java_class=method.declaring_class.replace(".", "/"),
        descriptor=method_descriptor(method.arguments, method.return_type),
        is_static=method.is_static,
        parameters=tuple(parameters),
        return_type=return_type,
        marshalling=tuple(marshalling),
        unmarshalling=decoded.lines,
        pending=tuple(pending),
    )
