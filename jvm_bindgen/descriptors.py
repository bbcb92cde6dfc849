"""JNI type descriptors and ``Class.getName()`` parsing."""

from collections.abc import Sequence

from jvm_bindgen.errors import MalformedDescriptorError
from jvm_bindgen.models import ArrayRef, ObjectRef, Primitive, PrimitiveKind, TypeRef

VOID_DESCRIPTOR = "V"


def encode_descriptor(type_ref: TypeRef) -> str:
    """Encode a type as a JNI field descriptor, e.g. ``[Ljava/lang/String;``."""
    if isinstance(type_ref, Primitive):
        return type_ref.kind.value
    if isinstance(type_ref, ObjectRef):
        return f"L{type_ref.class_name.replace('.', '/')};"
    return "[" + encode_descriptor(type_ref.element)


def method_descriptor(
    arguments: Sequence[TypeRef], return_type: TypeRef | None
) -> str:
    """Encode a method signature, e.g. ``(ILjava/lang/String;)V``."""
    args = "".join(encode_descriptor(a) for a in arguments)
    ret = encode_descriptor(return_type) if return_type else VOID_DESCRIPTOR
    return f"({args}){ret}"


def _decode_at(text: str, pos: int) -> tuple[TypeRef, int]:
    """Decode one field descriptor starting at ``pos``; return it and the end."""
    if pos >= len(text):
        msg = f"Truncated descriptor: {text!r}"
        raise MalformedDescriptorError(msg)
    marker = text[pos]
    if marker == "[":
        element, end = _decode_at(text, pos + 1)
        return ArrayRef(element), end
    if marker == "L":
        end = text.find(";", pos)
        if end <= pos + 1:
            msg = f"Unterminated class name in descriptor: {text!r}"
            raise MalformedDescriptorError(msg)
        class_name = text[pos + 1 : end].replace("/", ".")
        return ObjectRef(class_name), end + 1
    try:
        return Primitive(PrimitiveKind(marker)), pos + 1
    except ValueError:
        msg = f"Unrecognized descriptor marker {marker!r} in {text!r}"
        raise MalformedDescriptorError(msg) from None


def decode_descriptor(text: str) -> TypeRef:
    """Decode a single JNI field descriptor; the whole text must be used."""
    type_ref, end = _decode_at(text, 0)
    if end != len(text):
        msg = f"Trailing characters in descriptor: {text!r}"
        raise MalformedDescriptorError(msg)
    return type_ref


def parse_class_name(name: str) -> TypeRef:
    """Parse a ``Class.getName()`` string into a type.

    Primitives come as keywords (``int``), classes as dotted names
    (``java.lang.String``) and arrays in descriptor form with dots
    (``[[Ljava.lang.String;``). ``void`` is not a type; callers handle it.
    """
    if not name:
        msg = "Empty type name"
        raise MalformedDescriptorError(msg)
    if name.startswith("["):
        return decode_descriptor(name.replace(".", "/"))
    kind = PrimitiveKind.from_java_name(name)
    if kind is not None:
        return Primitive(kind)
    if name[0] in "(;/" or name.endswith(";"):
        msg = f"Unexpected descriptor punctuation in class name: {name!r}"
        raise MalformedDescriptorError(msg)
    return ObjectRef(name)
