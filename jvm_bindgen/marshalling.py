"""Rust snippets converting between typed values and ``jni`` JValues."""

from dataclasses import dataclass

from jvm_bindgen.descriptors import encode_descriptor
from jvm_bindgen.errors import MalformedDescriptorError
from jvm_bindgen.models import ArrayRef, ObjectRef, Primitive, PrimitiveKind, TypeRef
from jvm_bindgen.type_mapper import is_first_class

JVALUE = "jni::objects::JValue"
JOBJECT = "jni::objects::JObject"

# PrimitiveKind -> (JValue variant, conversion suffix, JValue accessor)
PRIMITIVE_JVALUES: dict[PrimitiveKind, tuple[str, str, str]] = {
    PrimitiveKind.BOOLEAN: ("Bool", " as u8", "z"),
    PrimitiveKind.BYTE: ("Byte", " as i8", "b"),
    PrimitiveKind.CHAR: ("Char", "", "c"),
    PrimitiveKind.SHORT: ("Short", "", "s"),
    PrimitiveKind.INT: ("Int", "", "i"),
    PrimitiveKind.LONG: ("Long", "", "j"),
    PrimitiveKind.FLOAT: ("Float", "", "f"),
    PrimitiveKind.DOUBLE: ("Double", "", "d"),
}


@dataclass(frozen=True)
class Snippet:
    """Lines of Rust code, plus a note when they contain a placeholder."""

    lines: tuple[str, ...]
    pending: str | None = None


def _primitive_array(target: str, source: str, kind: PrimitiveKind) -> list[str]:
    """Allocate a JVM primitive array ``target`` filled from Vec ``source``."""
    if kind is PrimitiveKind.BYTE:
        return [
            f"let {target} = env.byte_array_from_slice(&{source})?;",
        ]
    name = kind.java_name
    lines = []
    if kind is PrimitiveKind.BOOLEAN:
        lines.append(
            f"let {target}_raw: Vec<u8> = {source}.iter().map(|&v| v as u8).collect();"
        )
        source = f"{target}_raw"
    lines += [
        f"let {target} = env.new_{name}_array({source}.len() as i32)?;",
        f"env.set_{name}_array_region({target}, 0, &{source})?;",
    ]
    return lines


def _object_array(arg: str, element: TypeRef) -> list[str]:
    """Allocate a JVM array of arrays or objects filled from Vec ``arg``."""
    element_class = encode_descriptor(element)
    if isinstance(element, ObjectRef):
        element_class = element.class_name.replace(".", "/")
    lines = [
        f"let {arg}_array = env.new_object_array("
        f'{arg}.len() as i32, "{element_class}", {JOBJECT}::null())?;',
        f"for (i, item) in {arg}.into_iter().enumerate() {{",
    ]
    if isinstance(element, ArrayRef):
        inner = element.element
        if not isinstance(inner, Primitive):
            msg = f"Unsupported nested array element {encode_descriptor(inner)}"
            raise MalformedDescriptorError(msg)
        lines += [f"    {line}" for line in _primitive_array("row", "item", inner.kind)]
        lines.append(
            f"    env.set_object_array_element({arg}_array, i as i32, "
            f"{JOBJECT}::from(row))?;"
        )
    else:
        lines += [
            f"    let item: {JVALUE} = item.into();",
            f"    env.set_object_array_element({arg}_array, i as i32, item.l()?)?;",
        ]
    lines.append("}")
    return lines


def marshal_argument(index: int, type_ref: TypeRef) -> Snippet:
    """Convert parameter ``arg<index>`` into the JValue passed to the bridge."""
    arg = f"arg{index}"
    if isinstance(type_ref, Primitive):
        variant, cast, _ = PRIMITIVE_JVALUES[type_ref.kind]
        return Snippet((f"let {arg} = {JVALUE}::{variant}({arg}{cast});",))
    if isinstance(type_ref, ObjectRef):
        return Snippet((f"let {arg}: {JVALUE} = {arg}.into();",))

    descriptor = encode_descriptor(type_ref)
    if not is_first_class(type_ref):
        pending = f"marshalling of {descriptor} arguments is not implemented"
        return Snippet((f'let {arg}: {JVALUE} = todo!("{pending}");',), pending)

    element = type_ref.element
    if isinstance(element, Primitive):
        lines = _primitive_array(f"{arg}_array", arg, element.kind)
    else:
        lines = _object_array(arg, element)
    lines.append(f"let {arg} = {JVALUE}::Object({JOBJECT}::from({arg}_array));")
    return Snippet(tuple(lines))


def unmarshal_return(return_type: TypeRef | None) -> Snippet:
    """Decode the bridge's ``jvalue`` into the wrapper's ``Ok`` result."""
    if return_type is None:
        return Snippet(("Ok(())",))
    if isinstance(return_type, Primitive):
        _, _, accessor = PRIMITIVE_JVALUES[return_type.kind]
        value = f"jvalue.{accessor}()?"
        if return_type.kind is PrimitiveKind.BYTE:
            value = f"{value} as u8"
        return Snippet((f"let value = {value};", "Ok(value)"))

    pending = (
        f"decoding of {encode_descriptor(return_type)} return values "
        "is not implemented"
    )
    return Snippet(("let _ = jvalue;", f'todo!("{pending}")'), pending)
