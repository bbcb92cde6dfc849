"""Render a ClassBinding as Rust source text."""

from jvm_bindgen.class_binding import ClassBinding
from jvm_bindgen.method_binding import MethodBinding

INDENT = "    "
ENV_TYPE = "&'a jni::JNIEnv<'a>"
JVALUE_TYPE = "jni::objects::JValue<'a>"


def _render_header(binding: ClassBinding, config_hash: str | None) -> list[str]:
    """Render the generated-file banner."""
    origin = f"// Generated by jvm-bindgen from {binding.java_name}"
    if config_hash:
        origin += f" (config {config_hash[:12]})"
    return [origin + ". Do not edit.", ""]


def _render_handle(binding: ClassBinding) -> list[str]:
    """Render the handle struct and the traits every handle implements."""
    name = binding.rust_name
    return [
        f"pub struct {name}<'a> {{",
        f"{INDENT}env: {ENV_TYPE},",
        f"{INDENT}obj: ejni::Object<'a>,",
        "}",
        "",
        f"impl<'a> crate::ClassName for {name}<'a> {{",
        f"{INDENT}fn class_name() -> &'static str {{",
        f'{INDENT * 2}"{binding.java_path}"',
        f"{INDENT}}}",
        "}",
        "",
        f"impl<'a> crate::FromRaw<'a> for {name}<'a> {{",
        f"{INDENT}fn from_raw(env: {ENV_TYPE}, obj: ejni::Object<'a>) -> Self {{",
        f"{INDENT * 2}Self {{ env, obj }}",
        f"{INDENT}}}",
        "}",
        "",
        f"impl<'a> Into<{JVALUE_TYPE}> for {name}<'a> {{",
        f"{INDENT}fn into(self) -> {JVALUE_TYPE} {{",
        f"{INDENT * 2}self.obj.into()",
        f"{INDENT}}}",
        "}",
        "",
    ]


def _render_markers(binding: ClassBinding) -> list[str]:
    """Render the marker trait of an interface and the impls of its parents."""
    name = binding.rust_name
    parts: list[str] = []
    if binding.marker_trait:
        parts += [
            f"pub trait {binding.marker_trait} {{}}",
            "",
            f"impl<'a> {binding.marker_trait} for {name}<'a> {{}}",
            "",
        ]
    for trait in binding.implements:
        parts.append(f"impl<'a> {trait} for {name}<'a> {{}}")
    if binding.implements:
        parts.append("")
    return parts


def _render_method(method: MethodBinding) -> list[str]:
    """Render one wrapper function, indented for an impl block."""
    params = [f"{p.name}: {p.rust_type.text}" for p in method.parameters]
    ret = method.return_type.text if method.return_type else "()"
    args = ", ".join(p.name for p in method.parameters)

    if method.is_static:
        receiver = [f"env: {ENV_TYPE}"]
        call = (
            f'env.call_static_method("{method.java_class}", '
            f'"{method.java_name}", "{method.descriptor}", &[{args}])?'
        )
        prelude: list[str] = []
    else:
        receiver = ["&self"]
        call = (
            f'env.call_method(self.obj.inner, "{method.java_name}", '
            f'"{method.descriptor}", &[{args}])?'
        )
        prelude = ["let env = self.env;"]

    call = f"let jvalue = {call};" if method.return_type else f"{call};"
    body = [*prelude, *method.marshalling, call, *method.unmarshalling]

    signature = ", ".join(receiver + params)
    lines = [f"// TODO {note}" for note in method.pending]
    lines.append(f"pub fn {method.rust_name}({signature}) -> crate::JResult<{ret}> {{")
    lines += [f"{INDENT}{line}" for line in body]
    lines.append("}")
    return [f"{INDENT}{line}" for line in lines]


def render_class(binding: ClassBinding, *, config_hash: str | None = None) -> str:
    """Render the complete Rust module for ``binding``."""
    parts = _render_header(binding, config_hash)
    parts.extend(_render_handle(binding))
    parts.extend(_render_markers(binding))

    parts.append(f"impl<'a> {binding.rust_name}<'a> {{")
    for idx, method in enumerate(binding.methods):
        if idx:
            parts.append("")
        parts.extend(_render_method(method))
    parts.append("}")

    return "\n".join(parts).rstrip() + "\n"
