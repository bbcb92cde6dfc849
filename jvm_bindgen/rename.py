"""Renaming of Java identifiers into Rust-safe module paths.

Java allows package and class names that are reserved words in Rust, uses
mixed case for packages, and marks nested classes with ``$``. The functions
here map a fully qualified Java name such as ``com.Foo.impl.Bar$Baz`` onto a
Rust-friendly dotted path (``com.foo.impl_k.bar_p.Baz``) that the emitter
turns into modules and files.
"""

import re

from jvm_bindgen.errors import MalformedDescriptorError

KEYWORD_SUFFIX = "_k"
SUBCLASS_PARENT_SUFFIX = "_p"

RUST_KEYWORDS = frozenset(
    {
        # strict
        "as",
        "async",
        "await",
        "break",
        "const",
        "continue",
        "crate",
        "dyn",
        "else",
        "enum",
        "extern",
        "false",
        "fn",
        "for",
        "if",
        "impl",
        "in",
        "let",
        "loop",
        "match",
        "mod",
        "move",
        "mut",
        "pub",
        "ref",
        "return",
        "self",
        "Self",
        "static",
        "struct",
        "super",
        "trait",
        "true",
        "type",
        "unsafe",
        "use",
        "where",
        "while",
        # reserved
        "abstract",
        "become",
        "box",
        "do",
        "final",
        "macro",
        "override",
        "priv",
        "typeof",
        "unsized",
        "virtual",
        "yield",
        "try",
        # weak
        "union",
    }
)

# 1. Acronym before a word (XML in XMLParser)
# 2. Word, optionally capitalized, digits stay attached (Vector3, v2)
# 3. Trailing acronym or digits (UI, 2D)
# Matched against the letter shape of a name, see _letter_shape.
WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z0-9]+|[A-Z0-9]+")


def escape_keyword(component: str) -> str:
    """Append ``KEYWORD_SUFFIX`` if ``component`` is a Rust keyword.

    Call this on single name components, e.g. ``impl``, not on full paths.
    """
    if component in RUST_KEYWORDS:
        return f"{component}{KEYWORD_SUFFIX}"
    return component


def _letter_shape(char: str) -> str:
    """Classify a character as A (upper), a (other letter), 0 (digit) or _."""
    if char.isupper():
        return "A"
    if char.isdigit():
        return "0"
    if char.isalnum():
        return "a"
    return "_"


def _words(part: str) -> list[str]:
    """Split ``part`` into words; non-ASCII letters count like ASCII ones."""
    shape = "".join(_letter_shape(c) for c in part)
    return [part[m.start() : m.end()] for m in WORD_RE.finditer(shape)]


def to_snake_case(text: str) -> str:
    """Convert ``text`` to snake_case; idempotent on its own output."""
    words: list[str] = []
    for part in re.split(r"[_\-]+", text):
        words.extend(_words(part))
    if not words:
        return text.lower()
    return "_".join(w.lower() for w in words)


def rename_package(component: str) -> str:
    """Rename a package component: escape keywords and snake-case it."""
    return escape_keyword(to_snake_case(escape_keyword(component)))


def rename_parent_class(name: str) -> str:
    """Turn an enclosing class name into a module segment.

    Escapes keywords, converts to snake case and appends
    ``SUBCLASS_PARENT_SUFFIX`` so ``Bar$Baz`` and a sibling package ``bar``
    never share a directory.
    """
    return f"{to_snake_case(escape_keyword(name))}{SUBCLASS_PARENT_SUFFIX}"


def rename_member(name: str) -> str:
    """Rename a method name, e.g. ``getValue`` -> ``get_value``."""
    return escape_keyword(to_snake_case(name))


def has_rust_name(name: str) -> bool:
    """Check that the innermost class of ``name`` can be a Rust identifier.

    Scala companion objects (``Foo$``) have an empty innermost name and
    local classes (``Outer$1Local``) start with a digit.
    """
    simple = name.rpartition(".")[2].rpartition("$")[2]
    return bool(simple) and not simple[0].isdigit()


def rename_class_fq(name: str) -> str:
    """Rename a fully qualified class name, e.g. ``com.foo.Bar$Baz``.

    Package components are snake-cased, keywords escaped anywhere, and each
    enclosing class of a nested class becomes an extra ``_p`` segment.
    Raises MalformedDescriptorError unless ``has_rust_name`` holds.
    """
    if not has_rust_name(name):
        msg = f"No Rust name for class {name!r}"
        raise MalformedDescriptorError(msg)

    components = name.split(".")
    class_name = escape_keyword(components.pop())
    renamed = [rename_package(c) for c in components]

    # Could be multiple, for several layers of nesting
    while "$" in class_name:
        parent, class_name = class_name.split("$", 1)
        renamed.append(rename_parent_class(parent))

    renamed.append(escape_keyword(class_name))
    return ".".join(renamed)
