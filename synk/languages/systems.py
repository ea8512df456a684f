"""Compiled and statically typed languages."""

from __future__ import annotations

from synk.languages.spec import LanguageSpec

_RUST = LanguageSpec(
    name="rust",
    keywords=(
        "fn", "let", "mut", "pub", "struct", "enum", "impl", "trait", "use",
        "mod", "const", "static", "match", "if", "else", "while", "loop",
        "for", "in", "return", "break", "continue", "as", "crate", "super",
        "self", "Self", "ref", "move", "type", "where", "unsafe", "extern",
        "dyn", "async", "await", "println!",
    ),
    function_definers=("fn",),
)

_C = LanguageSpec(
    name="c",
    keywords=(
        "auto", "break", "case", "char", "const", "continue", "default", "do",
        "double", "else", "enum", "extern", "float", "for", "goto", "if",
        "int", "long", "register", "return", "short", "signed", "sizeof",
        "static", "struct", "switch", "typedef", "union", "unsigned", "void",
        "volatile",
    ),
    function_definers=("void", "int", "float", "double", "char"),
)

_CPP = LanguageSpec(
    name="cpp",
    keywords=(
        "alignas", "alignof", "asm", "auto", "bitand", "bitor", "bool",
        "break", "case", "catch", "char", "class", "compl", "concept",
        "const", "constexpr", "const_cast", "continue", "co_await",
        "co_return", "co_yield", "decltype", "default", "delete", "do",
        "double", "dynamic_cast", "else", "enum", "explicit", "export",
        "extern", "false", "float", "for", "friend", "goto", "if", "import",
        "inline", "int", "long", "mutable", "namespace", "new", "noexcept",
        "not", "nullptr", "operator", "or", "private", "protected", "public",
        "register", "reinterpret_cast", "requires", "return", "short",
        "signed", "sizeof", "static", "static_assert", "static_cast",
        "struct", "switch", "synchronized", "template", "this",
        "thread_local", "throw", "true", "try", "typedef", "typeid",
        "typename", "union", "unsigned", "using", "virtual", "void",
        "volatile", "wchar_t", "while", "xor", "xorl",
    ),
    function_definers=("void", "int", "float", "double", "char", "auto"),
)

_GO = LanguageSpec(
    name="go",
    keywords=(
        "func", "package", "import", "var", "const", "type", "struct",
        "interface", "map", "chan", "go", "defer", "select", "if", "else",
        "switch", "case", "for", "range", "break", "continue", "return",
        "fallthrough", "default", "goto", "true", "false", "nil",
    ),
    function_definers=("func",),
)

_SWIFT = LanguageSpec(
    name="swift",
    keywords=(
        "func", "class", "struct", "enum", "protocol", "extension", "import",
        "let", "var", "if", "else", "for", "while", "repeat", "switch",
        "case", "break", "continue", "return", "throw", "throws", "try", "in",
        "where", "as", "is", "super", "self", "true", "false", "nil",
    ),
    function_definers=("func",),
)

_CSHARP = LanguageSpec(
    name="csharp",
    keywords=(
        "class", "interface", "enum", "struct", "public", "private",
        "protected", "internal", "static", "readonly", "const", "void", "int",
        "float", "double", "char", "bool", "string", "object", "if", "else",
        "for", "while", "do", "switch", "case", "break", "continue", "return",
        "try", "catch", "finally", "throw", "using", "namespace", "new",
        "this", "base", "override", "virtual", "abstract", "sealed", "event",
        "delegate", "params", "out", "ref", "in", "is", "as", "true", "false",
        "null",
    ),
    function_definers=(
        "void", "int", "float", "double", "char", "bool", "string", "object",
    ),
)

_JAVA = LanguageSpec(
    name="java",
    keywords=(
        "class", "interface", "enum", "public", "private", "protected",
        "static", "final", "abstract", "synchronized", "volatile",
        "transient", "native", "strictfp", "void", "int", "float", "double",
        "char", "boolean", "byte", "short", "long", "if", "else", "for",
        "while", "do", "switch", "case", "break", "continue", "return", "try",
        "catch", "finally", "throw", "throws", "import", "package", "super",
        "this", "new", "instanceof", "extends", "implements", "true", "false",
        "null",
    ),
    function_definers=(
        "void", "int", "float", "double", "char", "boolean", "byte", "short",
        "long",
    ),
)

_KOTLIN = LanguageSpec(
    name="kotlin",
    keywords=(
        "fun", "class", "object", "interface", "enum", "data", "sealed",
        "val", "var", "if", "else", "when", "for", "while", "do", "break",
        "continue", "return", "throw", "try", "catch", "finally", "import",
        "package", "in", "is", "as", "this", "super", "true", "false", "null",
    ),
    function_definers=("fun",),
)


def specs() -> dict[str, LanguageSpec]:
    """Specs of the systems languages, keyed by language name."""
    return {
        spec.name: spec
        for spec in (_RUST, _C, _CPP, _GO, _SWIFT, _CSHARP, _JAVA, _KOTLIN)
    }