"""Dynamic, scripting and functional languages."""

from __future__ import annotations

from synk.languages.spec import LanguageSpec

_PYTHON = LanguageSpec(
    name="python",
    keywords=(
        "def", "class", "if", "elif", "else", "for", "while", "break",
        "continue", "return", "import", "from", "as", "pass", "raise", "try",
        "except", "finally", "with", "lambda", "yield", "global", "nonlocal",
        "assert", "del", "not", "and", "or", "is", "in", "True", "False",
        "None",
    ),
    function_definers=("def", "lambda"),
)

_JAVASCRIPT = LanguageSpec(
    name="javascript",
    keywords=(
        "function", "var", "let", "const", "if", "else", "for", "while", "do",
        "switch", "case", "break", "continue", "return", "try", "catch",
        "finally", "throw", "class", "extends", "super", "import", "export",
        "default", "new", "this", "delete", "typeof", "instanceof", "in",
        "of", "await", "async", "yield", "true", "false", "null",
        "undefined", "console",
    ),
    function_definers=("function", "=>"),
)

_TYPESCRIPT = LanguageSpec(
    name="typescript",
    keywords=(
        "function", "var", "let", "const", "if", "else", "for", "while", "do",
        "switch", "case", "break", "continue", "return", "try", "catch",
        "finally", "throw", "class", "extends", "super", "import", "export",
        "default", "new", "this", "delete", "typeof", "instanceof", "in",
        "of", "await", "async", "yield", "interface", "enum", "implements",
        "public", "private", "protected", "readonly", "abstract", "as",
        "asserts", "unknown", "never", "any", "void", "undefined", "null",
        "true", "false",
    ),
    function_definers=("function", "=>"),
)

_PHP = LanguageSpec(
    name="php",
    keywords=(
        "function", "class", "interface", "trait", "public", "private",
        "protected", "static", "abstract", "final", "const", "var", "if",
        "else", "elseif", "for", "foreach", "while", "do", "switch", "case",
        "break", "continue", "return", "try", "catch", "finally", "throw",
        "use", "namespace", "new", "clone", "instanceof", "extends",
        "implements", "echo", "print", "require", "include", "require_once",
        "include_once", "global", "isset", "unset", "empty", "array", "list",
        "true", "false", "null",
    ),
    function_definers=("function",),
)

_RUBY = LanguageSpec(
    name="ruby",
    keywords=(
        "def", "class", "module", "if", "elsif", "else", "unless", "case",
        "when", "while", "until", "for", "break", "next", "redo", "retry",
        "return", "yield", "super", "self", "nil", "true", "false", "and",
        "or", "not", "in", "do", "end",
    ),
    function_definers=("def",),
)

_BASH = LanguageSpec(
    name="bash",
    keywords=(
        "if", "then", "else", "elif", "fi", "case", "esac", "for", "select",
        "while", "until", "do", "done", "in", "function", "time", "coproc",
        "break", "continue", "return", "exit", "export", "readonly",
        "declare", "typeset", "local", "let", "eval", "test", "true",
        "false",
    ),
    function_definers=("function",),
)

_HASKELL = LanguageSpec(
    name="haskell",
    keywords=(
        "let", "in", "where", "module", "import", "data", "type", "newtype",
        "class", "instance", "deriving", "if", "then", "else", "case", "of",
        "do", "default", "infix", "infixl", "infixr", "foreign", "forall",
        "mdo", "rec", "proc", "family", "role", "pattern", "static", "group",
        "by", "using", "qualified", "as", "hiding",
    ),
    function_definers=("let", "where"),
)


def specs() -> dict[str, LanguageSpec]:
    """Specs of the scripting languages, keyed by language name."""
    return {
        spec.name: spec
        for spec in (
            _PYTHON, _JAVASCRIPT, _TYPESCRIPT, _PHP, _RUBY, _BASH, _HASKELL,
        )
    }