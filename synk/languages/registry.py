"""Lookup of language specs by name."""

from __future__ import annotations

from synk.languages import markup, scripting, systems
from synk.languages.spec import LanguageSpec

_DEFAULT_LANGUAGE = "rust"

_ORDER = (
    "rust", "python", "javascript", "c", "cpp", "java", "go", "swift",
    "kotlin", "php", "ruby", "typescript", "csharp", "haskell", "bash",
    "html", "css", "sql",
)


def _build_registry() -> dict[str, LanguageSpec]:
    merged = {**systems.specs(), **scripting.specs(), **markup.specs()}
    return {name: merged[name] for name in _ORDER}


_REGISTRY = _build_registry()


def get_language_config(language: str) -> LanguageSpec:
    """Spec for ``language``; unknown names fall back to Rust."""
    return _REGISTRY.get(language, _REGISTRY[_DEFAULT_LANGUAGE])


def available_languages() -> list[str]:
    """Names of all languages with a spec of their own."""
    return list(_REGISTRY)