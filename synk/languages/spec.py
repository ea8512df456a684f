"""Description of a language's keywords and function-defining words."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache


@lru_cache(maxsize=None)
def _compile_keywords(keywords: tuple[str, ...]) -> re.Pattern[str]:
    # Longer words go first so that e.g. "int" wins over "in" at the same spot.
    ordered = sorted(keywords, key=lambda word: (-len(word), word))
    alternation = "|".join(re.escape(word) for word in ordered)
    return re.compile(rf"\b({alternation})")


@dataclass(frozen=True)
class LanguageSpec:
    """Keywords and function definers of one language."""

    name: str
    keywords: tuple[str, ...]
    function_definers: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("language name must not be empty")
        keywords = tuple(dict.fromkeys(self.keywords))
        if any(not word for word in keywords):
            raise ValueError(f"{self.name}: keywords must not be empty strings")
        object.__setattr__(self, "keywords", keywords)
        object.__setattr__(
            self, "function_definers", tuple(dict.fromkeys(self.function_definers))
        )

    def keyword_pattern(self) -> re.Pattern[str]:
        """Regex matching any keyword that starts at a word boundary.

        Group 1 holds the keyword that matched.
        """
        return _compile_keywords(self.keywords)

    def is_keyword(self, word: str) -> bool:
        """Whether ``word`` is one of this language's keywords."""
        return word in self.keywords