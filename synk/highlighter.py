"""Line-oriented ANSI syntax highlighting."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TextIO

from synk.languages.registry import get_language_config

YELLOW = "\x1b[33m"
GREEN = "\x1b[32m"
BLUE = "\x1b[34m"
RESET = "\x1b[0m"

_PAREN = re.compile(r"[()]")
_FUNC_NAME = re.compile(r"\b([a-zA-Z_][a-zA-Z0-9_]*)\s*\(")
_NUMBER = re.compile(r"\b\d+(\.\d+)?\b")

HighlightedLine = tuple[str, list["Token"]]


@dataclass
class Token:
    """A piece of highlighted text."""

    text: str
    color: str = "default"


def _lines(code: str) -> list[str]:
    if not code:
        return []
    lines = code.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _highlight_code(code: str, keyword_pattern: re.Pattern[str]) -> str:
    code = _FUNC_NAME.sub(lambda m: f"{YELLOW}{m.group(1)}{RESET}(", code)
    code = _NUMBER.sub(lambda m: f"{GREEN}{m.group(0)}{RESET}", code)
    code = keyword_pattern.sub(lambda m: f"{BLUE}{m.group(1)}{RESET}", code)
    return _PAREN.sub(lambda m: f"{BLUE}{m.group(0)}{RESET}", code)


def highlight(code: str, language: str) -> list[HighlightedLine]:
    """Highlight ``code`` line by line.

    Each line becomes its leading whitespace and a list of tokens. Text after
    ``//`` is left as it is.
    """
    keyword_pattern = get_language_config(language).keyword_pattern()
    result: list[HighlightedLine] = []
    for line in _lines(code):
        rest = line.lstrip()
        indent = line[: len(line) - len(rest)]
        code_part, marker, comment = rest.partition("//")
        text = _highlight_code(code_part, keyword_pattern) + marker + comment
        result.append((indent, [Token(text)]))
    return result


def render(highlighted: Iterable[HighlightedLine]) -> str:
    """Join highlighted lines into text, one newline after each line."""
    return "".join(
        f"{indent}{''.join(token.text for token in tokens)}\n"
        for indent, tokens in highlighted
    )


def colorize(highlighted: Iterable[HighlightedLine], out: TextIO | None = None) -> None:
    """Write highlighted lines to ``out`` (standard output by default)."""
    stream = sys.stdout if out is None else out
    stream.write(render(highlighted))