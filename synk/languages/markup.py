"""Markup, stylesheet and query languages."""

from __future__ import annotations

from synk.languages.spec import LanguageSpec

_HTML = LanguageSpec(
    name="html",
    keywords=(
        "html", "head", "body", "div", "span", "h1", "h2", "h3", "h4", "h5",
        "h6", "p", "a", "img", "ul", "ol", "li", "table", "tr", "td", "th",
        "form", "input", "button", "script", "link", "meta", "title",
        "style", "br", "hr",
    ),
)

_CSS = LanguageSpec(
    name="css",
    keywords=(
        "color", "background", "background-color", "font-size",
        "font-family", "margin", "padding", "border", "width", "height",
        "display", "position", "top", "bottom", "left", "right", "float",
        "clear", "z-index", "overflow", "visibility", "content",
        "align-items", "justify-content", "flex", "grid", "gap", "animation",
        "transition", "transform", "box-shadow", "text-align",
        "vertical-align", "overflow-x", "overflow-y", "min-width",
        "max-width", "min-height", "max-height",
    ),
)

_SQL = LanguageSpec(
    name="sql",
    keywords=(
        "SELECT", "FROM", "WHERE", "INSERT", "INTO", "VALUES", "UPDATE",
        "SET", "DELETE", "CREATE", "TABLE", "ALTER", "DROP", "JOIN", "INNER",
        "LEFT", "RIGHT", "FULL", "ON", "AS", "AND", "OR", "NOT", "NULL",
        "PRIMARY", "KEY", "FOREIGN", "REFERENCES", "GROUP", "BY", "ORDER",
        "HAVING", "DISTINCT", "UNION", "ALL", "LIMIT", "OFFSET", "CASE",
        "WHEN", "THEN", "ELSE", "END",
    ),
)


def specs() -> dict[str, LanguageSpec]:
    """Specs of the markup and query languages, keyed by language name."""
    return {spec.name: spec for spec in (_HTML, _CSS, _SQL)}