# synk

A small syntax highlighter for the terminal. It colours function names,
numbers, keywords and parentheses in source code with ANSI escape codes and
leaves everything after `//` on a line untouched.

## Installation

```
pip install .
```

## Command line

```
synk [FILE] [-l LANGUAGE] [--list]
```

- `FILE`: the file to highlight. With no file, or with `-`, the code is read
  from standard input.
- `-l`, `--language`: the language of the code (default: `rust`).
- `--list`: print the names of the known languages, one per line, and exit.

Examples:

```
synk main.rs
synk -l python script.py
cat query.sql | synk -l sql
synk --list
```

The coloured code goes to standard output. If the file cannot be read, the
command prints the error to standard error and exits with status 1.

## Library use

```python
from synk.highlighter import highlight, render, colorize

code = """
fn add(a: i32, b: i32) -> i32 {
    a + b // Add two numbers
}
"""

lines = highlight(code, "rust")

# Print straight to a stream (stdout by default)
colorize(lines)

# Or get the coloured text back as a string
text = render(lines)
```

`highlight(code, language)` returns one entry per line: a tuple of the line's
leading whitespace and a list holding one `Token`. The token's `text` is the
rest of the line with escape codes added; its `color` is `"default"`.
`render` joins the lines back into text with a newline after each line, and
`colorize(highlighted, out=None)` writes that text to `out`, or to standard
output when no stream is given.

Colours used:

- function names before `(`: yellow
- numbers: green
- keywords and parentheses: blue
- text after `//`: left as it is

## Languages

rust, python, javascript, c, cpp, java, go, swift, kotlin, php, ruby,
typescript, csharp, haskell, bash, html, css, sql.

```python
from synk.languages.registry import available_languages, get_language_config

print(available_languages())
spec = get_language_config("python")
print(spec.is_keyword("lambda"))      # True
pattern = spec.keyword_pattern()      # compiled regex, group 1 is the keyword
```

`get_language_config` returns a `LanguageSpec` with the language's `name`,
`keywords` and `function_definers`. A language name that is not recognised
falls back to the Rust spec.

## What it does not do

The highlighter works line by line with regular expressions; it does not
parse the code. String literals are not coloured and are not protected from
colouring, the only comment marker recognised is `//` (whatever the
language), and block comments are not handled. Colours are always written;
there is no option to turn them off or to detect whether the output is a
terminal.

## Running the tests

```
pip install .[test]
pytest
```