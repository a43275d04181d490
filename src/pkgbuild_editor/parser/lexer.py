"""
Shell word tokenizer.

Splits assignment values into shell words the way bash does, honoring single
quotes, double quotes and backslash escapes. Nothing is expanded: words are
kept verbatim, quote characters included, so that the renderer can decide how
much of the source quoting it is allowed to normalize.
"""

import re
from typing import NamedTuple

# Content that reads the same with or without surrounding quotes.
_PLAIN_RE = re.compile(r"^[A-Za-z0-9_.,:+@%/=~-]+$")

# Characters that change meaning once a single-quoted word is double-quoted.
_DOUBLE_QUOTE_SPECIALS = frozenset('$`"\\')

# Unquoted characters whose expansion double quotes would suppress.
_EXPANSION_SPECIALS = frozenset("$*?[{")


class Word(NamedTuple):
    text: str
    offset: int  # index of the first character in the scanned text


class Tokens(NamedTuple):
    words: list[Word]
    end: int  # offset right after the closing paren, or len(text)
    complete: bool  # False while a quote, or the array, is still open
    comments: list[str]  # unquoted comments skipped, from "#" to end of line
    operators: bool  # True when an unquoted ; & | < or > was seen


def tokenize(text: str, array: bool = False) -> Tokens:
    """
    Split text into shell words.

    Args:
        text: Text to scan. May span several physical lines.
        array: Stop at the first unquoted ``)``, as in the body of
            ``name=(...)``. The array is complete only once it is found.

    Returns:
        Tokens with the words and their offsets in ``text``.
    """
    words: list[Word] = []
    current: list[str] = []
    start: int | None = None
    quote: str | None = None
    comments: list[str] = []
    operators = False

    def flush():
        nonlocal current, start
        if start is not None:
            words.append(Word("".join(current), start))
        current = []
        start = None

    i, n = 0, len(text)
    while i < n:
        ch = text[i]
        if quote == "'":
            current.append(ch)
            if ch == "'":
                quote = None
        elif quote == '"':
            current.append(ch)
            if ch == "\\" and i + 1 < n:
                i += 1
                current.append(text[i])
            elif ch == '"':
                quote = None
        elif ch == "\\":
            if start is None:
                start = i
            current.append(ch)
            if i + 1 < n:
                i += 1
                current.append(text[i])
        elif ch in "'\"":
            if start is None:
                start = i
            quote = ch
            current.append(ch)
        elif ch.isspace():
            flush()
        elif ch == "#" and start is None:
            # Comment runs to the end of the physical line
            newline = text.find("\n", i)
            comments.append(text[i:newline if newline != -1 else n].rstrip())
            if newline == -1:
                break
            i = newline
            continue
        elif ch == ")" and array:
            flush()
            return Tokens(words, i + 1, True, comments, operators)
        else:
            if start is None:
                start = i
            operators = operators or ch in ";&|<>"
            current.append(ch)
        i += 1

    flush()
    return Tokens(words, n, quote is None and not array, comments, operators)


def split_words(text: str) -> list[str]:
    """Words of ``text``, verbatim."""
    return [word.text for word in tokenize(text).words]


def is_single_quoted(word: str) -> bool:
    """True when the whole word is one '...' segment."""
    return len(word) >= 2 and word[0] == "'" and word.find("'", 1) == len(word) - 1


def is_double_quoted(word: str) -> bool:
    """True when the whole word is one "..." segment."""
    if len(word) < 2 or word[0] != '"':
        return False
    i = 1
    while i < len(word):
        if word[i] == "\\":
            i += 2
            continue
        if word[i] == '"':
            return i == len(word) - 1
        i += 1
    return False


def _is_bare(word: str) -> bool:
    return not any(ch in "'\"\\" for ch in word)


def _quotable(word: str) -> bool:
    return _is_bare(word) and _EXPANSION_SPECIALS.isdisjoint(word) and not word.startswith("~")


def quote_word(raw: str) -> str:
    """
    Render ``raw`` as a double-quoted word when that keeps its meaning.

    Bare words are wrapped (several bare words become one quoted word) unless
    they rely on unquoted expansion: variables, globs, braces or a leading ~.
    Single-quoted words switch to double quotes unless their content holds a
    character double quotes would interpret. Anything else is kept verbatim.
    """
    words = split_words(raw)
    if len(words) == 1:
        word = words[0]
        if is_double_quoted(word):
            return word
        if is_single_quoted(word):
            content = word[1:-1]
            if _DOUBLE_QUOTE_SPECIALS.isdisjoint(content):
                return f'"{content}"'
            return word
    if all(_quotable(word) for word in words):
        return '"' + " ".join(words) + '"'
    return raw.strip()


def bare_word(raw: str) -> str:
    """
    Render ``raw`` without quotes when the quotes carry no meaning.

    Text that is not a single word is quoted instead, so that it still reads
    as one value.
    """
    words = split_words(raw)
    if len(words) != 1:
        return quote_word(raw) if words else ""
    word = words[0]
    if (is_single_quoted(word) or is_double_quoted(word)) and _PLAIN_RE.match(word[1:-1]):
        return word[1:-1]
    return word


def unquote(word: str) -> str:
    """Remove quoting and escapes from a shell word, without expanding it."""
    out: list[str] = []
    quote: str | None = None
    i, n = 0, len(word)
    while i < n:
        ch = word[i]
        if quote == "'":
            if ch == "'":
                quote = None
            else:
                out.append(ch)
        elif quote == '"':
            if ch == '"':
                quote = None
            elif ch == "\\" and i + 1 < n and word[i + 1] in '$`"\\':
                i += 1
                out.append(word[i])
            else:
                out.append(ch)
        elif ch in "'\"":
            quote = ch
        elif ch == "\\" and i + 1 < n:
            i += 1
            out.append(word[i])
        else:
            out.append(ch)
        i += 1
    return "".join(out)


def to_word(text: str) -> str:
    """
    Turn literal text into a shell word. ``$`` expansions are left active so
    that values like ``$pkgname-$pkgver.tar.gz`` keep working.
    """
    if _PLAIN_RE.match(text):
        return text
    escaped = "".join(f"\\{ch}" if ch in '`"\\' else ch for ch in text)
    return f'"{escaped}"'
