"""Tests for the shell word tokenizer and quoting helpers."""

import pytest

from pkgbuild_editor.parser.lexer import (
    bare_word,
    is_double_quoted,
    is_single_quoted,
    quote_word,
    split_words,
    to_word,
    tokenize,
    unquote,
)


# ═══════════════════════════════════════════
# Tokenizer
# ═══════════════════════════════════════════


class TestTokenize:
    def test_quoting_and_escapes(self):
        assert split_words("a 'b c' \"d e\" f\\ g") == ["a", "'b c'", '"d e"', "f\\ g"]

    def test_adjacent_segments_form_one_word(self):
        assert split_words("pre'fix'\"suf fix\"") == ["pre'fix'\"suf fix\""]

    def test_offsets(self):
        tokens = tokenize("a  bb\nccc")
        assert [w.offset for w in tokens.words] == [0, 3, 6]

    def test_array_stops_at_closing_paren(self):
        tokens = tokenize("a 'b)' c) tail", array=True)
        assert [w.text for w in tokens.words] == ["a", "'b)'", "c"]
        assert tokens.complete
        assert tokens.end == len("a 'b)' c)")

    def test_array_without_paren_is_incomplete(self):
        assert not tokenize("a b", array=True).complete

    def test_open_quote_is_incomplete(self):
        assert not tokenize("'abc").complete

    def test_comment_skipped_and_flagged(self):
        tokens = tokenize("a # note\nb", array=False)
        assert [w.text for w in tokens.words] == ["a", "b"]
        assert tokens.comments == ["# note"]

    def test_hash_inside_word_is_not_a_comment(self):
        tokens = tokenize("foo#bar")
        assert [w.text for w in tokens.words] == ["foo#bar"]
        assert not tokens.comments

    def test_operators_flagged(self):
        assert tokenize("a;b").operators
        assert not tokenize("'a;b'").operators


# ═══════════════════════════════════════════
# Quoting
# ═══════════════════════════════════════════


class TestQuoting:
    def test_fully_quoted_detection(self):
        assert is_single_quoted("'abc'")
        assert not is_single_quoted("'a'b'")
        assert is_double_quoted('"a\\"b"')
        assert not is_double_quoted('"a"b"')

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("abc", '"abc"'),
            ("'abc def'", '"abc def"'),
            ('"$pkgver"', '"$pkgver"'),
            ("'$HOME'", "'$HOME'"),
            ("c d", '"c d"'),
            ("foo\\ bar", "foo\\ bar"),
            ("", '""'),
            ("$_deps", "$_deps"),
            ("*.patch", "*.patch"),
            ("file?.txt", "file?.txt"),
            ("[ab].c", "[ab].c"),
            ("{a,b}.c", "{a,b}.c"),
            ("~/x", "~/x"),
            ("a~b", '"a~b"'),
            ("'*.patch'", '"*.patch"'),
        ],
    )
    def test_quote_word(self, raw, expected):
        assert quote_word(raw) == expected

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("'x86_64'", "x86_64"),
            ('"1.0"', "1.0"),
            ('"$pkgver"', '"$pkgver"'),
            ("'a b'", "'a b'"),
            ("a b", '"a b"'),
            ("", ""),
        ],
    )
    def test_bare_word(self, raw, expected):
        assert bare_word(raw) == expected

    @pytest.mark.parametrize(
        "word, expected",
        [
            ("'a b'", "a b"),
            ('"x\\"y"', 'x"y'),
            ("f\\ g", "f g"),
            ("a'b'\"c\"", "abc"),
            ('"$pkgver"', "$pkgver"),
        ],
    )
    def test_unquote(self, word, expected):
        assert unquote(word) == expected

    def test_to_word(self):
        assert to_word("x86_64") == "x86_64"
        assert to_word("c d") == '"c d"'
        assert to_word('say "hi"') == '"say \\"hi\\""'
        assert to_word("$pkgname-$pkgver") == '"$pkgname-$pkgver"'
