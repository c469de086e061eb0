"""Test byte classification over the full 0-255 range."""

import pytest

from xc import ctype
from xc.ctype import Category

from .conftest import ALL_BYTES


def _span(lo: str, hi: str) -> set[int]:
    return set(range(ord(lo), ord(hi) + 1))


LOWER = _span("a", "z")
UPPER = _span("A", "Z")
DIGIT = _span("0", "9")

EXPECTED: dict[Category, set[int]] = {
    Category.ALNUM: LOWER | UPPER | DIGIT,
    Category.ALPHA: LOWER | UPPER,
    Category.BLANK: {0x20, 0x09},
    Category.CNTRL: set(range(0x20)) | {0x7F},
    Category.DIGIT: DIGIT,
    Category.GRAPH: set(range(0x21, 0x7F)),
    Category.LOWER: LOWER,
    Category.PRINT: set(range(0x20, 0x60)),
    Category.PUNCT: set(range(0x21, 0x7F)) - (LOWER | UPPER | DIGIT),
    Category.SPACE: set(range(0x09, 0x0E)) | {0x20},
    Category.ASPACE: {0x20},
    Category.HTAB: {0x09},
    Category.VTAB: {0x0B},
    Category.TAB: {0x09, 0x0B},
    Category.NEWLINE: {0x0A},
    Category.RETURN: {0x0D},
    Category.UPPER: UPPER,
    Category.XDIGIT: DIGIT | _span("a", "f") | _span("A", "F"),
    Category.ASCII: set(range(0x80)),
    Category.BEL: {0x07},
    Category.BACKSPACE: {0x08},
    Category.FORMFEED: {0x0C},
    Category.XLOWER: LOWER,
    Category.XUPPER: UPPER,
}


class TestTable:
    def test_every_category_covered(self):
        assert set(EXPECTED) == set(Category)

    @pytest.mark.parametrize("category", list(Category), ids=lambda c: c.name.lower())
    def test_membership(self, category):
        pred = ctype.predicate(category)
        members = {c for c in ALL_BYTES if pred(c)}
        assert members == EXPECTED[category]

    @pytest.mark.parametrize("category", list(Category), ids=lambda c: c.name.lower())
    def test_returns_bool(self, category):
        pred = ctype.predicate(category)
        assert all(type(pred(c)) is bool for c in ALL_BYTES)

    def test_classify_matches_predicate(self):
        for category in Category:
            pred = ctype.predicate(category)
            for c in ALL_BYTES:
                assert ctype.classify(category, c) == pred(c)


class TestComposition:
    def test_punct(self):
        for c in ALL_BYTES:
            assert ctype.is_punct(c) == (ctype.is_graph(c) and not ctype.is_alnum(c))

    def test_tab(self):
        for c in ALL_BYTES:
            assert ctype.is_tab(c) == (ctype.is_vtab(c) or ctype.is_htab(c))

    def test_xdigit(self):
        for c in ALL_BYTES:
            hex_letter = ord("a") <= c <= ord("f") or ord("A") <= c <= ord("F")
            assert ctype.is_xdigit(c) == (ctype.is_digit(c) or hex_letter)

    def test_xlower(self):
        for c in ALL_BYTES:
            assert ctype.is_xlower(c) == (ctype.is_lower(c) or ord("a") <= c <= ord("f"))

    def test_xupper(self):
        for c in ALL_BYTES:
            assert ctype.is_xupper(c) == (ctype.is_upper(c) or ord("A") <= c <= ord("F"))


class TestProjectRules:
    def test_print_excludes_lowercase(self):
        assert ctype.is_print(ord("_"))
        assert not ctype.is_print(ord("a"))
        assert not ctype.is_print(ord("~"))

    def test_aspace_is_space_only(self):
        assert ctype.is_aspace(ord(" "))
        for ch in "\t\n\v\f\r":
            assert not ctype.is_aspace(ord(ch)), f"Expected {ch!r} to NOT be aspace"
            assert ctype.is_space(ord(ch)), f"Expected {ch!r} to be space"

    def test_high_bytes_match_no_category(self):
        for c in range(0x80, 0x100):
            assert not any(ctype.classify(cat, c) for cat in Category), f"byte {c:#x}"


class TestSignedInput:
    def test_negative_uses_low_byte(self):
        for category in Category:
            for c in range(-128, 0):
                assert ctype.classify(category, c) == ctype.classify(category, c & 0xFF)

    def test_minus_one_is_not_ascii(self):
        assert not ctype.is_ascii(-1)

    def test_wrapped_letter(self):
        assert ctype.is_alpha(ord("a") + 256)


class TestCaseConversion:
    def test_to_lower_letters(self):
        for ch in "ABCXYZ":
            assert ctype.to_lower(ord(ch)) == ord(ch.lower())

    def test_to_upper_letters(self):
        for ch in "abcxyz":
            assert ctype.to_upper(ord(ch)) == ord(ch.upper())

    def test_non_letters_unchanged(self):
        for c in ALL_BYTES:
            if not ctype.is_alpha(c):
                assert ctype.to_lower(c) == c
                assert ctype.to_upper(c) == c

    def test_round_trip_letters(self):
        for c in LOWER:
            assert ctype.to_lower(ctype.to_upper(c)) == c
