import pytest

from radixconv.core.alphabet import (
    ALPHABET,
    GLYPH_LOOKUP,
    MAX_BASE,
    NOT_A_GLYPH,
    allowed_glyphs,
    digit_value,
    glyph_for,
)
from radixconv.core.types import UINT64_MAX
from radixconv.core.validation import ensure_base, ensure_uint64
from radixconv.errors import InvalidBaseError, ValueOutOfRangeError


class TestAlphabet:
    def test_alphabet_order(self) -> None:
        assert ALPHABET == "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
        assert MAX_BASE == 36

    def test_glyph_positions(self) -> None:
        for i, ch in enumerate(ALPHABET):
            assert glyph_for(i) == ch
            assert digit_value(ch) == i

    def test_allowed_glyphs(self) -> None:
        assert allowed_glyphs(2) == "01"
        assert allowed_glyphs(16) == "0123456789ABCDEF"

    def test_lowercase_is_not_a_glyph(self) -> None:
        with pytest.raises(ValueError):
            digit_value("a")
        assert GLYPH_LOOKUP[ord("a")] == NOT_A_GLYPH

    def test_lookup_table_matches_alphabet(self) -> None:
        for i, ch in enumerate(ALPHABET):
            assert GLYPH_LOOKUP[ord(ch)] == i

    def test_lookup_table_is_read_only(self) -> None:
        with pytest.raises(ValueError):
            GLYPH_LOOKUP[0] = 1

    @pytest.mark.parametrize("value", [-1, 36])
    def test_glyph_for_out_of_range(self, value: int) -> None:
        with pytest.raises(ValueError):
            glyph_for(value)


class TestEnsureBase:
    @pytest.mark.parametrize("base", [2, 10, 36])
    def test_ok(self, base: int) -> None:
        ensure_base(base)

    @pytest.mark.parametrize("base", [-1, 0, 1, 37, 100, True, 2.0, "16", None])
    def test_raises(self, base: object) -> None:
        with pytest.raises(InvalidBaseError):
            ensure_base(base)


class TestEnsureUint64:
    @pytest.mark.parametrize("value", [0, 1, UINT64_MAX])
    def test_ok(self, value: int) -> None:
        ensure_uint64(value)

    @pytest.mark.parametrize("value", [-1, UINT64_MAX + 1, 1.0, False, "5"])
    def test_raises(self, value: object) -> None:
        with pytest.raises(ValueOutOfRangeError):
            ensure_uint64(value)
