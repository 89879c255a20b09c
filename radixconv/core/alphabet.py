"""radixconv.core.alphabet

Алфавит цифр и производные таблицы.

Принцип: символ на позиции i в ALPHABET является цифрой со значением i.
Число в системе с основанием b использует только первые b символов.
Все таблицы строятся один раз при импорте и дальше только читаются.
"""

from __future__ import annotations

import string
from types import MappingProxyType
from typing import Mapping

import numpy as np
from numpy.typing import NDArray

ALPHABET: str = string.digits + string.ascii_uppercase

MIN_BASE: int = 2
MAX_BASE: int = len(ALPHABET)  # 36

# Маркер "не цифра" в lookup-таблице (все реальные значения < 36)
NOT_A_GLYPH: int = 0xFF

DIGIT_VALUES: Mapping[str, int] = MappingProxyType({ch: i for i, ch in enumerate(ALPHABET)})


def _build_lookup_table() -> NDArray[np.uint8]:
    table = np.full(256, NOT_A_GLYPH, dtype=np.uint8)
    for ch, value in DIGIT_VALUES.items():
        table[ord(ch)] = value
    table.flags.writeable = False
    return table


# ASCII-код -> значение цифры (или NOT_A_GLYPH)
GLYPH_LOOKUP: NDArray[np.uint8] = _build_lookup_table()


def allowed_glyphs(base: int) -> str:
    """Допустимые символы для основания base (первые base символов алфавита)."""

    return ALPHABET[:base]


def glyph_for(value: int) -> str:
    if not (0 <= value < MAX_BASE):
        raise ValueError(f"digit value must be in [0, {MAX_BASE - 1}], got {value}")
    return ALPHABET[value]


def digit_value(glyph: str) -> int:
    """Значение цифры по её символу; строчные буквы цифрами не считаются."""

    try:
        return DIGIT_VALUES[glyph]
    except KeyError:
        raise ValueError(f"{glyph!r} is not a digit glyph") from None
