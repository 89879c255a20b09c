"""Декодер: запись числа в системе с основанием base -> беззнаковое значение.

Арифметика беззнаковая 64-битная, как у uint64_t: и накопление, и рост
разрядного веса молча переполняются (результат = истинное значение mod 2^64).
Переполнение не детектируется.

Считаем векторно на numpy-массивах uint64: операции над массивами
целых чисел в numpy при переполнении просто заворачиваются по модулю.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from radixconv.core.alphabet import GLYPH_LOOKUP
from radixconv.core.types import UInt64
from radixconv.validator import validate

logger = logging.getLogger(__name__)


def place_values(length: int, base: int) -> NDArray[np.uint64]:
    """Разрядные веса base**i (mod 2^64) для i = 0..length-1, младший разряд первым."""

    weights = np.full(length, base, dtype=UInt64)
    if length:
        weights[0] = 1
    return np.cumprod(weights, dtype=UInt64)


def digit_values(numeral: str) -> NDArray[np.uint64]:
    """Значения цифр уже проверенной записи, старший разряд первым."""

    # после validate() в строке только ASCII-символы алфавита
    codes = np.fromiter(numeral.encode("ascii"), dtype=np.uint8, count=len(numeral))
    return GLYPH_LOOKUP[codes].astype(UInt64)


def decode(numeral: str, base: int) -> int:
    """Значение numeral в системе с основанием base.

    Сначала вызывается validate(); её ошибки пробрасываются как есть.
    Пустая строка даёт 0.

    Примеры:
        decode("11Z", 36) -> 1367
        decode("101", 2)  -> 5
        decode("ABC", 16) -> 2748
    """

    validate(numeral, base)

    digits = digit_values(numeral)[::-1]
    weights = place_values(len(digits), base)
    value = int(np.sum(digits * weights, dtype=UInt64))

    logger.debug("decoded %r (base %d) -> %d", numeral, base, value)
    return value
