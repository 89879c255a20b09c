"""Кодер: беззнаковое 64-битное значение -> запись в системе с основанием base."""

from __future__ import annotations

import logging

from radixconv.config import DEFAULT_ENCODER_CONFIG, EncoderConfig
from radixconv.core.alphabet import ALPHABET
from radixconv.core.validation import ensure_base, ensure_uint64

logger = logging.getLogger(__name__)


def encode(value: int, base: int, config: EncoderConfig | None = None) -> str:
    """Записывает value в системе с основанием base (цифры 0-9, A-Z).

    Остатки от деления собираются младшим разрядом вперёд, затем список
    разворачивается.

    Ноль: "0" по умолчанию, "" при EncoderConfig(zero_as_empty=True).

    Примеры:
        encode(1367, 36) -> "11Z"
        encode(5, 2)     -> "101"
        encode(2748, 16) -> "ABC"
    """

    cfg = config or DEFAULT_ENCODER_CONFIG
    ensure_base(base)
    ensure_uint64(value)

    if value == 0:
        return "" if cfg.zero_as_empty else ALPHABET[0]

    digits: list[str] = []
    n = value
    while n:
        # n = q * base + r
        n, r = divmod(n, base)
        digits.append(ALPHABET[r])
    digits.reverse()

    result = "".join(digits)
    logger.debug("encoded %d -> %r (base %d)", value, result, base)
    return result
