"""Перевод записи числа из одной системы счисления в другую."""

from __future__ import annotations

import logging

from radixconv.config import EncoderConfig
from radixconv.decoder import decode
from radixconv.encoder import encode
from radixconv.validator import validate

logger = logging.getLogger(__name__)


def convert(
    numeral: str,
    origin_base: int,
    dest_base: int,
    config: EncoderConfig | None = None,
) -> str:
    """validate -> decode -> encode.

    Ошибка валидации прерывает перевод до декодирования.
    convert(N, b1, b2) == encode(decode(N, b1), b2).

    Примеры:
        convert("11Z", 36, 2)  -> "10101010111"
        convert("ABC", 16, 36) -> "24C"
    """

    validate(numeral, origin_base)
    value = decode(numeral, origin_base)
    result = encode(value, dest_base, config)
    logger.debug("converted %r: base %d -> base %d = %r", numeral, origin_base, dest_base, result)
    return result
