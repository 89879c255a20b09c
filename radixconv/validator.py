"""Проверка, что строка является корректной записью числа в заданной системе счисления."""

from __future__ import annotations

import logging

from radixconv.core.alphabet import allowed_glyphs
from radixconv.core.validation import ensure_base
from radixconv.errors import InvalidDigitError, NullNumeralError, RadixError

logger = logging.getLogger(__name__)


def validate(numeral: str | None, base: int) -> None:
    """Проверяет, что каждый символ numeral входит в первые base цифр алфавита.

    Порядок проверок: основание -> None -> символы.
    Успех молчаливый; при ошибке бросается подкласс RadixError.
    Строчные буквы цифрами не считаются ("abc" в base 16 даёт ошибку).
    Пустая строка проходит проверку.
    """

    ensure_base(base)
    if numeral is None:
        raise NullNumeralError()
    if not isinstance(numeral, str):
        raise TypeError(f"numeral must be str, got {type(numeral).__name__}")

    allowed = allowed_glyphs(base)
    for index, char in enumerate(numeral):
        if char not in allowed:
            logger.debug("rejecting %r in base %d: %r at %d", numeral, base, char, index)
            raise InvalidDigitError(numeral, base, char, index)


def is_valid(numeral: str | None, base: int) -> bool:
    try:
        validate(numeral, base)
    except RadixError:
        return False
    return True
