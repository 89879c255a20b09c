"""radixconv package.

Перевод целых беззнаковых чисел между системами счисления 2..36.

Пакет не имеет побочных эффектов при импорте: наружу реэкспортируются
только четыре операции и классы ошибок.

- from radixconv import convert
- from radixconv.errors import InvalidDigitError
"""

from __future__ import annotations

from .converter import convert
from .decoder import decode
from .encoder import encode
from .errors import (
    InvalidBaseError,
    InvalidDigitError,
    NullNumeralError,
    RadixError,
    ValueOutOfRangeError,
)
from .validator import is_valid, validate

__all__ = [
    "validate",
    "is_valid",
    "decode",
    "encode",
    "convert",
    "RadixError",
    "InvalidBaseError",
    "NullNumeralError",
    "InvalidDigitError",
    "ValueOutOfRangeError",
]
