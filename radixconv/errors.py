"""Ошибки radixconv.

Все ошибки являются подклассами ValueError: это некорректный ввод, а не сбой программы.
Библиотека только бросает исключения; завершение процесса с диагностикой
делает CLI.
"""

from __future__ import annotations

from radixconv.core.types import UINT64_MAX


class RadixError(ValueError):
    """Базовый класс ошибок перевода между системами счисления."""


class InvalidBaseError(RadixError):
    """Основание вне диапазона 2..36."""

    def __init__(self, base: object) -> None:
        self.base = base
        super().__init__(f"Base {base!r} is not supported, must be in [2, 36]")


class NullNumeralError(RadixError):
    def __init__(self) -> None:
        super().__init__("Number is null")


class InvalidDigitError(RadixError):
    """Символ числа не входит в первые `base` символов алфавита."""

    def __init__(self, numeral: str, base: int, char: str, index: int) -> None:
        self.numeral = numeral
        self.base = base
        self.char = char
        self.index = index
        super().__init__(
            f"Number {numeral!r} is invalid in base {base}: "
            f"unexpected {char!r} at position {index}"
        )


class ValueOutOfRangeError(RadixError):
    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Value {value!r} is not an unsigned 64-bit integer, must be in [0, {UINT64_MAX}]")
