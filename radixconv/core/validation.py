"""radixconv.core.validation

Базовые проверки аргументов, чтобы ловить невозможные значения как можно раньше.
"""

from __future__ import annotations

from radixconv.core.alphabet import MAX_BASE, MIN_BASE
from radixconv.core.types import UINT64_MAX
from radixconv.errors import InvalidBaseError, ValueOutOfRangeError


def _is_plain_int(value: object) -> bool:
    # bool является подклассом int, но основанием/значением быть не должен
    return isinstance(value, int) and not isinstance(value, bool)


def ensure_base(base: object) -> None:
    if not _is_plain_int(base) or not (MIN_BASE <= base <= MAX_BASE):
        raise InvalidBaseError(base)


def ensure_uint64(value: object) -> None:
    if not _is_plain_int(value) or not (0 <= value <= UINT64_MAX):
        raise ValueOutOfRangeError(value)
