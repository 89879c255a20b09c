"""Конфиги radixconv.

Конфиги хранятся в замороженных dataclass'ах без логики перевода; значения
проверяются в __post_init__.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class EncoderConfig:
    """Параметры кодера.

    zero_as_empty:
        False (по умолчанию): ноль кодируется одной цифрой "0".
        True: ноль кодируется пустой строкой, legacy-поведение
        (цикл извлечения цифр для нуля не выполняется ни разу).
    """

    zero_as_empty: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.zero_as_empty, bool):
            raise ValueError(f"zero_as_empty must be bool, got {self.zero_as_empty!r}")


@dataclass(frozen=True)
class CliConfig:
    log_level: str = "WARNING"
    encoder: EncoderConfig = EncoderConfig()

    def __post_init__(self) -> None:
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {self.log_level!r}")

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level.upper())


DEFAULT_ENCODER_CONFIG = EncoderConfig()
