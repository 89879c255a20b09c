import logging

import pytest

from radixconv.config import DEFAULT_ENCODER_CONFIG, CliConfig, EncoderConfig


class TestEncoderConfig:
    def test_default(self) -> None:
        assert DEFAULT_ENCODER_CONFIG.zero_as_empty is False

    def test_frozen(self) -> None:
        cfg = EncoderConfig()
        with pytest.raises(AttributeError):
            cfg.zero_as_empty = True  # type: ignore[misc]

    def test_rejects_non_bool(self) -> None:
        with pytest.raises(ValueError):
            EncoderConfig(zero_as_empty=1)  # type: ignore[arg-type]


class TestCliConfig:
    @pytest.mark.parametrize(
        "name,level",
        [("DEBUG", logging.DEBUG), ("info", logging.INFO), ("WARNING", logging.WARNING)],
    )
    def test_log_level_value(self, name: str, level: int) -> None:
        assert CliConfig(log_level=name).log_level_value == level

    def test_rejects_unknown_level(self) -> None:
        with pytest.raises(ValueError):
            CliConfig(log_level="LOUD")
