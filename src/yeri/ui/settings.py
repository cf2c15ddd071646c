"""Application-wide settings."""

from __future__ import annotations

from dataclasses import dataclass

from yeri.terminal.interfaces import ValidatorConfig


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"
    log_level: str = "WARNING"

    # Display
    fare_amount: str = "₼0.50"
    mask_pan: bool = False

    # Terminal
    expiry_duration_ms: int = ValidatorConfig.DEFAULT_EXPIRY_MS

    # Command sources
    read_stdin: bool = False

    def validator_config(self) -> ValidatorConfig:
        return ValidatorConfig(expiry_duration_ms=self.expiry_duration_ms)
