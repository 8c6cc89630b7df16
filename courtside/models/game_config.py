"""
Game configuration model for the Courtside Scoreboard application.

This module contains the immutable configuration a game is created with,
along with the parsing rules applied to raw operator input.
"""
from dataclasses import dataclass
from typing import Any, Dict, Union

from ..utils.constants import (
    DEFAULT_QUARTER_COUNT,
    DEFAULT_QUARTER_DURATION_SEC,
    DEFAULT_TIMEOUT_SEC,
    MIN_QUARTER_COUNT,
    MAX_QUARTER_COUNT,
    MIN_QUARTER_DURATION_SEC,
    MAX_QUARTER_DURATION_SEC,
    MIN_TIMEOUT_SEC,
    MAX_TIMEOUT_SEC,
)

RawValue = Union[str, int, float, None]


class ConfigurationError(ValueError):
    """Raised when operator-supplied game settings cannot be used."""

    def __init__(self, field_name: str, message: str):
        super().__init__(message)
        self.field_name = field_name


# field name -> (label, minimum, maximum)
_BOUNDS = {
    "quarter_count": ("Number of quarters", MIN_QUARTER_COUNT, MAX_QUARTER_COUNT),
    "quarter_duration_seconds": (
        "Quarter duration", MIN_QUARTER_DURATION_SEC, MAX_QUARTER_DURATION_SEC
    ),
    "inter_quarter_pause_seconds": ("Timeout duration", MIN_TIMEOUT_SEC, MAX_TIMEOUT_SEC),
}


def _coerce(field_name: str, raw: RawValue) -> int:
    label = _BOUNDS[field_name][0]
    if isinstance(raw, bool):
        raise ConfigurationError(field_name, f"{label} must be a whole number")
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            raise ConfigurationError(field_name, f"{label} is required")
    if raw is None:
        raise ConfigurationError(field_name, f"{label} is required")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw)
        except ValueError:
            pass

    try:
        number = float(raw)
    except (TypeError, ValueError, OverflowError):
        raise ConfigurationError(field_name, f"{label} must be a whole number") from None

    if number != number or number in (float("inf"), float("-inf")) or not number.is_integer():
        raise ConfigurationError(field_name, f"{label} must be a whole number")
    return int(number)


@dataclass(frozen=True)
class GameConfiguration:
    """
    Settings a game is played with.

    Attributes:
        quarter_count: Number of quarters in the game
        quarter_duration_seconds: Length of each quarter
        inter_quarter_pause_seconds: Length of the timeout between quarters
    """
    quarter_count: int = DEFAULT_QUARTER_COUNT
    quarter_duration_seconds: int = DEFAULT_QUARTER_DURATION_SEC
    inter_quarter_pause_seconds: int = DEFAULT_TIMEOUT_SEC

    def __post_init__(self) -> None:
        for field_name, (label, minimum, maximum) in _BOUNDS.items():
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(field_name, f"{label} must be a whole number")
            if not minimum <= value <= maximum:
                raise ConfigurationError(
                    field_name, f"{label} must be between {minimum} and {maximum}"
                )

    @classmethod
    def from_inputs(
        cls,
        quarters: RawValue,
        quarter_duration: RawValue,
        timeout: RawValue,
    ) -> "GameConfiguration":
        """
        Build a configuration from the three raw operator input fields.

        Args:
            quarters: Number of quarters, as typed by the operator
            quarter_duration: Quarter length in seconds
            timeout: Timeout length in seconds

        Returns:
            Validated GameConfiguration

        Raises:
            ConfigurationError: If a value is blank, not a whole number or out of range
        """
        return cls(
            quarter_count=_coerce("quarter_count", quarters),
            quarter_duration_seconds=_coerce("quarter_duration_seconds", quarter_duration),
            inter_quarter_pause_seconds=_coerce("inter_quarter_pause_seconds", timeout),
        )

    def to_json(self) -> Dict[str, Any]:
        return {
            "quarters": self.quarter_count,
            "quarter_duration": self.quarter_duration_seconds,
            "timeout": self.inter_quarter_pause_seconds,
        }
