"""Runtime settings read from the environment (and an optional `.env` file).

Only display and precision defaults are configurable. The temporary-premium decay
constants are fixed in `ens_pricing.domain.premium.temporary_premium`.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_SCALE_DIGITS = "ENS_PRICING_SCALE_DIGITS"
ENV_DISPLAY_TZ = "ENS_PRICING_DISPLAY_TZ"

DEFAULT_SCALE_DIGITS = 20
DEFAULT_DISPLAY_TZ = "UTC"


@dataclass(frozen=True)
class Settings:
    """Process-wide settings.

    Attributes:
        scale_digits (int): Default guard digits used by `approx_scale_price`.
        display_tz (str): IANA timezone name used by date display helpers.
    """

    scale_digits: int = DEFAULT_SCALE_DIGITS
    display_tz: str = DEFAULT_DISPLAY_TZ

    def __post_init__(self) -> None:
        # Raise: guard digits must be a non-negative integer
        if isinstance(self.scale_digits, bool) or not isinstance(self.scale_digits, int) or self.scale_digits < 0:
            raise ValueError(f"${ENV_SCALE_DIGITS} must be a non-negative integer, but provided value is: {self.scale_digits}")

        # Raise: timezone must be resolvable by zoneinfo
        try:
            self.display_zone
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"${ENV_DISPLAY_TZ} must be a valid IANA timezone, but provided value is: '{self.display_tz}'") from e

    @property
    def display_zone(self) -> tzinfo:
        # UTC needs no tz database
        if self.display_tz.upper() == "UTC":
            return timezone.utc
        return ZoneInfo(self.display_tz)


def load_settings() -> Settings:
    """Build Settings from the environment, loading `.env` first.

    Variables already set in the process environment win over `.env` entries.

    Returns:
        Settings: Freshly loaded settings.

    Raises:
        ValueError: If a variable holds an invalid value.
    """
    load_dotenv()

    raw_digits = os.environ.get(ENV_SCALE_DIGITS)
    raw_tz = os.environ.get(ENV_DISPLAY_TZ)

    scale_digits = DEFAULT_SCALE_DIGITS
    if raw_digits is not None and raw_digits.strip():
        try:
            scale_digits = int(raw_digits.strip())
        except ValueError as e:
            raise ValueError(f"${ENV_SCALE_DIGITS} must be an integer, but provided value is: '{raw_digits}'") from e

    display_tz = raw_tz.strip() if raw_tz and raw_tz.strip() else DEFAULT_DISPLAY_TZ

    settings = Settings(scale_digits=scale_digits, display_tz=display_tz)
    logger.debug(f"Loaded settings: scale_digits={settings.scale_digits}, display_tz='{settings.display_tz}'")
    return settings


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the settings loaded on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next `get_settings` call reloads them."""
    global _settings
    _settings = None
