"""Application settings."""

from __future__ import annotations

from dataclasses import dataclass

from chessray.core.enums import Role
from chessray.core.promotion import DEFAULT_PROMOTION


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Logging
    log_level: str = "WARNING"

    # Promotion
    default_promotion: Role = DEFAULT_PROMOTION
    promotion_timeout_s: float = 30.0  # worker threads wait this long for the UI
