"""Fee calculation for transactions and top-ups."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .constants import FEE_VALUE_TYPE_FIXED, FEE_VALUE_TYPE_PERCENT


class Tier(str, Enum):
    """Customer tiers that select the top-up fee."""

    STANDARD = "STANDARD"
    SILVER = "SILVER"
    GOLD = "GOLD"
    DIAMOND = "DIAMOND"


class InvalidPlatformError(ValueError):
    """Raised when a platform lacks its top-up fees."""

    def __init__(self, message: str = "invalid platform") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class TopUpFees:
    """The top-up fee a platform charges per tier."""

    diamond: Optional[float] = None
    gold: Optional[float] = None
    silver: Optional[float] = None
    standard: Optional[float] = None

    @property
    def complete(self) -> bool:
        """True when every tier has a fee."""
        return None not in (self.diamond, self.gold, self.silver, self.standard)


def calculate_fee(fee_type: str, fee_value: float, amount: float) -> float:
    """Return the fee for ``amount``: a fraction of it for PERCENT, else ``fee_value``."""
    if fee_type == FEE_VALUE_TYPE_PERCENT:
        return fee_value * amount
    if fee_type == FEE_VALUE_TYPE_FIXED:
        return fee_value
    return fee_value


def calculate_top_up_fee(tier: Union[Tier, str], platform: Optional[TopUpFees]) -> float:
    """Return the platform's top-up fee for ``tier``.

    Raises InvalidPlatformError when the platform is missing or incomplete,
    and ValueError for an unknown tier.
    """
    if platform is None or not platform.complete:
        raise InvalidPlatformError()
    try:
        tier = Tier(tier)
    except ValueError:
        raise ValueError("invalid input") from None
    fees = {
        Tier.DIAMOND: platform.diamond,
        Tier.GOLD: platform.gold,
        Tier.SILVER: platform.silver,
        Tier.STANDARD: platform.standard,
    }
    return fees[tier]