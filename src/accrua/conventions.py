"""
Day count and business day convention identifiers.

Supported Day Counts:
- ACT/360: Actual days / 360 (money markets, OIS)
- ACT/365F: Actual days / 365, leap years ignored
- ACT/ACT-ISDA: Actual days split by calendar year / actual year length
- ACT/ACT-ICMA: Actual days / (days in coupon period * coupons per year)
- 30/360: 30 days per month / 360 (Bond Basis)

Business Day Conventions:
- Following: Move to next business day
- Modified Following: Move to next business day, unless it falls in next month (then previous)
- Preceding: Move to previous business day
- Modified Preceding: Move to previous business day, unless it falls in previous month (then next)
- No Adjustment: Leave the date as is
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping


def _normalize(name: str) -> str:
    return name.upper().replace(" ", "").replace("_", "").replace("-", "")


class DayCount(Enum):
    """Day count convention enumeration."""
    ACT_360 = "ACT/360"
    ACT_365F = "ACT/365F"
    ACT_ACT_ISDA = "ACT/ACT-ISDA"
    ACT_ACT_ICMA = "ACT/ACT-ICMA"
    THIRTY_360 = "30/360"

    @classmethod
    def from_string(cls, s: str) -> "DayCount":
        """Parse day count from string representation."""
        mapping = {
            "ACT/360": cls.ACT_360,
            "ACT360": cls.ACT_360,
            "ACTUAL/360": cls.ACT_360,
            "ACT/365": cls.ACT_365F,
            "ACT365": cls.ACT_365F,
            "ACT/365F": cls.ACT_365F,
            "ACT365F": cls.ACT_365F,
            "ACT/365FIXED": cls.ACT_365F,
            "ACTUAL/365FIXED": cls.ACT_365F,
            "ACT/ACT": cls.ACT_ACT_ISDA,
            "ACTACT": cls.ACT_ACT_ISDA,
            "ACT/ACTISDA": cls.ACT_ACT_ISDA,
            "ACTACTISDA": cls.ACT_ACT_ISDA,
            "ACT/ACTICMA": cls.ACT_ACT_ICMA,
            "ACTACTICMA": cls.ACT_ACT_ICMA,
            "ACT/ACTISMA": cls.ACT_ACT_ICMA,
            "ACTACTISMA": cls.ACT_ACT_ICMA,
            "30/360": cls.THIRTY_360,
            "30360": cls.THIRTY_360,
            "BONDBASIS": cls.THIRTY_360,
        }
        key = _normalize(s)
        if key in mapping:
            return mapping[key]
        raise ValueError(f"Unknown day count convention: {s}")


class BusinessDayConvention(Enum):
    """Business day adjustment convention."""
    FOLLOWING = "Following"
    MODIFIED_FOLLOWING = "ModifiedFollowing"
    PRECEDING = "Preceding"
    MODIFIED_PRECEDING = "ModifiedPreceding"
    NO_ADJUSTMENT = "NoAdjustment"

    @classmethod
    def from_string(cls, s: str) -> "BusinessDayConvention":
        """Parse business day convention from string representation."""
        mapping = {
            "F": cls.FOLLOWING,
            "FOLLOWING": cls.FOLLOWING,
            "MF": cls.MODIFIED_FOLLOWING,
            "MODFOLLOWING": cls.MODIFIED_FOLLOWING,
            "MODIFIEDFOLLOWING": cls.MODIFIED_FOLLOWING,
            "P": cls.PRECEDING,
            "PRECEDING": cls.PRECEDING,
            "MP": cls.MODIFIED_PRECEDING,
            "MODPRECEDING": cls.MODIFIED_PRECEDING,
            "MODIFIEDPRECEDING": cls.MODIFIED_PRECEDING,
            "NONE": cls.NO_ADJUSTMENT,
            "NOADJUSTMENT": cls.NO_ADJUSTMENT,
            "UNADJUSTED": cls.NO_ADJUSTMENT,
        }
        key = _normalize(s)
        if key in mapping:
            return mapping[key]
        raise ValueError(f"Unknown business day convention: {s}")


@dataclass(frozen=True)
class Conventions:
    """
    Container for accrual conventions.

    Attributes:
        day_count: Day count convention for accrual
        business_day: Business day adjustment rule
        payment_frequency: Number of payments per year (1=annual, 2=semi, 4=quarterly)
    """
    day_count: DayCount = DayCount.ACT_360
    business_day: BusinessDayConvention = BusinessDayConvention.MODIFIED_FOLLOWING
    payment_frequency: int = 1  # Annual

    def __post_init__(self):
        if not isinstance(self.payment_frequency, int) or isinstance(self.payment_frequency, bool):
            raise ValueError(
                f"Payment frequency must be an integer, got {self.payment_frequency!r}"
            )
        if self.payment_frequency <= 0:
            raise ValueError(
                f"Payment frequency must be positive, got {self.payment_frequency}"
            )

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> "Conventions":
        """
        Build conventions from a configuration mapping.

        Recognised keys are ``day_count``, ``business_day`` and
        ``payment_frequency``. Enum members and their string names are both
        accepted; missing keys fall back to the defaults.

        Raises:
            ValueError: If a convention name is not recognised, or the
                payment frequency is not a positive integer
        """
        kwargs = {}
        if "day_count" in config:
            dc = config["day_count"]
            kwargs["day_count"] = dc if isinstance(dc, DayCount) else DayCount.from_string(dc)
        if "business_day" in config:
            bd = config["business_day"]
            kwargs["business_day"] = (
                bd if isinstance(bd, BusinessDayConvention)
                else BusinessDayConvention.from_string(bd)
            )
        if "payment_frequency" in config:
            freq = config["payment_frequency"]
            if isinstance(freq, str):
                freq = int(freq)
            elif isinstance(freq, float) and freq.is_integer():
                freq = int(freq)
            kwargs["payment_frequency"] = freq
        return cls(**kwargs)

    # Standard market conventions
    @classmethod
    def usd_ois(cls) -> "Conventions":
        """Standard USD OIS conventions."""
        return cls(
            day_count=DayCount.ACT_360,
            business_day=BusinessDayConvention.MODIFIED_FOLLOWING,
            payment_frequency=1,
        )

    @classmethod
    def usd_treasury(cls) -> "Conventions":
        """Standard USD Treasury bond conventions."""
        return cls(
            day_count=DayCount.ACT_ACT_ICMA,
            business_day=BusinessDayConvention.FOLLOWING,
            payment_frequency=2,
        )

    @classmethod
    def usd_swap(cls) -> "Conventions":
        """Standard USD IRS conventions (fixed leg)."""
        return cls(
            day_count=DayCount.THIRTY_360,
            business_day=BusinessDayConvention.MODIFIED_FOLLOWING,
            payment_frequency=2,
        )

    @classmethod
    def eur_govt_bond(cls) -> "Conventions":
        """Standard EUR government bond conventions."""
        return cls(
            day_count=DayCount.ACT_ACT_ICMA,
            business_day=BusinessDayConvention.FOLLOWING,
            payment_frequency=1,
        )


__all__ = [
    "DayCount",
    "BusinessDayConvention",
    "Conventions",
]
