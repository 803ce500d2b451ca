"""
Day count fractions for accrual calculations.

Every convention has its own function taking (start, end) and returning the
fraction of a year as an exact Decimal. An inverted range (start > end)
returns None rather than zero, so callers can tell "not applicable" apart
from an empty accrual period.

ACT/ACT-ICMA cannot be computed from the two dates alone and additionally
takes the reference coupon period and the coupon frequency.
"""

from datetime import date
from decimal import Decimal
from typing import Callable, Dict, Optional, Union
import logging

from .conventions import DayCount

logger = logging.getLogger(__name__)

THREE_SIXTY = Decimal(360)
NON_LEAP = Decimal(365)
LEAP = Decimal(366)

Number = Union[Decimal, int, float, str]


def is_leap(year: int) -> bool:
    """Check whether a year is a leap year in the Gregorian calendar."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> Decimal:
    """Return the actual length of a calendar year."""
    return LEAP if is_leap(year) else NON_LEAP


def _inverted(name: str, start: date, end: date) -> bool:
    if start > end:
        logger.debug("%s: start %s is after end %s", name, start, end)
        return True
    return False


def act_360(start: date, end: date) -> Optional[Decimal]:
    """Return the ACT/360 day count fraction."""
    if _inverted("act_360", start, end):
        return None
    return Decimal((end - start).days) / THREE_SIXTY


def act_365f(start: date, end: date) -> Optional[Decimal]:
    """Return the ACT/365 (Fixed) day count fraction."""
    if _inverted("act_365f", start, end):
        return None
    return Decimal((end - start).days) / NON_LEAP


def act_act_isda(start: date, end: date) -> Optional[Decimal]:
    """
    Return the ACT/ACT (ISDA) day count fraction.

    The period is split at each 1 January. Days falling in a leap year are
    divided by 366, the others by 365, and every full calendar year in
    between contributes exactly 1.

    Example:
        2023-12-01 -> 2024-02-01 gives 31/365 + 31/366
    """
    if _inverted("act_act_isda", start, end):
        return None

    if start.year == end.year:
        return Decimal((end - start).days) / days_in_year(start.year)

    first = (date(start.year + 1, 1, 1) - start).days
    dcf = Decimal(first) / days_in_year(start.year)

    dcf += Decimal(end.year - start.year - 1)

    last = (end - date(end.year, 1, 1)).days
    dcf += Decimal(last) / days_in_year(end.year)

    return dcf


def act_act_icma(
    start: date,
    end: date,
    ref_start: date,
    ref_end: date,
    frequency: int,
) -> Optional[Decimal]:
    """
    Return the ACT/ACT (ICMA) day count fraction.

    Args:
        start: Accrual start
        end: Accrual end
        ref_start: Start of the regular coupon period the accrual belongs to
        ref_end: End of that coupon period
        frequency: Coupons per year (1=annual, 2=semi, 4=quarterly)

    Returns:
        days(start, end) / (days(ref_start, ref_end) * frequency), or None if
        the accrual or the reference period is inverted, the reference
        period is empty, or the accrual is not contained in the reference
        period. Irregular stubs must be split into reference periods by the
        caller.

    Raises:
        ValueError: If frequency is not positive
    """
    if frequency <= 0:
        raise ValueError(f"Coupon frequency must be positive, got {frequency}")
    if _inverted("act_act_icma", start, end):
        return None
    if ref_start >= ref_end:
        logger.debug("act_act_icma: empty reference period %s -> %s", ref_start, ref_end)
        return None
    if start < ref_start or end > ref_end:
        logger.debug(
            "act_act_icma: accrual %s -> %s outside reference period %s -> %s",
            start, end, ref_start, ref_end,
        )
        return None

    period_days = (ref_end - ref_start).days
    return Decimal((end - start).days) / (Decimal(period_days) * frequency)


def d30_360(start: date, end: date) -> Optional[Decimal]:
    """
    Return the 30/360 (Bond Basis) day count fraction.

    A start day of 31 is treated as 30. An end day of 31 is treated as 30
    only when the (adjusted) start day is 30.
    """
    if _inverted("d30_360", start, end):
        return None

    start_day = 30 if start.day == 31 else start.day
    end_day = 30 if end.day == 31 and start_day == 30 else end.day

    day_count = (
        360 * (end.year - start.year)
        + 30 * (end.month - start.month)
        + (end_day - start_day)
    )
    return Decimal(day_count) / THREE_SIXTY


_TWO_DATE_FUNCTIONS: Dict[DayCount, Callable[[date, date], Optional[Decimal]]] = {
    DayCount.ACT_360: act_360,
    DayCount.ACT_365F: act_365f,
    DayCount.ACT_ACT_ISDA: act_act_isda,
    DayCount.THIRTY_360: d30_360,
}


def year_fraction(
    start: date,
    end: date,
    day_count: DayCount,
    ref_start: Optional[date] = None,
    ref_end: Optional[date] = None,
    frequency: Optional[int] = None,
) -> Optional[Decimal]:
    """
    Calculate year fraction between two dates using specified day count convention.

    Args:
        start: Start date
        end: End date
        day_count: Day count convention
        ref_start: Reference coupon period start (ACT/ACT-ICMA only)
        ref_end: Reference coupon period end (ACT/ACT-ICMA only)
        frequency: Coupons per year (ACT/ACT-ICMA only)

    Returns:
        Year fraction as Decimal, or None if start > end

    Raises:
        ValueError: If the convention is unknown, or ACT/ACT-ICMA is requested
            without its reference period and frequency
    """
    if day_count == DayCount.ACT_ACT_ICMA:
        if ref_start is None or ref_end is None or frequency is None:
            raise ValueError(
                "ACT/ACT-ICMA requires ref_start, ref_end and frequency"
            )
        return act_act_icma(start, end, ref_start, ref_end, frequency)

    func = _TWO_DATE_FUNCTIONS.get(day_count)
    if func is None:
        raise ValueError(f"Unknown day count: {day_count}")
    return func(start, end)


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def accrued_amount(
    notional: Number,
    rate: Number,
    start: date,
    end: date,
    day_count: DayCount,
    ref_start: Optional[date] = None,
    ref_end: Optional[date] = None,
    frequency: Optional[int] = None,
) -> Optional[Decimal]:
    """
    Scale an annual rate into the interest accrued over [start, end].

    Floats are converted through their shortest repr, so 0.05 is taken
    as Decimal("0.05").

    Returns:
        notional * rate * year_fraction, or None if start > end
    """
    yf = year_fraction(start, end, day_count, ref_start, ref_end, frequency)
    if yf is None:
        return None
    return _to_decimal(notional) * _to_decimal(rate) * yf


__all__ = [
    "is_leap",
    "days_in_year",
    "act_360",
    "act_365f",
    "act_act_isda",
    "act_act_icma",
    "d30_360",
    "year_fraction",
    "accrued_amount",
]
