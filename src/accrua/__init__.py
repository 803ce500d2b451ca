"""
accrua: Accrual conventions for fixed income

A small library for:
- Rolling dates onto business days (Following, Modified Following,
  Preceding, Modified Preceding) on top of any holiday source
- Day count fractions (ACT/360, ACT/365F, ACT/ACT-ISDA, ACT/ACT-ICMA, 30/360)
  as exact decimals
- Scaling annual rates into period accruals

Scope: conventions only; no schedule generation, instruments or I/O.
"""

__version__ = "0.1.0"

# Conventions
from .conventions import DayCount, BusinessDayConvention, Conventions

# Calendars
from .calendar import (
    BusinessCalendar,
    DateBounds,
    HolidayCalendar,
    WeekendCalendar,
    adjust,
)
from .holidays import PandasHolidayCalendar

# Day counts
from .daycount import (
    is_leap,
    act_360,
    act_365f,
    act_act_isda,
    act_act_icma,
    d30_360,
    year_fraction,
    accrued_amount,
)

__all__ = [
    # Version
    "__version__",
    # Conventions
    "DayCount",
    "BusinessDayConvention",
    "Conventions",
    # Calendars
    "BusinessCalendar",
    "DateBounds",
    "HolidayCalendar",
    "WeekendCalendar",
    "PandasHolidayCalendar",
    "adjust",
    # Day counts
    "is_leap",
    "act_360",
    "act_365f",
    "act_act_isda",
    "act_act_icma",
    "d30_360",
    "year_fraction",
    "accrued_amount",
]
