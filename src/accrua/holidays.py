"""
pandas-backed holiday calendars.

Exposes any ``pandas.tseries.holiday.AbstractHolidayCalendar`` through the
BusinessCalendar capability, so pandas holiday rules can drive the rolling
conventions.
"""

from datetime import date
from typing import Iterable, Optional

import pandas as pd
from pandas.tseries.holiday import AbstractHolidayCalendar, USFederalHolidayCalendar

from .calendar import DateBounds, HolidayCalendar

DEFAULT_START = date(1970, 1, 1)
DEFAULT_END = date(2099, 12, 31)


class PandasHolidayCalendar(HolidayCalendar):
    """
    Holiday calendar generated from pandas holiday rules.

    Holidays are materialised once for [start, end]; dates outside that
    window are never holidays (weekends still apply).

    Args:
        rules: pandas holiday calendar (defaults to USFederalHolidayCalendar)
        start: First date to generate holidays for
        end: Last date to generate holidays for
        weekend: Weekday numbers treated as weekend (Monday=0 ... Sunday=6)
        bounds: Date window for rolling scans
    """

    def __init__(
        self,
        rules: Optional[AbstractHolidayCalendar] = None,
        start: date = DEFAULT_START,
        end: date = DEFAULT_END,
        weekend: Iterable[int] = (5, 6),
        bounds: Optional[DateBounds] = None,
    ):
        if start > end:
            raise ValueError(f"Holiday window start {start} must be <= end {end}")
        if rules is None:
            rules = USFederalHolidayCalendar()

        index = rules.holidays(start=pd.Timestamp(start), end=pd.Timestamp(end))
        super().__init__(
            holidays={ts.date() for ts in index},
            name=getattr(rules, "name", type(rules).__name__),
            weekend=weekend,
            bounds=bounds,
        )
        self.start = start
        self.end = end


__all__ = [
    "PandasHolidayCalendar",
]
