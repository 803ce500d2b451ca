"""
Business day calendars and date rolling conventions.

Provides:
- BusinessCalendar: Abstract capability built on a single holiday predicate
- DateBounds: Inclusive window of dates that rolling scans may visit
- HolidayCalendar: Calendar backed by an explicit set of holiday dates
- WeekendCalendar: Saturday/Sunday only, no holidays
- adjust: Dispatch a BusinessDayConvention to the matching rolling rule

A concrete holiday source only needs to implement ``is_holiday``. Weekend
detection, the business day predicate and the four rolling conventions are
layered on top of it. Rolling returns None when no business day exists
inside the calendar's bounds.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Optional
import logging

from .conventions import BusinessDayConvention

logger = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class DateBounds:
    """
    Inclusive range of dates a rolling scan is allowed to reach.

    Attributes:
        min_date: Earliest date a backward scan may return
        max_date: Latest date a forward scan may return
    """
    min_date: date = date.min
    max_date: date = date.max

    def __post_init__(self):
        if self.min_date > self.max_date:
            raise ValueError(
                f"min_date {self.min_date} must be <= max_date {self.max_date}"
            )

    def contains(self, day: date) -> bool:
        """Check whether the date lies inside the window."""
        return self.min_date <= day <= self.max_date


FULL_RANGE = DateBounds()


class BusinessCalendar(ABC):
    """
    Abstract business day calendar.

    Subclasses supply ``is_holiday``. The default weekend is Saturday and
    Sunday, which is not true for all countries; calendars with a different
    weekend must override ``is_weekend``.

    The holiday predicate must be pure: rolling may call it any number of
    times, in any order.

    A non-business date outside ``bounds`` cannot be rolled and gives None.
    """

    bounds: DateBounds = FULL_RANGE

    @abstractmethod
    def is_holiday(self, day: date) -> bool:
        """Check whether the date is a bank holiday."""
        pass

    def is_weekend(self, day: date) -> bool:
        """Check whether the date falls on a weekend (Saturday=5, Sunday=6)."""
        return day.weekday() >= 5

    def is_business(self, day: date) -> bool:
        """Check whether the date is a business day."""
        return not self.is_holiday(day) and not self.is_weekend(day)

    def following(self, day: date) -> Optional[date]:
        """
        Adjust using the Following convention.

        Returns the date itself if it is a business day, otherwise the first
        business day after it. None if the upper bound is reached first.
        """
        if self.is_business(day):
            return day

        found = self._scan_forward(day)
        if found is None:
            logger.debug("following: no business day after %s within %s", day, self.bounds)
        return found

    def modified_following(self, day: date) -> Optional[date]:
        """
        Adjust using the Modified Following convention.

        Returns the first following business day, unless that would land in
        the next calendar month. In that case the first preceding business
        day is returned instead; the backward search is not limited to the
        month. None if no business day exists within bounds.
        """
        if self.is_business(day):
            return day

        found = self._scan_forward(day, same_month=True)
        if found is None:
            found = self._scan_backward(day)
        if found is None:
            logger.debug("modified_following: no business day around %s within %s", day, self.bounds)
        return found

    def preceding(self, day: date) -> Optional[date]:
        """
        Adjust using the Preceding convention.

        Returns the date itself if it is a business day, otherwise the first
        business day before it. None if the lower bound is reached first.
        """
        if self.is_business(day):
            return day

        found = self._scan_backward(day)
        if found is None:
            logger.debug("preceding: no business day before %s within %s", day, self.bounds)
        return found

    def modified_preceding(self, day: date) -> Optional[date]:
        """
        Adjust using the Modified Preceding convention.

        Returns the first preceding business day, unless that would land in
        the previous calendar month. In that case the first following
        business day is returned; the forward search is not limited to the
        month. None if no business day exists within bounds.
        """
        if self.is_business(day):
            return day

        found = self._scan_backward(day, same_month=True)
        if found is None:
            found = self._scan_forward(day)
        if found is None:
            logger.debug("modified_preceding: no business day around %s within %s", day, self.bounds)
        return found

    def adjust(self, day: date, convention: BusinessDayConvention) -> Optional[date]:
        """
        Adjust a date according to a business day convention.

        Args:
            day: Date to adjust
            convention: Business day adjustment rule

        Returns:
            Adjusted date, or None if no business day exists within bounds
        """
        if convention == BusinessDayConvention.NO_ADJUSTMENT:
            return day
        if convention == BusinessDayConvention.FOLLOWING:
            return self.following(day)
        if convention == BusinessDayConvention.MODIFIED_FOLLOWING:
            return self.modified_following(day)
        if convention == BusinessDayConvention.PRECEDING:
            return self.preceding(day)
        if convention == BusinessDayConvention.MODIFIED_PRECEDING:
            return self.modified_preceding(day)
        raise ValueError(f"Unknown business day convention: {convention}")

    def _scan_forward(self, day: date, same_month: bool = False) -> Optional[date]:
        if not self.bounds.contains(day):
            return None
        current = day
        while current < self.bounds.max_date:
            current += ONE_DAY
            if same_month and current.month != day.month:
                return None
            if self.is_business(current):
                return current
        return None

    def _scan_backward(self, day: date, same_month: bool = False) -> Optional[date]:
        if not self.bounds.contains(day):
            return None
        current = day
        while current > self.bounds.min_date:
            current -= ONE_DAY
            if same_month and current.month != day.month:
                return None
            if self.is_business(current):
                return current
        return None


class HolidayCalendar(BusinessCalendar):
    """
    Calendar backed by an explicit set of holiday dates.

    Args:
        holidays: Holiday dates (weekends need not be listed)
        name: Calendar identifier (e.g., "USD", "TARGET")
        weekend: Weekday numbers treated as weekend (Monday=0 ... Sunday=6)
        bounds: Date window for rolling scans (defaults to the full date range)
    """

    def __init__(
        self,
        holidays: Iterable[date] = (),
        name: str = "",
        weekend: Iterable[int] = (5, 6),
        bounds: Optional[DateBounds] = None,
    ):
        self.name = name
        self.holidays = frozenset(holidays)
        self.weekend = frozenset(weekend)
        if not self.weekend <= set(range(7)):
            raise ValueError(f"Weekend days must be in 0..6, got {sorted(self.weekend)}")
        if bounds is not None:
            self.bounds = bounds

    def is_holiday(self, day: date) -> bool:
        return day in self.holidays

    def is_weekend(self, day: date) -> bool:
        return day.weekday() in self.weekend

    def __repr__(self) -> str:
        return f"HolidayCalendar(name={self.name!r}, holidays={len(self.holidays)})"


class WeekendCalendar(HolidayCalendar):
    """Simple calendar that only considers weekends as non-business days."""

    def __init__(self, bounds: Optional[DateBounds] = None):
        super().__init__(name="WEEKEND", bounds=bounds)


def adjust(
    day: date,
    convention: BusinessDayConvention,
    calendar: Optional[BusinessCalendar] = None,
) -> Optional[date]:
    """
    Adjust a date according to business day convention.

    Args:
        day: Date to adjust
        convention: Business day adjustment rule
        calendar: Calendar to use (defaults to weekend-only)

    Returns:
        Adjusted date, or None if no business day exists within bounds
    """
    cal = calendar if calendar is not None else WEEKEND_ONLY
    return cal.adjust(day, convention)


WEEKEND_ONLY = WeekendCalendar()


__all__ = [
    "BusinessCalendar",
    "DateBounds",
    "FULL_RANGE",
    "HolidayCalendar",
    "WeekendCalendar",
    "WEEKEND_ONLY",
    "adjust",
]
