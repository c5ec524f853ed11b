"""Date manipulation utilities"""

import calendar
from datetime import date, timedelta
from typing import List

from finboard.domain.exceptions import InvalidMonthError


def generate_date_range(start: date, end: date) -> List[date]:
    """Generate list of dates from start to end (inclusive)"""
    days = (end - start).days + 1
    return [start + timedelta(days=i) for i in range(days)]


def month_start(d: date) -> date:
    return d.replace(day=1)


def days_in_month(d: date) -> int:
    """Number of calendar days in d's month (28-31, leap-year aware)"""
    return calendar.monthrange(d.year, d.month)[1]


def month_end(d: date) -> date:
    return d.replace(day=days_in_month(d))


def shift_months(d: date, months: int) -> date:
    """First day of the month `months` away from d's month (negative goes back)"""
    index = d.year * 12 + (d.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def next_month(d: date) -> date:
    return shift_months(d, 1)


def month_id(d: date) -> str:
    """Storage key for a month, e.g. 2024-03"""
    return f"{d.year:04d}-{d.month:02d}"


def parse_month_id(value: str) -> date:
    """
    Parse a YYYY-MM string into the first day of that month.

    Raises:
        InvalidMonthError: If value is not a valid year-month
    """
    try:
        year_str, month_str = value.split("-")
        if len(year_str) != 4 or len(month_str) != 2:
            raise ValueError(value)
        return date(int(year_str), int(month_str), 1)
    except (ValueError, AttributeError) as e:
        raise InvalidMonthError(f"Invalid month '{value}', expected YYYY-MM") from e
