"""Calendar date helpers shared by the stores"""

import calendar
from datetime import date, datetime
from typing import Optional


def clean_date_string(value: Optional[str]) -> str:
    """Keep only the YYYY-MM-DD part of a date or datetime string"""
    if not value:
        return ""
    value = str(value)
    if "T" in value:
        return value.split("T")[0]
    if " " in value:
        return value.split(" ")[0]
    return value


def parse_date_string(date_str: Optional[str]) -> Optional[date]:
    """Parse a date string to a date object, None when unreadable"""
    if not date_str or date_str == '':
        return None
    try:
        # Handle ISO format with timezone
        if 'T' in date_str:
            return datetime.fromisoformat(date_str.replace('Z', '+00:00')).date()
        return datetime.strptime(date_str, '%Y-%m-%d').date()
    except (ValueError, TypeError):
        return None


def add_months(start: date, months: int) -> date:
    """Same day N months later, clamped to the end of the target month"""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def today_string() -> str:
    return date.today().isoformat()
