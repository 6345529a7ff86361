"""
Progress-bar math for the maintenance report and the ELT screen.
TC-SAFE: percentages and statuses are visual references only.
"""

import math
from datetime import date
from typing import Optional
from models.elt import DateProgress, ELTStatus
from models.report_settings import ProgressStatus
from services.dates import add_months, parse_date_string

# Share of the interval after which an item is flagged
ATTENTION_PERCENT = 80


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def elt_date_progress(last_date: str, limit_months: int, today: Optional[date] = None) -> DateProgress:
    """Progress from last_date to last_date + limit_months"""
    last = parse_date_string(last_date)
    if last is None:
        return DateProgress()

    expiry = add_months(last, limit_months)
    return elt_interval_progress(last, expiry, today)


def elt_interval_progress(start: date, expiry: date, today: Optional[date] = None) -> DateProgress:
    """Progress between two known dates (battery install -> battery expiry)"""
    today = today or date.today()
    total_days = (expiry - start).days
    if total_days <= 0:
        return DateProgress(percent=100, days_remaining=0, status=ELTStatus.EXPIRED)

    elapsed_days = (today - start).days
    days_remaining = (expiry - today).days
    percent = min(round_half_up(elapsed_days / total_days * 100), 100)

    status = ELTStatus.OPERATIONAL
    if days_remaining <= 0:
        status = ELTStatus.EXPIRED
    elif percent >= ATTENTION_PERCENT:
        status = ELTStatus.ATTENTION

    return DateProgress(percent=percent, days_remaining=days_remaining, status=status)


def hours_progress(current: float, limit: float) -> tuple[int, ProgressStatus]:
    """Hours used against an hours limit (TBO, magnetos, vacuum pump)"""
    if limit <= 0:
        return 100, ProgressStatus.EXCEEDED

    percent = round_half_up(current / limit * 100)
    if percent >= 100:
        return 100, ProgressStatus.EXCEEDED
    if percent >= ATTENTION_PERCENT:
        return percent, ProgressStatus.WARNING
    return percent, ProgressStatus.OK


def date_progress(last_date: str, limit_months: int, today: Optional[date] = None) -> tuple[int, ProgressStatus, int]:
    """Calendar limit progress; returns (percent, status, days_remaining)"""
    last = parse_date_string(last_date)
    if last is None:
        return 0, ProgressStatus.OK, 0

    today = today or date.today()
    expiry = add_months(last, limit_months)
    total_days = (expiry - last).days
    days_remaining = (expiry - today).days
    if days_remaining <= 0 or total_days <= 0:
        return 100, ProgressStatus.EXCEEDED, days_remaining

    percent = round_half_up((today - last).days / total_days * 100)
    if percent >= ATTENTION_PERCENT:
        return percent, ProgressStatus.WARNING, days_remaining
    return percent, ProgressStatus.OK, days_remaining


def elt_to_report_status(status: ELTStatus) -> ProgressStatus:
    if status == ELTStatus.OPERATIONAL:
        return ProgressStatus.OK
    if status == ELTStatus.ATTENTION:
        return ProgressStatus.WARNING
    return ProgressStatus.EXCEEDED
