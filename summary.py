"""
Monthly figures derived from the entries and payments of one month.

Everything here is pure: callers fetch the month's rows and pass them in.
A NULL quantity, rate or amount counts as zero.
"""

import calendar
import math
from datetime import date, datetime


def coerce_number(value):
    """float() the value, or None when it is missing or not a number."""
    if value is None or value == '':
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def current_month():
    return date.today().strftime('%Y-%m')


def parse_month(month):
    """First day of a ``YYYY-MM`` month. Raises ValueError for anything else."""
    return datetime.strptime(month, '%Y-%m').date()


def _num(value):
    return value or 0


def entry_amount(entry):
    return _num(entry.get('quantity')) * _num(entry.get('rate'))


def monthly_summary(entries, payments):
    total_liters = sum(_num(e.get('quantity')) for e in entries)
    total_amount = sum(entry_amount(e) for e in entries)
    paid_amount = sum(_num(p.get('amount')) for p in payments)
    return {
        'totalLiters': total_liters,
        'totalAmount': total_amount,
        'paidAmount': paid_amount,
        'balance': total_amount - paid_amount,
        'totalDays': sum(1 for e in entries if _num(e.get('quantity')) > 0),
    }


def daily_series(month, entries):
    """One point per calendar day of ``month``; days without an entry read 0 liters."""
    first = parse_month(month)
    by_date = {e['date']: e for e in entries}
    _, days_in_month = calendar.monthrange(first.year, first.month)

    series = []
    for day in range(1, days_in_month + 1):
        full_date = first.replace(day=day).isoformat()
        entry = by_date.get(full_date)
        series.append({
            'date': f"{day:02d}",
            'liters': _num(entry.get('quantity')) if entry else 0,
            'fullDate': full_date,
        })
    return series
