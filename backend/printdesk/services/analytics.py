"""
Analytics Service

Derived views for the dashboard charts:
- filament_remaining: grams left per enumerated colour
- orders_per_week: dense weekly order counts for the current year
"""
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional, Sequence

from printdesk.schemas.catalog import FilamentRead
from printdesk.schemas.dashboard import FilamentRemaining, WeeklyOrderCount
from printdesk.schemas.order import OrderBase


COLOR_SWATCHES = {
    "black": "#000000",
    "blue": "#0000FF",
    "lavender": "#E6E6FA",
    "pink": "#FFC0CB",
    "green": "#008000",
    "yellow": "#FFFF00",
}

NO_MATERIAL = "N/A"


def filament_remaining(
    filaments: Sequence[FilamentRead],
    color_options: Sequence[str],
) -> List[FilamentRemaining]:
    """
    One row per enumerated colour, in enumeration order.

    Only the first spool whose colour_name matches exactly is used, so a
    colour stocked on several spools shows the first spool alone. Colours
    without a spool report 0 remaining and "N/A" as material.

    Args:
        filaments: Spools as fetched
        color_options: The enumerated colour set

    Returns:
        List of FilamentRemaining, len(color_options) long
    """
    rows = []
    for colour in color_options:
        filament = next((f for f in filaments if f.colour_name == colour), None)
        if filament is None:
            material = NO_MATERIAL
            remaining = 0.0
        else:
            material = filament.material or NO_MATERIAL
            remaining = filament.remaining

        rows.append(FilamentRemaining(
            label=f"{colour} ({material})",
            remaining=remaining,
            colour=colour,
            fill=COLOR_SWATCHES.get(colour),
        ))
    return rows


def week_start(day: date) -> date:
    """Monday of the week containing `day`."""
    return day - timedelta(days=day.weekday())


def week_starts(today: date) -> List[date]:
    """
    Mondays from the week containing 1 January through the week containing
    `today`, inclusive. The first Monday may fall in December of the
    previous year.
    """
    first = week_start(date(today.year, 1, 1))
    last = week_start(today)
    weeks = []
    current = first
    while current <= last:
        weeks.append(current)
        current += timedelta(days=7)
    return weeks


def format_week_label(day: date) -> str:
    """Chart axis label, e.g. "Jan 1"."""
    return f"{day:%b} {day.day}"


def orders_per_week(
    orders: Iterable[OrderBase],
    today: Optional[date] = None,
) -> List[WeeklyOrderCount]:
    """
    Count orders per Monday-based week, from the start of today's year to
    today's week.

    Weeks without orders are included with count 0, so the series has no
    gaps. Orders outside the covered weeks, or without a date, are ignored.

    Args:
        orders: Orders with date_of_order
        today: Reference day (defaults to date.today())

    Returns:
        Chronological list of WeeklyOrderCount
    """
    if today is None:
        today = date.today()

    weeks = week_starts(today)
    counts: Dict[date, int] = {monday: 0 for monday in weeks}
    for order in orders:
        if order.date_of_order is None:
            continue
        monday = week_start(order.date_of_order)
        if monday in counts:
            counts[monday] += 1

    return [
        WeeklyOrderCount(
            week_label=format_week_label(monday),
            week_start=monday,
            count=counts[monday],
        )
        for monday in weeks
    ]
