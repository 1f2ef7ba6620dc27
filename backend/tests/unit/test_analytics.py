"""
Unit tests for the dashboard chart aggregations
"""
from datetime import date

from printdesk.schemas.catalog import FilamentRead
from printdesk.schemas.order import OrderRead


def make_filament(id, colour_name, size=1000, amount_used=0, material="PLA"):
    return FilamentRead(
        id=id,
        colour_name=colour_name,
        size=size,
        amount_used=amount_used,
        material=material,
        date_of_addition=date(2024, 1, 1),
    )


def make_order(id, day):
    return OrderRead(id=id, date_of_order=day)


class TestFilamentRemaining:
    """Test remaining weight per enumerated colour"""

    def test_matched_and_unmatched_colours(self):
        from printdesk.services.analytics import filament_remaining

        rows = filament_remaining(
            [make_filament(1, "black", size=1000, amount_used=300)],
            ["black", "blue"],
        )

        assert [(r.label, r.remaining) for r in rows] == [
            ("black (PLA)", 700),
            ("blue (N/A)", 0),
        ]

    def test_one_row_per_colour_in_enumeration_order(self):
        from printdesk.services.analytics import filament_remaining

        colours = ["yellow", "black", "pink"]
        rows = filament_remaining([], colours)

        assert [r.colour for r in rows] == colours

    def test_only_first_matching_spool_counts(self):
        from printdesk.services.analytics import filament_remaining

        rows = filament_remaining(
            [
                make_filament(1, "pink", size=1000, amount_used=900),
                make_filament(2, "pink", size=1000, amount_used=0, material="PETG"),
            ],
            ["pink"],
        )

        assert len(rows) == 1
        assert rows[0].label == "pink (PLA)"
        assert rows[0].remaining == 100

    def test_spools_outside_enumeration_ignored(self):
        from printdesk.services.analytics import filament_remaining

        rows = filament_remaining([make_filament(1, "orange")], ["black"])

        assert rows[0].label == "black (N/A)"

    def test_colour_match_is_exact(self):
        from printdesk.services.analytics import filament_remaining

        rows = filament_remaining([make_filament(1, "Black")], ["black"])

        assert rows[0].remaining == 0

    def test_overdrawn_spool_goes_negative(self):
        from printdesk.services.analytics import filament_remaining

        rows = filament_remaining([make_filament(1, "green", size=100, amount_used=150)], ["green"])

        assert rows[0].remaining == -50

    def test_swatch_fill(self):
        from printdesk.services.analytics import filament_remaining

        rows = filament_remaining([], ["black", "teal"])

        assert rows[0].fill == "#000000"
        assert rows[1].fill is None


class TestWeekStarts:
    """Test Monday-based week buckets"""

    def test_week_start_is_monday(self):
        from printdesk.services.analytics import week_start

        assert week_start(date(2024, 1, 10)) == date(2024, 1, 8)
        assert week_start(date(2024, 1, 8)) == date(2024, 1, 8)
        assert week_start(date(2024, 1, 14)) == date(2024, 1, 8)

    def test_first_week_may_start_in_previous_year(self):
        from printdesk.services.analytics import week_starts

        weeks = week_starts(date(2025, 1, 3))

        # 1 Jan 2025 is a Wednesday
        assert weeks == [date(2024, 12, 30)]

    def test_week_label(self):
        from printdesk.services.analytics import format_week_label

        assert format_week_label(date(2024, 1, 1)) == "Jan 1"
        assert format_week_label(date(2024, 12, 30)) == "Dec 30"


class TestOrdersPerWeek:
    """Test dense weekly order counts"""

    def test_counts_for_first_weeks_of_2024(self):
        from printdesk.services.analytics import orders_per_week

        result = orders_per_week(
            [make_order(1, date(2024, 1, 2)), make_order(2, date(2024, 1, 10))],
            today=date(2024, 1, 15),
        )

        assert [w.week_label for w in result] == ["Jan 1", "Jan 8", "Jan 15"]
        assert [w.count for w in result] == [1, 1, 0]

    def test_no_gaps_without_orders(self):
        from printdesk.services.analytics import orders_per_week

        result = orders_per_week([], today=date(2024, 3, 4))

        assert len(result) == 10
        assert all(w.count == 0 for w in result)
        assert result[-1].week_start == date(2024, 3, 4)

    def test_orders_outside_covered_weeks_ignored(self):
        from printdesk.services.analytics import orders_per_week

        orders = [
            make_order(1, date(2023, 6, 1)),
            make_order(2, date(2024, 2, 1)),
            make_order(3, date(2024, 1, 3)),
            OrderRead(id=4, date_of_order=None),
        ]
        result = orders_per_week(orders, today=date(2024, 1, 15))

        assert sum(w.count for w in result) == 1

    def test_orders_in_december_part_of_first_week_count(self):
        from printdesk.services.analytics import orders_per_week

        result = orders_per_week([make_order(1, date(2024, 12, 31))], today=date(2025, 1, 2))

        assert len(result) == 1
        assert result[0].count == 1

    def test_bucket_count_matches_mondays_mid_year(self):
        from datetime import timedelta
        from printdesk.services.analytics import orders_per_week, week_start

        today = date(2024, 7, 17)
        result = orders_per_week([], today=today)

        mondays = []
        day = week_start(date(2024, 1, 1))
        while day <= today:
            if day.weekday() == 0:
                mondays.append(day)
            day += timedelta(days=1)

        assert len(result) == len(mondays) == 29
        assert [w.week_start for w in result] == mondays
