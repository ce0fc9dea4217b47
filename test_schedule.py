from datetime import date

import pytest

from models import DosingSchedule, ReorderStatus
from schedule import CustomFrequency, ScheduleProjector


@pytest.mark.parametrize("schedule,expected", [
    (DosingSchedule.ONCE_DAILY, 7),
    (DosingSchedule.TWICE_DAILY, 14),
    (DosingSchedule.FIVE_DAYS_PER_WEEK, 5),
    (DosingSchedule.TWO_TO_THREE_PER_WEEK, 2.5),
    (DosingSchedule.EVERY_OTHER_DAY, 3.5),
])
def test_fixed_schedules(schedule, expected):
    assert ScheduleProjector.doses_per_week(schedule, custom_doses_per_week=99) == expected


def test_custom_schedule_uses_user_value():
    assert ScheduleProjector.doses_per_week(DosingSchedule.CUSTOM, 4) == 4
    assert ScheduleProjector.doses_per_week(DosingSchedule.CUSTOM) == 0


def test_linked_fields():
    assert CustomFrequency().with_doses_per_week(2).days_between_doses == 3.5
    assert CustomFrequency().with_days_between_doses(7).doses_per_week == 1.0


def test_edited_field_stays_as_entered():
    freq = CustomFrequency().with_doses_per_week(3)
    assert freq.doses_per_week == 3
    assert freq.days_between_doses == 2.3

    freq = CustomFrequency().with_days_between_doses(3)
    assert freq.days_between_doses == 3
    assert freq.doses_per_week == 2.3


def test_non_positive_entry_keeps_other_field():
    freq = CustomFrequency().with_doses_per_week(2)
    cleared = freq.with_doses_per_week(0)
    assert cleared.doses_per_week == 0
    assert cleared.days_between_doses == 3.5


def test_linked_field_rounds_half_up():
    assert CustomFrequency().with_doses_per_week(28).days_between_doses == 0.3
    assert CustomFrequency().with_days_between_doses(28).doses_per_week == 0.3


def test_from_edit_follows_the_edited_field():
    assert CustomFrequency.from_edit(0, 2) == CustomFrequency(3.5, 2)
    assert CustomFrequency.from_edit(2, 0) == CustomFrequency(2, 3.5)
    assert CustomFrequency.from_edit(2, 7, edited="days_between_doses") == CustomFrequency(1.0, 7)
    assert CustomFrequency.from_edit(2, 7, edited="doses_per_week") == CustomFrequency(2, 3.5)
    assert CustomFrequency.from_edit(0, 0) == CustomFrequency(0, 0)


def test_days_of_supply():
    assert ScheduleProjector.days_of_supply(40, 7) == pytest.approx(40)
    assert ScheduleProjector.days_of_supply(40, 14) == pytest.approx(20)
    assert ScheduleProjector.days_of_supply(10, 2.5) == pytest.approx(28)
    assert ScheduleProjector.days_of_supply(0, 7) == 0
    assert ScheduleProjector.days_of_supply(40, 0) == 0


def test_reorder_date_keeps_a_week_buffer():
    projection = ScheduleProjector.project_reorder(40, today=date(2026, 10, 19))
    assert projection.status is ReorderStatus.SCHEDULED
    assert projection.reorder_date == date(2026, 11, 21)
    assert projection.is_exportable


def test_reorder_date_rolls_over_year_and_leap_day():
    assert ScheduleProjector.project_reorder(40, today=date(2026, 12, 20)).reorder_date == date(2027, 1, 22)
    assert ScheduleProjector.project_reorder(10.5, today=date(2028, 2, 26)).reorder_date == date(2028, 2, 29)


def test_short_supply_orders_now():
    projection = ScheduleProjector.project_reorder(5, today=date(2026, 10, 19))
    assert projection.status is ReorderStatus.ORDER_NOW
    assert projection.reorder_date == date(2026, 10, 19)
    assert not projection.is_exportable

    # floor(7.9 - 7) == 0
    assert ScheduleProjector.project_reorder(7.9).status is ReorderStatus.ORDER_NOW


def test_no_supply_is_unavailable():
    projection = ScheduleProjector.project_reorder(0)
    assert projection.status is ReorderStatus.UNAVAILABLE
    assert projection.reorder_date is None
    assert ScheduleProjector.reorder_display(projection) == "--"


def test_lead_days_override():
    projection = ScheduleProjector.project_reorder(40, today=date(2026, 10, 19), lead_days=10)
    assert projection.reorder_date == date(2026, 11, 18)


def test_display_format():
    assert ScheduleProjector.format_date(date(2027, 1, 5)) == "Jan 5, 2027"
    projection = ScheduleProjector.project_reorder(40, today=date(2026, 10, 19))
    assert ScheduleProjector.reorder_display(projection) == "Nov 21, 2026"
    assert ScheduleProjector.reorder_display(ScheduleProjector.project_reorder(3)) == "Order Now"


@pytest.mark.parametrize("days", [1e12, float("inf"), float("nan")])
def test_supply_beyond_the_calendar_is_unavailable(days):
    projection = ScheduleProjector.project_reorder(days, today=date(2026, 10, 19))
    assert projection.status is ReorderStatus.UNAVAILABLE
    assert projection.reorder_date is None
    assert ScheduleProjector.reorder_display(projection) == "--"
