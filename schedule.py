"""
Dosing Schedule Projection
Turns a dosing schedule into days of supply and a reorder date
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from config import Config
from models import DosingSchedule, ReorderProjection, ReorderStatus


DOSES_PER_WEEK = {
    DosingSchedule.ONCE_DAILY: 7.0,
    DosingSchedule.TWICE_DAILY: 14.0,
    DosingSchedule.FIVE_DAYS_PER_WEEK: 5.0,
    DosingSchedule.TWO_TO_THREE_PER_WEEK: 2.5,
    DosingSchedule.EVERY_OTHER_DAY: 3.5,
}

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def _tenths(value: float) -> float:
    # Half-up, so 7 / 28 = 0.25 shows as 0.3
    return float(Decimal(repr(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class CustomFrequency:
    """
    Linked custom-schedule fields: doses per week <-> days between doses.

    Each setter treats its own field as authoritative and derives the other
    once (7 / value, one decimal). A non-positive entry is stored as-is and
    leaves the other field untouched.
    """
    doses_per_week: float = 0.0
    days_between_doses: float = 0.0

    def with_doses_per_week(self, value: float) -> "CustomFrequency":
        if value > 0:
            return CustomFrequency(value, _tenths(7 / value))
        return CustomFrequency(value, self.days_between_doses)

    def with_days_between_doses(self, value: float) -> "CustomFrequency":
        if value > 0:
            return CustomFrequency(_tenths(7 / value), value)
        return CustomFrequency(self.doses_per_week, value)

    @classmethod
    def from_edit(
        cls,
        doses_per_week: float,
        days_between_doses: float,
        edited: Optional[str] = None,
    ) -> "CustomFrequency":
        """
        Rebuild the pair from a form that reports both fields.

        edited names the field the user changed ("doses_per_week" or
        "days_between_doses"). Without it, doses per week wins when set,
        otherwise days between doses.
        """
        current = cls(doses_per_week, days_between_doses)
        if edited == "days_between_doses":
            return current.with_days_between_doses(days_between_doses)
        if edited == "doses_per_week" or doses_per_week > 0:
            return current.with_doses_per_week(doses_per_week)
        if days_between_doses > 0:
            return current.with_days_between_doses(days_between_doses)
        return current


class ScheduleProjector:
    """Schedule -> weekly doses -> days of supply -> reorder date"""

    @staticmethod
    def doses_per_week(schedule: DosingSchedule, custom_doses_per_week: float = 0.0) -> float:
        if schedule is DosingSchedule.CUSTOM:
            return custom_doses_per_week
        return DOSES_PER_WEEK[schedule]

    @staticmethod
    def days_of_supply(doses_in_vial: float, doses_per_week: float) -> float:
        """
        Calculate how many days a vial will last

        Args:
            doses_in_vial: Total number of doses in vial
            doses_per_week: How many doses per week

        Returns:
            Days the vial will last, 0 if either side is unknown
        """
        if doses_in_vial <= 0 or doses_per_week <= 0:
            return 0.0
        return doses_in_vial / (doses_per_week / 7)

    @staticmethod
    def project_reorder(
        days_of_supply: float,
        today: Optional[date] = None,
        lead_days: Optional[int] = None,
    ) -> ReorderProjection:
        """
        Work out when to reorder, keeping a lead-time buffer before the vial runs out

        Args:
            days_of_supply: Days the vial will last
            today: Reference date (defaults to date.today())
            lead_days: Buffer in days (defaults to Config.REORDER_LEAD_DAYS)

        Returns:
            ReorderProjection with a date, ORDER_NOW (dated today) or UNAVAILABLE
            (no supply, or a reorder date beyond the calendar)
        """
        unavailable = ReorderProjection(days_of_supply=days_of_supply, status=ReorderStatus.UNAVAILABLE)
        if not math.isfinite(days_of_supply) or days_of_supply <= 0:
            return unavailable

        today = today or date.today()
        if lead_days is None:
            lead_days = Config.REORDER_LEAD_DAYS

        reorder_in = math.floor(days_of_supply - lead_days)
        if reorder_in > (date.max - today).days:
            # Past the last representable calendar date
            return unavailable
        if reorder_in <= 0:
            return ReorderProjection(
                days_of_supply=days_of_supply,
                status=ReorderStatus.ORDER_NOW,
                reorder_date=today,
            )
        return ReorderProjection(
            days_of_supply=days_of_supply,
            status=ReorderStatus.SCHEDULED,
            reorder_date=today + timedelta(days=reorder_in),
        )

    @staticmethod
    def format_date(value: date) -> str:
        """Mon D, YYYY"""
        return f"{_MONTHS[value.month - 1]} {value.day}, {value.year}"

    @staticmethod
    def reorder_display(projection: ReorderProjection) -> str:
        if projection.status is ReorderStatus.UNAVAILABLE:
            return "--"
        if projection.status is ReorderStatus.ORDER_NOW:
            return "Order Now"
        return ScheduleProjector.format_date(projection.reorder_date)
