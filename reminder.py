"""
Reorder Reminder Export
Builds an iCalendar (.ics) reminder for the projected reorder date
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Optional

from config import Config
from models import CalculatorSnapshot, DosingSchedule, ReorderProjection


logger = logging.getLogger(__name__)

ICS_MIME_TYPE = "text/calendar; charset=utf-8"


class ExportInProgress(RuntimeError):
    """Raised when a second export is started before the first finished"""


@dataclass(frozen=True)
class CalendarFile:
    filename: str
    content: str
    mime_type: str = ICS_MIME_TYPE


def _ics_date(value: date) -> str:
    return value.strftime("%Y%m%d")


def _ics_timestamp(value: datetime) -> str:
    # Naive datetimes are taken as UTC
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y%m%dT%H%M%SZ")


def _escape_text(text: str) -> str:
    return (
        text.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\n", "\\n")
    )


def _number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


class ReminderExporter:
    """Serialize a reorder projection into a calendar file"""

    def __init__(self, prodid: Optional[str] = None, filename: Optional[str] = None):
        self.prodid = prodid or Config.CALENDAR_PRODID
        self.filename = filename or Config.CALENDAR_FILENAME

    def build_ics(
        self,
        projection: ReorderProjection,
        vial_size_mg: float,
        dose_mcg: float,
        schedule: DosingSchedule,
        now: Optional[datetime] = None,
    ) -> str:
        """
        Build the calendar text for one all-day reorder event

        Args:
            projection: Must carry a scheduled reorder date
            vial_size_mg: Vial size shown in the description
            dose_mcg: Effective dose shown in the description
            schedule: Dosing schedule shown in the description
            now: Creation time for DTSTAMP (defaults to the current UTC time)

        Returns:
            iCalendar text with CRLF line endings
        """
        if not projection.is_exportable:
            raise ValueError(f"No reorder date to export (status: {projection.status.value})")

        now = now or datetime.now(timezone.utc)
        event_date = _ics_date(projection.reorder_date)
        stamp = _ics_timestamp(now)

        description = "\n".join([
            f"Vial Size: {_number(vial_size_mg)}mg",
            f"Current Dose: {_number(dose_mcg)}mcg",
            f"Days Supply: {projection.days_of_supply:.1f} days",
            f"Dosing Schedule: {schedule.label}",
        ])

        lines = [
            "BEGIN:VCALENDAR",
            "VERSION:2.0",
            f"PRODID:{self.prodid}",
            "CALSCALE:GREGORIAN",
            "METHOD:PUBLISH",
            "BEGIN:VEVENT",
            f"UID:reorder-{event_date}-{stamp}@peptide-calculator",
            f"DTSTART;VALUE=DATE:{event_date}",
            f"DTEND;VALUE=DATE:{event_date}",
            f"DTSTAMP:{stamp}",
            "SUMMARY:Reorder Peptide Supply",
            f"DESCRIPTION:{_escape_text(description)}",
            "STATUS:CONFIRMED",
            "SEQUENCE:0",
            "BEGIN:VALARM",
            "TRIGGER:-P1D",
            "ACTION:DISPLAY",
            "DESCRIPTION:Reminder: Reorder Peptide Supply",
            "END:VALARM",
            "END:VEVENT",
            "END:VCALENDAR",
        ]
        return "\r\n".join(lines) + "\r\n"

    def build_for_snapshot(self, snapshot: CalculatorSnapshot, now: Optional[datetime] = None) -> str:
        return self.build_ics(
            snapshot.projection,
            vial_size_mg=snapshot.inputs.vial_size_mg,
            dose_mcg=snapshot.effective_dose_mcg,
            schedule=snapshot.inputs.dosing_schedule,
            now=now,
        )

    async def export(
        self,
        snapshot: CalculatorSnapshot,
        now: Optional[datetime] = None,
        delay: Optional[float] = None,
    ) -> CalendarFile:
        """
        Wait out the fixed delay, then assemble the file.

        Callers must check snapshot.projection.is_exportable first.
        """
        if delay is None:
            delay = Config.CALENDAR_EXPORT_DELAY_SECONDS
        logger.debug("Generating reorder reminder in %.2fs", delay)
        await asyncio.sleep(delay)

        content = self.build_for_snapshot(snapshot, now=now)
        logger.info("Reorder reminder built for %s", snapshot.projection.reorder_date)
        return CalendarFile(filename=self.filename, content=content)


class ExportGuard:
    """Busy flag that keeps at most one export in flight"""

    def __init__(self, exporter: Optional[ReminderExporter] = None):
        self.exporter = exporter or ReminderExporter()
        self.busy = False

    async def run(self, snapshot: CalculatorSnapshot, **kwargs) -> CalendarFile:
        if self.busy:
            raise ExportInProgress("A calendar export is already running")
        self.busy = True
        try:
            return await self.exporter.export(snapshot, **kwargs)
        finally:
            self.busy = False
