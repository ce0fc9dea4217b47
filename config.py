"""
Configuration for Peptide Calculator
"""

import logging
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _float_env(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except ValueError:
        return default


class Config:
    """Application configuration"""

    # Days subtracted from the supply before a reorder is due
    REORDER_LEAD_DAYS = int(_float_env("REORDER_LEAD_DAYS", 7))

    # Pause before the calendar file is assembled (lets a UI show a spinner)
    CALENDAR_EXPORT_DELAY_SECONDS = _float_env("CALENDAR_EXPORT_DELAY_SECONDS", 0.8)
    CALENDAR_PRODID = os.getenv("CALENDAR_PRODID", "-//Peptide Calculator//EN")
    CALENDAR_FILENAME = os.getenv("CALENDAR_FILENAME", "peptide-reorder-reminder.ics")

    DEFAULT_SYRINGE_ML = _float_env("DEFAULT_SYRINGE_ML", 0.3)
    if DEFAULT_SYRINGE_ML not in (0.3, 0.5, 1.0):
        DEFAULT_SYRINGE_ML = 0.3

    # Application settings
    DEBUG = os.getenv("DEBUG", "False").lower() == "true"
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    PORT = int(_float_env("PORT", 5000))

    @classmethod
    def configure_logging(cls):
        """Apply LOG_LEVEL to the root logger"""
        logging.basicConfig(
            level=getattr(logging, cls.LOG_LEVEL, logging.INFO),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    @classmethod
    def print_config(cls):
        """Print current configuration"""
        print("\n" + "="*60)
        print("PEPTIDE CALCULATOR CONFIGURATION")
        print("="*60)
        print(f"Reorder lead time: {cls.REORDER_LEAD_DAYS} days")
        print(f"Calendar export delay: {cls.CALENDAR_EXPORT_DELAY_SECONDS}s")
        print(f"Calendar file: {cls.CALENDAR_FILENAME}")
        print(f"Default syringe: {cls.DEFAULT_SYRINGE_ML} ml")
        print(f"Debug mode: {cls.DEBUG}")
        print(f"Log level: {cls.LOG_LEVEL}")
        print("="*60 + "\n")


if __name__ == "__main__":
    Config.print_config()
