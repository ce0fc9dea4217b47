"""Quick-pick values and example setups for the calculator form.

Example setups are EDUCATIONAL starting points only, not medical advice.
"""

from models import CalculatorInputs, DosingSchedule, SYRINGE_SIZES_ML


VIAL_SIZES_MG = [5, 10, 15, 20]
WATER_VOLUMES_ML = [1, 2, 3]
DOSES_MCG = [100, 250, 500, 1000]

SCHEDULES = [{"value": s.value, "label": s.label} for s in DosingSchedule]

EXAMPLE_SETUPS = [
    {
        "slug": "bpc157-daily",
        "peptide_name": "BPC-157",
        "vial_size_mg": 5,
        "water_volume_ml": 2,
        "desired_dose_mcg": 250,
        "syringe_size_ml": 0.3,
        "dosing_schedule": "once-daily",
    },
    {
        "slug": "tb500-weekly",
        "peptide_name": "TB-500",
        "vial_size_mg": 10,
        "water_volume_ml": 2,
        "desired_dose_mcg": 2500,
        "syringe_size_ml": 1.0,
        "dosing_schedule": "2-3x-week",
    },
    {
        "slug": "ipamorelin-5on2off",
        "peptide_name": "Ipamorelin",
        "vial_size_mg": 5,
        "water_volume_ml": 2.5,
        "desired_dose_mcg": 250,
        "syringe_size_ml": 0.3,
        "dosing_schedule": "once-daily-5days",
    },
    {
        "slug": "ghkcu-daily",
        "peptide_name": "GHK-Cu",
        "vial_size_mg": 50,
        "water_volume_ml": 3,
        "desired_dose_mcg": 2000,
        "syringe_size_ml": 0.5,
        "dosing_schedule": "once-daily",
    },
]

SETUP_BY_SLUG = {s["slug"]: s for s in EXAMPLE_SETUPS}


def inputs_for_setup(slug: str) -> CalculatorInputs:
    """CalculatorInputs pre-filled from an example setup"""
    try:
        setup = SETUP_BY_SLUG[slug]
    except KeyError:
        raise KeyError(f"Unknown example setup: {slug}") from None
    return CalculatorInputs.from_dict(setup)


def all_presets() -> dict:
    return {
        "vial_sizes_mg": VIAL_SIZES_MG,
        "water_volumes_ml": WATER_VOLUMES_ML,
        "doses_mcg": DOSES_MCG,
        "syringe_sizes_ml": list(SYRINGE_SIZES_ML),
        "schedules": SCHEDULES,
        "example_setups": EXAMPLE_SETUPS,
    }
