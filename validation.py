"""
Input Validation
Flags missing / non-positive fields for the active mode.

Purpose: annotate the form, NOT gate the calculation. The engine recomputes
whatever it can regardless of what is flagged here.
"""

from typing import Dict

from models import CalculationMode, CalculatorInputs, DosingSchedule


REQUIRED_POSITIVE = "Required - must be positive"


def validate_inputs(inputs: CalculatorInputs) -> Dict[str, str]:
    """
    Returns {field_name: message} for every field that must be > 0 in the
    current mode but is not. An empty dict means the form is valid.
    """
    errors: Dict[str, str] = {}

    def _require(name: str, value: float) -> None:
        if not value > 0:
            errors[name] = REQUIRED_POSITIVE

    _require("vial_size_mg", inputs.vial_size_mg)
    _require("water_volume_ml", inputs.water_volume_ml)

    if inputs.mode is CalculationMode.UNITS:
        if inputs.use_weight:
            _require("body_weight_kg", inputs.body_weight_kg)
            _require("mcg_per_kg", inputs.mcg_per_kg)
        else:
            _require("desired_dose_mcg", inputs.desired_dose_mcg)
    else:
        _require("syringe_units", inputs.syringe_units)

    if inputs.dosing_schedule is DosingSchedule.CUSTOM:
        _require("custom_doses_per_week", inputs.custom_doses_per_week)

    return errors


def is_valid(inputs: CalculatorInputs) -> bool:
    return not validate_inputs(inputs)
