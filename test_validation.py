from models import CalculationMode, CalculatorInputs, DosingSchedule
from validation import REQUIRED_POSITIVE, is_valid, validate_inputs


def test_empty_units_form():
    errors = validate_inputs(CalculatorInputs())
    assert errors == {
        "vial_size_mg": REQUIRED_POSITIVE,
        "water_volume_ml": REQUIRED_POSITIVE,
        "desired_dose_mcg": REQUIRED_POSITIVE,
    }


def test_weight_based_checks_weight_and_rate_instead_of_dose():
    errors = validate_inputs(CalculatorInputs(vial_size_mg=10, water_volume_ml=2, use_weight=True, body_weight_kg=80))
    assert set(errors) == {"mcg_per_kg"}


def test_dose_mode_checks_syringe_units():
    errors = validate_inputs(CalculatorInputs(mode=CalculationMode.DOSE, vial_size_mg=10, water_volume_ml=2))
    assert set(errors) == {"syringe_units"}


def test_custom_schedule_needs_doses_per_week():
    inputs = CalculatorInputs(
        vial_size_mg=10, water_volume_ml=2, desired_dose_mcg=250, dosing_schedule=DosingSchedule.CUSTOM,
    )
    assert set(validate_inputs(inputs)) == {"custom_doses_per_week"}


def test_negative_values_are_flagged():
    errors = validate_inputs(CalculatorInputs(vial_size_mg=-1, water_volume_ml=2, desired_dose_mcg=250))
    assert set(errors) == {"vial_size_mg"}


def test_complete_form_is_valid():
    assert is_valid(CalculatorInputs(vial_size_mg=10, water_volume_ml=2, desired_dose_mcg=250))
