import pytest

from config import Config
from models import (
    CalculationMode,
    CalculatorInputs,
    DirectDose,
    DosingSchedule,
    FromUnits,
    SyringeSpec,
    VialSpec,
    WeightBasedDose,
)
from presets import all_presets, inputs_for_setup


def test_vial_spec():
    vial = VialSpec(mass_mg=10, diluent_ml=2)
    assert vial.is_complete
    assert vial.mass_mcg == 10000
    assert vial.concentration_mg_per_ml == 5
    assert VialSpec(10, 0).concentration_mg_per_ml is None


def test_syringe_capacity():
    assert SyringeSpec(0.3).capacity_units == 30
    assert SyringeSpec(0.5).capacity_units == 50
    assert SyringeSpec(1.0).capacity_units == 100
    with pytest.raises(ValueError):
        SyringeSpec(3.0)


def test_dose_input_variant_follows_mode():
    inputs = CalculatorInputs(desired_dose_mcg=250, body_weight_kg=80, mcg_per_kg=3, syringe_units=12)
    assert inputs.dose_input() == DirectDose(mcg=250)

    weighted = CalculatorInputs(use_weight=True, body_weight_kg=80, mcg_per_kg=3)
    assert weighted.dose_input() == WeightBasedDose(weight_kg=80, mcg_per_kg=3)

    reverse = CalculatorInputs(mode=CalculationMode.DOSE, use_weight=True, syringe_units=12)
    assert reverse.dose_input() == FromUnits(units=12)


def test_from_dict_coerces_loose_form_data():
    inputs = CalculatorInputs.from_dict({
        "mode": "dose",
        "vial_size_mg": "10",
        "water_volume_ml": "",
        "syringe_size_ml": "0.7",
        "use_weight": "true",
        "syringe_units": "abc",
        "dosing_schedule": "fortnightly",
        "doses_used": -3,
    })
    assert inputs.mode is CalculationMode.DOSE
    assert inputs.vial_size_mg == 10
    assert inputs.water_volume_ml == 0
    assert inputs.syringe_size_ml == 0.3
    assert inputs.use_weight is True
    assert inputs.syringe_units == 0
    assert inputs.dosing_schedule is DosingSchedule.ONCE_DAILY
    assert inputs.doses_used == 0
    assert inputs.current_weight_kg == 70
    assert inputs.target_dose_mcg == 250


def test_to_dict_round_trips_through_from_dict():
    inputs = CalculatorInputs(
        mode=CalculationMode.UNITS, vial_size_mg=10, water_volume_ml=2, syringe_size_ml=0.5,
        desired_dose_mcg=250, dosing_schedule=DosingSchedule.CUSTOM, custom_doses_per_week=3,
    )
    assert CalculatorInputs.from_dict(inputs.to_dict()) == inputs


def test_schedule_labels():
    assert DosingSchedule.FIVE_DAYS_PER_WEEK.label == "Once Daily (5 days/week)"
    assert DosingSchedule.CUSTOM.label == "Custom"


def test_presets():
    presets = all_presets()
    assert presets["vial_sizes_mg"] == [5, 10, 15, 20]
    assert presets["syringe_sizes_ml"] == [0.3, 0.5, 1.0]
    assert len(presets["schedules"]) == len(DosingSchedule)

    inputs = inputs_for_setup("tb500-weekly")
    assert inputs.desired_dose_mcg == 2500
    assert inputs.dosing_schedule is DosingSchedule.TWO_TO_THREE_PER_WEEK
    with pytest.raises(KeyError):
        inputs_for_setup("nope")


def test_syringe_default_follows_config(monkeypatch):
    monkeypatch.setattr(Config, "DEFAULT_SYRINGE_ML", 0.5)
    assert CalculatorInputs.from_dict({}).syringe_size_ml == 0.5
    assert CalculatorInputs.from_dict({"syringe_size_ml": "0.7"}).syringe_size_ml == 0.5
    assert CalculatorInputs().syringe_size_ml == 0.5
