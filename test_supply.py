import pytest

from supply import SupplyTracker


@pytest.mark.parametrize("vial_mcg,dose_mcg", [(10000, 250), (5000, 300), (2000, 7), (15000, 1000)])
def test_doses_in_vial_times_dose_is_vial_mass(vial_mcg, dose_mcg):
    assert SupplyTracker.doses_in_vial(vial_mcg, dose_mcg) * dose_mcg == pytest.approx(vial_mcg)


def test_doses_in_vial_without_dose_is_zero():
    assert SupplyTracker.doses_in_vial(10000, 0) == 0
    assert SupplyTracker.doses_in_vial(10000, -5) == 0
    assert SupplyTracker.doses_in_vial(0, 250) == 0


def test_depletion_predicate():
    assert SupplyTracker.is_depleted(10, 10) is True
    assert SupplyTracker.is_depleted(10, 9.999) is False
    assert SupplyTracker.is_depleted(10, 12) is True
    # nothing in the vial is "unknown", not depleted
    assert SupplyTracker.is_depleted(0, 0) is False


def test_remaining_is_unclamped_but_percentage_is_clamped():
    state = SupplyTracker.state(doses_in_vial=10, doses_used=12)
    assert state.doses_remaining == -2
    assert state.percentage_remaining == 0.0
    assert state.depleted is True

    state = SupplyTracker.state(doses_in_vial=40, doses_used=10)
    assert state.doses_remaining == 30
    assert state.percentage_remaining == pytest.approx(75.0)
    assert state.depleted is False


def test_percentage_without_supply_is_zero():
    assert SupplyTracker.percentage_remaining(0, 0) == 0.0


def test_increment_stops_at_vial_contents():
    assert SupplyTracker.increment(0, 40) == 1
    assert SupplyTracker.increment(39.5, 40) == 40
    assert SupplyTracker.increment(40, 40) == 40


def test_decrement_stops_at_zero():
    assert SupplyTracker.decrement(3) == 2
    assert SupplyTracker.decrement(0.5) == 0
    assert SupplyTracker.decrement(0) == 0


def test_display_text():
    state = SupplyTracker.state(doses_in_vial=40, doses_used=10)
    assert SupplyTracker.remaining_text(state) == "30.0 / 40.0"
    assert SupplyTracker.percentage_text(state) == "75.0% Remaining"
