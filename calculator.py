"""
Peptide Calculator
Handles reconstitution and dosing calculations
"""

from dataclasses import replace
from datetime import date
from typing import List, Optional

from models import (
    CalculationMode,
    CalculationResult,
    CalculatorInputs,
    CalculatorSnapshot,
    ConversionFactor,
    DirectDose,
    DoseConversion,
    DoseInput,
    FromUnits,
    UNITS_PER_ML,
    VialSpec,
    WeightBasedDose,
)
from schedule import ScheduleProjector
from supply import SupplyTracker
from validation import validate_inputs


PLACEHOLDER_TEXT = "--"
PLACEHOLDER_LABEL = "Select vial size and water volume to begin"


class PeptideCalculator:
    """Calculate peptide reconstitution and dosing"""

    @staticmethod
    def conversion_factor(vial: VialSpec) -> Optional[ConversionFactor]:
        """
        Calculate concentration after reconstitution

        Args:
            vial: Peptide mass (mg) and bacteriostatic water (ml)

        Returns:
            ConversionFactor, or None while the vial is incomplete
        """
        concentration = vial.concentration_mg_per_ml
        if concentration is None:
            return None

        # mg/ml -> mcg/ml, then per syringe unit (1/100 ml)
        mcg_per_unit = (concentration * 1000) / UNITS_PER_ML
        return ConversionFactor(concentration_mg_per_ml=concentration, mcg_per_unit=mcg_per_unit)

    @staticmethod
    def units_for_dose(
        dose_mcg: float,
        factor: Optional[ConversionFactor],
        capacity_units: float,
    ) -> Optional[DoseConversion]:
        """
        Convert a dose to units on an insulin syringe

        Args:
            dose_mcg: Desired dose in micrograms
            factor: Conversion factor for the vial
            capacity_units: Syringe capacity in units

        Returns:
            DoseConversion (with the over-capacity advisory), or None
            when there is no factor or no dose
        """
        if factor is None or dose_mcg <= 0:
            return None
        units = dose_mcg / factor.mcg_per_unit
        return DoseConversion(units=units, dose_mcg=dose_mcg, capacity_exceeded=units > capacity_units)

    @staticmethod
    def dose_for_units(units: float, factor: Optional[ConversionFactor]) -> Optional[DoseConversion]:
        """
        Convert syringe units back to the dose they contain

        Args:
            units: Units drawn on the syringe
            factor: Conversion factor for the vial

        Returns:
            DoseConversion, or None when there is no factor or no units
        """
        if factor is None or units <= 0:
            return None
        return DoseConversion(units=units, dose_mcg=units * factor.mcg_per_unit)

    @staticmethod
    def weight_based_dose(weight_kg: float, mcg_per_kg: float) -> float:
        """Dose from body weight (kg) x dose rate (mcg/kg)"""
        if weight_kg <= 0 or mcg_per_kg <= 0:
            return 0.0
        return weight_kg * mcg_per_kg

    @staticmethod
    def resolve_dose(dose: DoseInput) -> float:
        """Effective dose in mcg for a Direct or WeightBased entry"""
        if isinstance(dose, WeightBasedDose):
            return PeptideCalculator.weight_based_dose(dose.weight_kg, dose.mcg_per_kg)
        if isinstance(dose, DirectDose):
            return dose.mcg
        raise TypeError(f"{type(dose).__name__} has no dose to resolve")

    @staticmethod
    def effective_dose(inputs: CalculatorInputs) -> float:
        """
        The dose used for supply and schedule tracking.

        Weight-based dosing only applies in units mode; everywhere else the
        directly entered dose is used.
        """
        if inputs.mode is CalculationMode.UNITS and inputs.use_weight:
            return PeptideCalculator.resolve_dose(
                WeightBasedDose(weight_kg=inputs.body_weight_kg, mcg_per_kg=inputs.mcg_per_kg)
            )
        return PeptideCalculator.resolve_dose(DirectDose(mcg=inputs.desired_dose_mcg))

    @staticmethod
    def recompute(inputs: CalculatorInputs) -> CalculationResult:
        """
        Run one full calculation pass for the current inputs

        Returns:
            CalculationResult; a placeholder while vial size or water
            volume is missing
        """
        calc = PeptideCalculator
        factor = calc.conversion_factor(inputs.vial)
        if factor is None:
            return CalculationResult(main_value=None, main_text=PLACEHOLDER_TEXT, value_label=PLACEHOLDER_LABEL)

        dose = inputs.dose_input()

        if isinstance(dose, FromUnits):
            conversion = calc.dose_for_units(dose.units, factor)
            if conversion is None:
                return CalculationResult(main_value=None, main_text=PLACEHOLDER_TEXT, value_label="Result:")
            return CalculationResult(
                main_value=conversion.dose_mcg,
                main_text=f"{conversion.dose_mcg:.1f} mcg",
                value_label="Actual Dose:",
                total_mass_for_cycle_mg=calc.cycle_total_mg(conversion.dose_mcg, inputs.cycle_days),
            )

        # Direct and weight-based entries share the same converter
        active_dose = calc.resolve_dose(dose)
        conversion = calc.units_for_dose(active_dose, factor, inputs.syringe.capacity_units)
        if conversion is None:
            return CalculationResult(main_value=None, main_text=PLACEHOLDER_TEXT, value_label="Result:")

        weight_based = isinstance(dose, WeightBasedDose)
        return CalculationResult(
            main_value=conversion.units,
            main_text=f"{conversion.units:.1f} Units",
            value_label=f"Calculated Dose: {active_dose:.0f}mcg" if weight_based else "Units to Pull:",
            total_mass_for_cycle_mg=calc.cycle_total_mg(active_dose, inputs.cycle_days),
            capacity_exceeded=conversion.capacity_exceeded,
            syringe_units=conversion.units,
            calculated_dose_mcg=active_dose if weight_based else 0.0,
        )

    @staticmethod
    def cycle_total_mg(dose_mcg: float, cycle_days: float) -> float:
        """Peptide needed for a whole cycle of daily doses (mg)"""
        if dose_mcg <= 0 or cycle_days <= 0:
            return 0.0
        return dose_mcg * cycle_days / 1000

    @staticmethod
    def fill_percentage(units: float, capacity_units: float) -> float:
        """How full the syringe drawing should be, capped at 100%"""
        if units <= 0 or capacity_units <= 0:
            return 0.0
        return min(units / capacity_units * 100, 100.0)

    @staticmethod
    def syringe_markers(capacity_ml: float) -> List[int]:
        """Graduation labels for the syringe drawing"""
        max_units = capacity_ml * UNITS_PER_ML
        count = 6 if capacity_ml == 0.3 else 10
        return [int(round(max_units / count * i)) for i in range(count + 1)]

    @staticmethod
    def full_reconstitution_report(
        inputs: CalculatorInputs,
        today: Optional[date] = None,
    ) -> CalculatorSnapshot:
        """
        Generate every output for one set of inputs

        Args:
            inputs: Current form values
            today: Reference date for the reorder projection

        Returns:
            CalculatorSnapshot with result, supply, schedule and validation
        """
        calc = PeptideCalculator
        factor = calc.conversion_factor(inputs.vial)
        result = calc.recompute(inputs)
        effective_dose = calc.effective_dose(inputs)

        doses_in_vial = SupplyTracker.doses_in_vial(inputs.vial.mass_mcg, effective_dose)
        supply = SupplyTracker.state(doses_in_vial, inputs.doses_used)

        doses_per_week = ScheduleProjector.doses_per_week(inputs.dosing_schedule, inputs.custom_doses_per_week)
        days_supply = ScheduleProjector.days_of_supply(doses_in_vial, doses_per_week)
        projection = ScheduleProjector.project_reorder(days_supply, today=today)

        capacity_units = inputs.syringe.capacity_units
        drawn_units = inputs.syringe_units if inputs.mode is CalculationMode.DOSE else result.syringe_units

        return CalculatorSnapshot(
            inputs=inputs,
            concentration_mg_per_ml=factor.concentration_mg_per_ml if factor else None,
            mcg_per_unit=factor.mcg_per_unit if factor else None,
            effective_dose_mcg=effective_dose,
            result=result,
            supply=supply,
            doses_per_week=doses_per_week,
            projection=projection,
            reorder_display=ScheduleProjector.reorder_display(projection),
            fill_percentage=calc.fill_percentage(drawn_units, capacity_units),
            syringe_markers=calc.syringe_markers(inputs.syringe_size_ml),
            errors=validate_inputs(inputs),
        )

    @staticmethod
    def log_dose(inputs: CalculatorInputs) -> CalculatorInputs:
        """Count one more dose as used"""
        dose = PeptideCalculator.effective_dose(inputs)
        in_vial = SupplyTracker.doses_in_vial(inputs.vial.mass_mcg, dose)
        return replace(inputs, doses_used=SupplyTracker.increment(inputs.doses_used, in_vial))

    @staticmethod
    def undo_dose(inputs: CalculatorInputs) -> CalculatorInputs:
        return replace(inputs, doses_used=SupplyTracker.decrement(inputs.doses_used))

    @staticmethod
    def print_reconstitution_report(snapshot: CalculatorSnapshot) -> None:
        """Print a formatted reconstitution report"""
        inputs = snapshot.inputs
        result = snapshot.result

        print(f"\n{'='*60}")
        print("PEPTIDE RECONSTITUTION REPORT")
        print(f"{'='*60}")
        print("\nVIAL PREPARATION:")
        print(f"  • Peptide amount: {inputs.vial_size_mg:g} mg")
        print(f"  • Bacteriostatic water: {inputs.water_volume_ml:g} ml")
        if snapshot.concentration_mg_per_ml is not None:
            print(f"  • Concentration: {snapshot.concentration_mg_per_ml:.2f} mg/ml")
            print(f"  • Mcg per unit: {snapshot.mcg_per_unit:.2f}")
        else:
            print(f"  • Concentration: {PLACEHOLDER_TEXT}")
        print(f"\n{result.value_label} {result.main_text}")
        if result.capacity_exceeded:
            print(f"  ⚠ Exceeds a {inputs.syringe_size_ml:g} ml syringe "
                  f"({inputs.syringe.capacity_units:g} units max)")
        if result.total_mass_for_cycle_mg > 0:
            print(f"  • Total for {inputs.cycle_days:g}-day cycle: {result.total_mass_for_cycle_mg:.2f} mg")

        if snapshot.supply.doses_in_vial > 0:
            print("\nSUPPLY:")
            print(f"  • Doses remaining: {SupplyTracker.remaining_text(snapshot.supply)}")
            print(f"  • {SupplyTracker.percentage_text(snapshot.supply)}")
            if snapshot.supply.depleted:
                print("  ⚠ Vial depleted")

        if snapshot.projection.days_of_supply > 0:
            print("\nSCHEDULE:")
            print(f"  • Frequency: {inputs.dosing_schedule.label} ({snapshot.doses_per_week:g}/week)")
            print(f"  • Days supply: {snapshot.projection.days_of_supply:.1f} days")
            print(f"  • Reorder by: {snapshot.reorder_display}")

        if snapshot.errors:
            print("\nCHECK THESE FIELDS:")
            for name, message in snapshot.errors.items():
                print(f"  • {name}: {message}")
        print(f"{'='*60}\n")


def interactive_calculator():
    """Interactive command-line calculator"""
    print("\n" + "="*60)
    print("PEPTIDE RECONSTITUTION CALCULATOR")
    print("="*60)

    try:
        inputs = CalculatorInputs(
            vial_size_mg=float(input("\nEnter peptide amount in vial (mg): ")),
            water_volume_ml=float(input("Enter bacteriostatic water to add (ml): ")),
            desired_dose_mcg=float(input("Enter desired dose per injection (mcg): ")),
        )
        snapshot = PeptideCalculator.full_reconstitution_report(inputs)
        PeptideCalculator.print_reconstitution_report(snapshot)

    except ValueError as e:
        print(f"\n❌ Error: {e}")
        print("Please enter valid numbers.")


if __name__ == "__main__":
    interactive_calculator()

    # Example usage
    print("\n" + "="*60)
    print("EXAMPLE CALCULATIONS:")
    print("="*60)

    example = PeptideCalculator.full_reconstitution_report(
        CalculatorInputs(vial_size_mg=10, water_volume_ml=2, desired_dose_mcg=250)
    )
    PeptideCalculator.print_reconstitution_report(example)
