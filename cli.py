#!/usr/bin/env python3
"""
Peptide Calculator CLI
Command-line front-end for the dosing engine (one in-memory session)
"""

import asyncio
from dataclasses import replace
from pathlib import Path

from calculator import PeptideCalculator
from config import Config
from models import CalculationMode, CalculatorInputs, DosingSchedule, SYRINGE_SIZES_ML
from presets import EXAMPLE_SETUPS, inputs_for_setup
from reminder import ExportGuard, ExportInProgress
from schedule import CustomFrequency


def _read_float(prompt: str, current: float) -> float:
    """Blank keeps the current value; anything non-numeric counts as 0"""
    raw = input(f"{prompt} [{current:g}]: ").strip()
    if not raw:
        return current
    try:
        return float(raw)
    except ValueError:
        return 0.0


class PeptideCLI:
    """Command-line interface for reconstitution and supply tracking"""

    def __init__(self, inputs: CalculatorInputs = None):
        self.inputs = inputs or CalculatorInputs(syringe_size_ml=Config.DEFAULT_SYRINGE_ML)
        self.export_guard = ExportGuard()

    @property
    def snapshot(self):
        return PeptideCalculator.full_reconstitution_report(self.inputs)

    def run(self):
        """Main CLI loop"""
        print("\n" + "="*60)
        print("PEPTIDE CALCULATOR CLI")
        print("="*60)

        while True:
            print(f"\nMAIN MENU (mode: {self.inputs.mode.value}):")
            print("1. Enter vial and dose")
            print("2. Switch mode (units <-> dose)")
            print("3. Choose syringe size")
            print("4. Load example setup")
            print("5. Dosing schedule")
            print("6. Log a dose used")
            print("7. Undo a dose used")
            print("8. View report")
            print("9. Export reorder reminder (.ics)")
            print("10. Show configuration")
            print("0. Exit")

            choice = input("\nSelect option: ").strip()

            if choice == "1":
                self.enter_vial_and_dose()
            elif choice == "2":
                self.toggle_mode()
            elif choice == "3":
                self.choose_syringe()
            elif choice == "4":
                self.load_example()
            elif choice == "5":
                self.choose_schedule()
            elif choice == "6":
                self.log_dose()
            elif choice == "7":
                self.undo_dose()
            elif choice == "8":
                self.show_report()
            elif choice == "9":
                self.export_reminder()
            elif choice == "10":
                Config.print_config()
            elif choice == "0":
                print("\nGoodbye!")
                break
            else:
                print("Invalid option. Please try again.")

    def enter_vial_and_dose(self):
        """Prompt for vial contents and the dose side of the current mode"""
        i = self.inputs
        vial = _read_float("Vial size (mg)", i.vial_size_mg)
        water = _read_float("Bacteriostatic water (ml)", i.water_volume_ml)
        i = replace(i, vial_size_mg=vial, water_volume_ml=water)

        if i.mode is CalculationMode.UNITS:
            use_weight = input(f"Weight-based dosing? (y/n) [{'y' if i.use_weight else 'n'}]: ").strip().lower()
            if use_weight:
                i = replace(i, use_weight=use_weight == "y")
            if i.use_weight:
                i = replace(
                    i,
                    body_weight_kg=_read_float("Body weight (kg)", i.body_weight_kg),
                    mcg_per_kg=_read_float("Dose per kg (mcg/kg)", i.mcg_per_kg),
                )
            else:
                i = replace(i, desired_dose_mcg=_read_float("Desired dose (mcg)", i.desired_dose_mcg))
        else:
            i = replace(i, syringe_units=_read_float("Units on syringe", i.syringe_units))

        i = replace(i, cycle_days=_read_float("Cycle length (days, 0 to skip)", i.cycle_days))
        self.inputs = i
        self.show_result()

    def toggle_mode(self):
        new_mode = CalculationMode.DOSE if self.inputs.mode is CalculationMode.UNITS else CalculationMode.UNITS
        self.inputs = replace(self.inputs, mode=new_mode)
        print(f"\n✓ Mode: {new_mode.value}")
        self.show_result()

    def choose_syringe(self):
        for n, size in enumerate(SYRINGE_SIZES_ML, 1):
            print(f"{n}. {size} ml ({size * 100:g} units)")
        try:
            size = SYRINGE_SIZES_ML[int(input("Select syringe: ")) - 1]
        except (ValueError, IndexError):
            print("\n⚠ Invalid syringe choice.")
            return
        self.inputs = replace(self.inputs, syringe_size_ml=size)
        self.show_result()

    def load_example(self):
        for n, setup in enumerate(EXAMPLE_SETUPS, 1):
            print(f"{n}. {setup['peptide_name']} - {setup['vial_size_mg']}mg / "
                  f"{setup['water_volume_ml']}ml, {setup['desired_dose_mcg']}mcg")
        try:
            setup = EXAMPLE_SETUPS[int(input("Select example: ")) - 1]
        except (ValueError, IndexError):
            print("\n⚠ Invalid example choice.")
            return
        self.inputs = inputs_for_setup(setup["slug"])
        self.show_result()

    def choose_schedule(self):
        """Pick a schedule; custom prompts for the linked frequency fields"""
        schedules = list(DosingSchedule)
        for n, schedule in enumerate(schedules, 1):
            print(f"{n}. {schedule.label}")
        try:
            schedule = schedules[int(input("Select schedule: ")) - 1]
        except (ValueError, IndexError):
            print("\n⚠ Invalid schedule choice.")
            return

        i = replace(self.inputs, dosing_schedule=schedule)
        if schedule is DosingSchedule.CUSTOM:
            freq = CustomFrequency(i.custom_doses_per_week, i.days_between_doses)
            which = input("Enter (1) doses per week or (2) days between doses? ").strip()
            if which == "2":
                freq = freq.with_days_between_doses(_read_float("Days between doses", freq.days_between_doses))
            else:
                freq = freq.with_doses_per_week(_read_float("Doses per week", freq.doses_per_week))
            i = replace(i, custom_doses_per_week=freq.doses_per_week, days_between_doses=freq.days_between_doses)
            print(f"  Doses per week: {freq.doses_per_week:g}, days between doses: {freq.days_between_doses:g}")

        self.inputs = i
        snap = self.snapshot
        if snap.projection.days_of_supply > 0:
            print(f"\nDays supply: {snap.projection.days_of_supply:.1f} days")
            print(f"Reorder by: {snap.reorder_display}")
        else:
            print("\n⚠ Enter vial size and dose to project supply.")

    def log_dose(self):
        self.inputs = PeptideCalculator.log_dose(self.inputs)
        self.show_supply()

    def undo_dose(self):
        self.inputs = PeptideCalculator.undo_dose(self.inputs)
        self.show_supply()

    def show_result(self):
        snap = self.snapshot
        print(f"\n{snap.result.value_label} {snap.result.main_text}")
        if snap.result.capacity_exceeded:
            print(f"⚠ More than a {self.inputs.syringe_size_ml:g} ml syringe holds")
        for name, message in snap.errors.items():
            print(f"  • {name}: {message}")

    def show_supply(self):
        snap = self.snapshot
        if snap.supply.doses_in_vial <= 0:
            print("\n⚠ Enter vial size and dose to track supply.")
            return
        print(f"\nDoses remaining: {snap.supply.doses_remaining:.1f} / {snap.supply.doses_in_vial:.1f}")
        print(f"{snap.supply.percentage_remaining:.1f}% Remaining")
        if snap.supply.depleted:
            print("⚠ Vial depleted")

    def show_report(self):
        PeptideCalculator.print_reconstitution_report(self.snapshot)

    def export_reminder(self, directory: str = "."):
        """Write the reorder reminder to an .ics file"""
        snap = self.snapshot
        if not snap.projection.is_exportable:
            print(f"\n⚠ No reorder date to export ({snap.reorder_display}).")
            return None

        print("\nGenerating calendar file...")
        try:
            calendar_file = asyncio.run(self.export_guard.run(snap))
        except ExportInProgress as e:
            print(f"\n⚠ {e}")
            return None

        path = Path(directory) / calendar_file.filename
        path.write_text(calendar_file.content, encoding="utf-8", newline="")
        print(f"✓ Reminder saved to {path}")
        return path


def main():
    """Run CLI application"""
    cli = PeptideCLI()

    try:
        cli.run()
    except KeyboardInterrupt:
        print("\n\nInterrupted by user. Exiting...")


if __name__ == "__main__":
    main()
