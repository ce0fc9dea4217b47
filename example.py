#!/usr/bin/env python3
"""
Example Usage Script
Demonstrates how to use the Peptide Calculator programmatically
"""

import asyncio
from dataclasses import replace

from calculator import PeptideCalculator
from models import CalculationMode, CalculatorInputs, DosingSchedule
from reminder import ReminderExporter
from schedule import CustomFrequency


def example_workflow():
    """Example workflow: reconstitute, convert both ways, track supply, export reminder"""

    print("\n" + "="*70)
    print(" PEPTIDE CALCULATOR - EXAMPLE WORKFLOW")
    print("="*70)

    # ========== STEP 1: Units to pull ==========
    print("\n[STEP 1] 10mg vial + 2ml water, 250mcg dose on a 0.3ml syringe...")
    inputs = CalculatorInputs(vial_size_mg=10, water_volume_ml=2, desired_dose_mcg=250, syringe_size_ml=0.3)
    snap = PeptideCalculator.full_reconstitution_report(inputs)
    print(f"✓ Concentration: {snap.concentration_mg_per_ml:.2f} mg/ml")
    print(f"✓ {snap.result.value_label} {snap.result.main_text}")

    # ========== STEP 2: Weight-based dose ==========
    print("\n[STEP 2] Weight-based: 80kg x 3mcg/kg...")
    weighted = replace(inputs, use_weight=True, body_weight_kg=80, mcg_per_kg=3)
    result = PeptideCalculator.recompute(weighted)
    print(f"✓ {result.value_label} -> {result.main_text}")

    # ========== STEP 3: Dose in a drawn syringe ==========
    print("\n[STEP 3] What dose is in 10 units?")
    reverse = replace(inputs, mode=CalculationMode.DOSE, syringe_units=10)
    result = PeptideCalculator.recompute(reverse)
    print(f"✓ {result.value_label} {result.main_text}")

    # ========== STEP 4: Track supply ==========
    print("\n[STEP 4] Logging 5 doses...")
    for _ in range(5):
        inputs = PeptideCalculator.log_dose(inputs)
    snap = PeptideCalculator.full_reconstitution_report(inputs)
    print(f"✓ Doses remaining: {snap.supply.doses_remaining:.1f} / {snap.supply.doses_in_vial:.1f}")
    print(f"✓ {snap.supply.percentage_remaining:.1f}% Remaining")

    # ========== STEP 5: Custom schedule ==========
    print("\n[STEP 5] Custom schedule: a dose every 2 days...")
    freq = CustomFrequency().with_days_between_doses(2)
    inputs = replace(
        inputs,
        dosing_schedule=DosingSchedule.CUSTOM,
        custom_doses_per_week=freq.doses_per_week,
        days_between_doses=freq.days_between_doses,
    )
    snap = PeptideCalculator.full_reconstitution_report(inputs)
    print(f"✓ {freq.doses_per_week:g} doses/week -> {snap.projection.days_of_supply:.1f} days supply")
    print(f"✓ Reorder by: {snap.reorder_display}")

    # ========== STEP 6: Calendar reminder ==========
    if snap.projection.is_exportable:
        print("\n[STEP 6] Building calendar reminder...")
        calendar_file = asyncio.run(ReminderExporter().export(snap, delay=0))
        print(f"✓ {calendar_file.filename} ({len(calendar_file.content)} bytes)")

    print("\n" + "="*70)
    print(" EXAMPLE COMPLETE!")
    print("="*70 + "\n")


if __name__ == "__main__":
    example_workflow()
