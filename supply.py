"""
Vial Supply Tracking
How many doses a vial holds and how many are left
"""

from models import SupplyState


class SupplyTracker:
    """Track doses drawn from the current vial"""

    @staticmethod
    def doses_in_vial(vial_mass_mcg: float, dose_mcg: float) -> float:
        """
        Calculate how many doses are in a vial

        Args:
            vial_mass_mcg: Amount of peptide in vial (mcg)
            dose_mcg: Dose per injection (mcg)

        Returns:
            Number of doses (fractional), 0 when the dose is not set
        """
        if vial_mass_mcg <= 0 or dose_mcg <= 0:
            return 0.0
        return vial_mass_mcg / dose_mcg

    @staticmethod
    def doses_remaining(doses_in_vial: float, doses_used: float) -> float:
        # Left unclamped; only the percentage is bounded
        return doses_in_vial - doses_used

    @staticmethod
    def percentage_remaining(doses_in_vial: float, doses_used: float) -> float:
        if doses_in_vial <= 0:
            return 0.0
        remaining = SupplyTracker.doses_remaining(doses_in_vial, doses_used)
        return max(0.0, min(100.0, remaining / doses_in_vial * 100))

    @staticmethod
    def is_depleted(doses_in_vial: float, doses_used: float) -> bool:
        return doses_in_vial > 0 and SupplyTracker.doses_remaining(doses_in_vial, doses_used) <= 0

    @staticmethod
    def increment(doses_used: float, doses_in_vial: float) -> float:
        """Log one more dose, never past the vial contents"""
        return min(doses_in_vial, doses_used + 1)

    @staticmethod
    def decrement(doses_used: float) -> float:
        """Undo one dose, never below zero"""
        return max(0.0, doses_used - 1)

    @staticmethod
    def state(doses_in_vial: float, doses_used: float) -> SupplyState:
        """Snapshot of the supply for the current inputs"""
        calc = SupplyTracker
        return SupplyState(
            doses_in_vial=doses_in_vial,
            doses_used=doses_used,
            doses_remaining=calc.doses_remaining(doses_in_vial, doses_used),
            percentage_remaining=calc.percentage_remaining(doses_in_vial, doses_used),
            depleted=calc.is_depleted(doses_in_vial, doses_used),
        )

    @staticmethod
    def remaining_text(state: SupplyState) -> str:
        return f"{state.doses_remaining:.1f} / {state.doses_in_vial:.1f}"

    @staticmethod
    def percentage_text(state: SupplyState) -> str:
        return f"{state.percentage_remaining:.1f}% Remaining"
