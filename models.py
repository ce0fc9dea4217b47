"""
Peptide Calculator Data Models
Enums and immutable records passed between the calculation stages
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, asdict
from datetime import date
from typing import Any, Dict, List, Optional, Union

from config import Config


# Standard insulin syringe: 100 units = 1 ml
UNITS_PER_ML = 100

SYRINGE_SIZES_ML = (0.3, 0.5, 1.0)


class CalculationMode(enum.Enum):
    """Which way the converter runs"""
    UNITS = "units"  # dose in, syringe units out
    DOSE = "dose"    # syringe units in, dose out


class DosingSchedule(enum.Enum):
    """How often doses are taken"""
    ONCE_DAILY = "once-daily"
    TWICE_DAILY = "twice-daily"
    FIVE_DAYS_PER_WEEK = "once-daily-5days"
    TWO_TO_THREE_PER_WEEK = "2-3x-week"
    EVERY_OTHER_DAY = "every-other-day"
    CUSTOM = "custom"

    @property
    def label(self) -> str:
        return _SCHEDULE_LABELS[self]


_SCHEDULE_LABELS = {
    DosingSchedule.ONCE_DAILY: "Once Daily",
    DosingSchedule.TWICE_DAILY: "Twice Daily",
    DosingSchedule.FIVE_DAYS_PER_WEEK: "Once Daily (5 days/week)",
    DosingSchedule.TWO_TO_THREE_PER_WEEK: "2-3x per week",
    DosingSchedule.EVERY_OTHER_DAY: "Every other day",
    DosingSchedule.CUSTOM: "Custom",
}


class ReorderStatus(enum.Enum):
    """Outcome of a reorder projection"""
    SCHEDULED = "scheduled"
    ORDER_NOW = "order-now"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class VialSpec:
    """Peptide mass in the vial and the bacteriostatic water added to it"""
    mass_mg: float
    diluent_ml: float

    @property
    def is_complete(self) -> bool:
        return self.mass_mg > 0 and self.diluent_ml > 0

    @property
    def mass_mcg(self) -> float:
        return self.mass_mg * 1000

    @property
    def concentration_mg_per_ml(self) -> Optional[float]:
        if not self.is_complete:
            return None
        return self.mass_mg / self.diluent_ml


@dataclass(frozen=True)
class ConversionFactor:
    """
    The single factor every units <-> dose conversion goes through.

    mcg_per_unit: micrograms of peptide in one syringe unit (1/100 ml),
                  i.e. concentration (mg/ml) * 1000 / 100
    """
    concentration_mg_per_ml: float
    mcg_per_unit: float

    @property
    def units_per_mcg(self) -> float:
        return 1 / self.mcg_per_unit


@dataclass(frozen=True)
class DirectDose:
    mcg: float


@dataclass(frozen=True)
class WeightBasedDose:
    weight_kg: float
    mcg_per_kg: float


@dataclass(frozen=True)
class FromUnits:
    units: float


DoseInput = Union[DirectDose, WeightBasedDose, FromUnits]


@dataclass(frozen=True)
class SyringeSpec:
    """Insulin syringe size"""
    capacity_ml: float = 0.3

    def __post_init__(self):
        if self.capacity_ml not in SYRINGE_SIZES_ML:
            raise ValueError(
                f"Unsupported syringe size: {self.capacity_ml} ml "
                f"(expected one of {', '.join(str(s) for s in SYRINGE_SIZES_ML)})"
            )

    @property
    def capacity_units(self) -> float:
        # 0.3 * 100 is 30.000000000000004 in binary floating point
        return round(self.capacity_ml * UNITS_PER_ML, 6)


@dataclass(frozen=True)
class DoseConversion:
    """One converter pass: both sides of the draw plus the capacity advisory"""
    units: float
    dose_mcg: float
    capacity_exceeded: bool = False


@dataclass(frozen=True)
class CalculatorInputs:
    """
    Everything the surrounding form hands to the engine.

    Numeric fields left at 0 mean "not entered yet". Inputs are immutable;
    use dataclasses.replace() to change a field and recompute.
    """
    mode: CalculationMode = CalculationMode.UNITS
    vial_size_mg: float = 0.0
    water_volume_ml: float = 0.0
    syringe_size_ml: float = field(default_factory=lambda: Config.DEFAULT_SYRINGE_ML)
    use_weight: bool = False
    body_weight_kg: float = 0.0
    mcg_per_kg: float = 0.0
    desired_dose_mcg: float = 0.0
    syringe_units: float = 0.0
    cycle_days: float = 0.0

    # Tracking / schedule
    dosing_schedule: DosingSchedule = DosingSchedule.ONCE_DAILY
    custom_doses_per_week: float = 0.0
    days_between_doses: float = 0.0
    doses_used: float = 0.0
    current_weight_kg: float = 70.0
    target_dose_mcg: float = 250.0

    @property
    def vial(self) -> VialSpec:
        return VialSpec(mass_mg=self.vial_size_mg, diluent_ml=self.water_volume_ml)

    @property
    def syringe(self) -> SyringeSpec:
        return SyringeSpec(capacity_ml=self.syringe_size_ml)

    def dose_input(self) -> DoseInput:
        """The dose variant active for the current mode"""
        if self.mode is CalculationMode.DOSE:
            return FromUnits(units=self.syringe_units)
        if self.use_weight:
            return WeightBasedDose(weight_kg=self.body_weight_kg, mcg_per_kg=self.mcg_per_kg)
        return DirectDose(mcg=self.desired_dose_mcg)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CalculatorInputs":
        """
        Build inputs from loosely-typed form/JSON data.

        Blank or non-numeric values become 0, unknown enum values fall back
        to the defaults and an unsupported syringe size falls back to
        Config.DEFAULT_SYRINGE_ML.
        """
        data = data or {}

        def _f(key: str, default: float = 0.0) -> float:
            value = data.get(key)
            if value in (None, ""):
                return default
            try:
                return float(value)
            except (TypeError, ValueError):
                return 0.0

        def _enum(enum_cls, key: str, default):
            try:
                return enum_cls(data.get(key))
            except ValueError:
                return default

        syringe_ml = _f("syringe_size_ml", Config.DEFAULT_SYRINGE_ML)
        if syringe_ml not in SYRINGE_SIZES_ML:
            syringe_ml = Config.DEFAULT_SYRINGE_ML

        use_weight = data.get("use_weight", False)
        if isinstance(use_weight, str):
            use_weight = use_weight.strip().lower() in ("1", "true", "yes", "on")

        return cls(
            mode=_enum(CalculationMode, "mode", CalculationMode.UNITS),
            vial_size_mg=_f("vial_size_mg"),
            water_volume_ml=_f("water_volume_ml"),
            syringe_size_ml=syringe_ml,
            use_weight=bool(use_weight),
            body_weight_kg=_f("body_weight_kg"),
            mcg_per_kg=_f("mcg_per_kg"),
            desired_dose_mcg=_f("desired_dose_mcg"),
            syringe_units=_f("syringe_units"),
            cycle_days=_f("cycle_days"),
            dosing_schedule=_enum(DosingSchedule, "dosing_schedule", DosingSchedule.ONCE_DAILY),
            custom_doses_per_week=_f("custom_doses_per_week"),
            days_between_doses=_f("days_between_doses"),
            doses_used=max(0.0, _f("doses_used")),
            current_weight_kg=_f("current_weight_kg", 70.0),
            target_dose_mcg=_f("target_dose_mcg", 250.0),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["mode"] = self.mode.value
        data["dosing_schedule"] = self.dosing_schedule.value
        return data


@dataclass(frozen=True)
class CalculationResult:
    """The authoritative output of one recompute pass"""
    main_value: Optional[float]  # units (units mode) or mcg (dose mode)
    main_text: str
    value_label: str
    total_mass_for_cycle_mg: float = 0.0
    capacity_exceeded: bool = False
    syringe_units: float = 0.0
    calculated_dose_mcg: float = 0.0  # only set for weight-based dosing

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class SupplyState:
    doses_in_vial: float
    doses_used: float
    doses_remaining: float
    percentage_remaining: float
    depleted: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ReorderProjection:
    days_of_supply: float
    status: ReorderStatus
    reorder_date: Optional[date] = None  # today for ORDER_NOW, None when unavailable

    @property
    def is_exportable(self) -> bool:
        return self.status is ReorderStatus.SCHEDULED and self.reorder_date is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "days_of_supply": self.days_of_supply,
            "status": self.status.value,
            "reorder_date": self.reorder_date.isoformat() if self.reorder_date else None,
        }


@dataclass(frozen=True)
class CalculatorSnapshot:
    """All outputs of one pass over a CalculatorInputs"""
    inputs: CalculatorInputs
    concentration_mg_per_ml: Optional[float]
    mcg_per_unit: Optional[float]
    effective_dose_mcg: float
    result: CalculationResult
    supply: SupplyState
    doses_per_week: float
    projection: ReorderProjection
    reorder_display: str
    fill_percentage: float
    syringe_markers: List[int] = field(default_factory=list)
    errors: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "inputs": self.inputs.to_dict(),
            "concentration_mg_per_ml": self.concentration_mg_per_ml,
            "mcg_per_unit": self.mcg_per_unit,
            "effective_dose_mcg": self.effective_dose_mcg,
            "result": self.result.to_dict(),
            "supply": self.supply.to_dict(),
            "doses_per_week": self.doses_per_week,
            "projection": self.projection.to_dict(),
            "reorder_display": self.reorder_display,
            "fill_percentage": self.fill_percentage,
            "syringe_markers": list(self.syringe_markers),
            "errors": dict(self.errors),
        }
