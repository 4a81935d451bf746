import math
from abc import ABC, abstractmethod
from typing import Dict, List, Tuple

from core.models import CalculationKind, CalculationMetadata, ConductorMaterial, VoltageSystem

# Resistance multiplier for aluminum relative to copper
ALUMINUM_RESISTANCE_FACTOR = 1.64


def adjusted_resistance(resistance: float, material: ConductorMaterial) -> float:
    if material == ConductorMaterial.ALUMINUM:
        return resistance * ALUMINUM_RESISTANCE_FACTOR
    return resistance


def voltage_drop(current: float, length: float, resistance: float, reactance: float,
                 system: VoltageSystem, power_factor: float = 1.0) -> float:
    """
    Voltage drop in volts. Resistance and reactance are per 1000 length units,
    so length must be in the same unit as the table.
    """
    if system == VoltageSystem.THREE_PHASE:
        sin_phi = math.sqrt(max(0.0, 1 - power_factor ** 2))
        return math.sqrt(3) * current * length * (resistance * power_factor + reactance * sin_phi) / 1000
    # DC and single phase: out and back
    return 2 * current * resistance * length / 1000


def power_loss(current: float, length: float, resistance: float, system: VoltageSystem) -> float:
    loss = current ** 2 * resistance * length / 1000
    if system == VoltageSystem.THREE_PHASE:
        return loss * 3
    return loss


class SizingEngine(ABC):
    """Base for the per-standard engines. Engines hold no state beyond their catalog."""

    kind: CalculationKind

    def __init__(self, standard):
        self.standard = standard

    @property
    def name(self) -> str:
        return self.standard.info.name

    @abstractmethod
    def calculate(self, request):
        """Runs the selection algorithm for one request. Returns the kind-specific result."""
        pass

    def metadata(self, method: str, ambient: float, references: Tuple[str, ...],
                 environment: str = "", safety_factors: Dict[str, float] = None,
                 assumptions: List[str] = None, warnings: List[str] = None) -> CalculationMetadata:
        return CalculationMetadata(
            standards_applied=(self.standard.info.full_name,) + tuple(references),
            calculation_method=method,
            ambient_temperature=ambient,
            environment=environment,
            safety_factors=dict(safety_factors or {}),
            assumptions=list(assumptions or []),
            warnings=list(warnings or []),
        )
