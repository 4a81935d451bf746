import math
import re
from typing import Optional, Tuple

from core.models import VoltageSystem

# Multipliers to watts; apparent power is scaled by the power factor
POWER_UNITS = {"W": 1.0, "KW": 1e3, "MW": 1e6, "HP": 746.0}
APPARENT_UNITS = {"VA": 1.0, "KVA": 1e3, "MVA": 1e6}

# Metres per unit
LENGTH_UNITS = {"m": 1.0, "ft": 0.3048, "yd": 0.9144}
LENGTH_ALIASES = {"mts": "m", "metro": "m", "metros": "m", "pie": "ft", "pies": "ft",
                  "yarda": "yd", "yardas": "yd"}


def parse_quantity(text: str, default_unit: str) -> Tuple[float, str]:
    """'10 kW' -> (10.0, 'kW'). A bare number takes the default unit."""
    match = re.match(r"^\s*([0-9.]+)\s*([a-zA-Z]*)\s*$", text)
    if not match:
        raise ValueError(f"Cannot read a quantity from {text!r}")
    return float(match.group(1)), match.group(2) or default_unit


def convert_power(value: float, unit: str, voltage: float, system: VoltageSystem,
                  power_factor: float = 1.0) -> Tuple[float, Optional[float]]:
    """
    Returns (watts, amps). Amps is only set when the value was given as a current,
    in which case the engines should use it directly.
    """
    unit = unit.strip().upper()
    if unit in POWER_UNITS:
        return value * POWER_UNITS[unit], None
    if unit in APPARENT_UNITS:
        return value * APPARENT_UNITS[unit] * power_factor, None
    if unit == "A":
        phase = math.sqrt(3) if system == VoltageSystem.THREE_PHASE else 1.0
        return value * voltage * phase * power_factor, value
    raise ValueError(f"Unknown power unit: {unit}")


def convert_length(value: float, unit: str, target: str = "m") -> float:
    """Converts between m, ft and yd. The conductor tables expect ft (AWG) or m (metric)."""
    unit = unit.strip().lower()
    unit = LENGTH_ALIASES.get(unit, unit)
    if unit not in LENGTH_UNITS:
        raise ValueError(f"Unknown length unit: {unit}")
    return value * LENGTH_UNITS[unit] / LENGTH_UNITS[target]
