import logging
from functools import lru_cache
from typing import List, Mapping, Optional, Tuple

from core.errors import UnknownInstallationMethodError
from core.models import ApplicationProfile, CompositeFactor, DutyCycle, FactorStep
from standards import devices
from standards.catalog import IEC_FAMILY, get_standard

logger = logging.getLogger(__name__)


def temperature_factor(table: Mapping[float, float], ambient: float) -> float:
    """First rung at or above the ambient; past the top rung use the lowest value."""
    for rung in sorted(table):
        if ambient <= rung:
            return table[rung]
    return min(table.values())


def grouping_factor(table: Mapping[int, float], count: int) -> float:
    keys = sorted(table)
    for key in keys:
        if count <= key:
            return table[key]
    return table[keys[-1]]


@lru_cache(maxsize=None)
def compose(standard_id: str, ambient: float, count: int, method: str,
            application: str, duty: str, rating: int) -> CompositeFactor:
    """
    Combined ampacity correction for one standard.
    Returns the individual factors and the ordered steps used for reporting.
    """
    std = get_standard(standard_id)
    rules = std.rules

    if std.is_dc:
        temp = temperature_factor(std.dc_rules[application], ambient)
        temp_ref = f"{std.info.full_name} temperature correction ({application})"
    else:
        temp = temperature_factor(rules.temperature[rating], ambient)
        temp_ref = f"{std.info.name} ambient correction {rating}C"

    group = grouping_factor(rules.grouping, count)

    installation = rules.installation.get(method)
    if installation is None:
        raise UnknownInstallationMethodError(method, std.info.name, sorted(rules.installation))

    safety = std.profile(application).safety_factor(DutyCycle(duty))

    steps = (
        FactorStep("Temperature correction", temp, reference=temp_ref),
        FactorStep("Grouping adjustment", group, reference=f"{std.info.name} grouping ({count})"),
        FactorStep("Installation method", installation.temperature_factor,
                   reference=installation.reference),
        FactorStep("Application safety factor", safety, reference=application),
    )
    logger.debug("Composed %s factors: temp=%s group=%s install=%s safety=%s",
                 standard_id, temp, group, installation.temperature_factor, safety)
    return CompositeFactor(
        temperature=temp,
        grouping=group,
        installation=installation.temperature_factor,
        environment=installation.environment_factor,
        safety=safety,
        steps=steps,
    )


def device_temperature_derating(family: str, ambient: float, fuse_path: bool = False) -> Tuple[float, int]:
    """Returns (derating factor, baseline C). A factor of 1.0 means no derating applies."""
    if fuse_path:
        baseline = devices.FUSE_DERATING_BASELINE
        if ambient <= baseline:
            return 1.0, baseline
        return max(0.5, 1 - 0.005 * (ambient - baseline)), baseline

    baseline = devices.DERATING_BASELINE[family]
    if ambient <= baseline:
        return 1.0, baseline
    if family == IEC_FAMILY:
        return temperature_factor(devices.IEC_DEVICE_DERATING, ambient), baseline
    return max(0.58, 1 - 0.01 * (ambient - baseline)), baseline


def device_chain(family: str, profile: ApplicationProfile, duty: DutyCycle, ambient: float,
                 environment: str, fuse_path: bool = False,
                 safety: Optional[float] = None) -> Tuple[FactorStep, ...]:
    """Ordered adjustments applied to the load current before rounding up to a device rating."""
    application = profile.name
    steps: List[FactorStep] = []

    if safety is None:
        safety = profile.safety_factor(duty)
    steps.append(FactorStep("Application safety factor", safety,
                            reference=profile.references[0] if profile.references else application))

    derating, baseline = device_temperature_derating(family, ambient, fuse_path)
    if derating < 1.0:
        steps.append(FactorStep("Temperature derating", derating, "divide",
                                f"{ambient:g}C above {baseline}C baseline"))

    if environment in devices.ENVIRONMENT_FACTORS:
        value, ref = devices.ENVIRONMENT_FACTORS[environment]
        steps.append(FactorStep("Environment factor", value, reference=ref))

    if application == "solar":
        value, ref = devices.SOLAR_SHORT_CIRCUIT[family]
        steps.append(FactorStep("Solar short-circuit multiplier", value, reference=ref))
    elif application == "battery":
        if family == IEC_FAMILY:
            cont, inter = devices.IEC_BATTERY_THERMAL_RUNAWAY
            value = cont if duty == DutyCycle.CONTINUOUS else inter
            steps.append(FactorStep("Battery thermal runaway", value, reference="IEC 62619"))
        elif duty == DutyCycle.CONTINUOUS:
            value, ref = devices.NEC_BATTERY_CONTINUOUS
            steps.append(FactorStep("Battery continuous duty", value, reference=ref))

    logger.debug("Device chain (%s, %s): %s", family, application,
                 ", ".join(s.describe() for s in steps))
    return tuple(steps)


def apply_chain(current: float, steps) -> float:
    for step in steps:
        current = step.apply(current)
    return current


def describe_chain(base_current: float, steps) -> str:
    parts = [f"Base current {base_current:.2f}A"] + [s.describe() for s in steps]
    return " → ".join(parts)
