import logging
from typing import List, Optional, Sequence

from core.calculator import SizingEngine
from core.errors import ExceedsFuseRangeError, NoSuitableDeviceError
from core.factors import apply_chain, describe_chain, device_chain
from core.models import (
    CalculationKind, DeviceCompliance, DeviceInput, DeviceResult, DutyCycle, PowerAnalysis,
    ProtectiveDeviceSpec, VoltageSystem,
)
from standards import devices
from standards.catalog import IEC_FAMILY
from standards.profiles import AUTOMOTIVE_VOLTAGE_SYSTEMS

logger = logging.getLogger(__name__)


def classify_fuse(current: float) -> str:
    """ISO 8820-3 form factor for an adjusted current."""
    if current > devices.MAXI_FUSE_MAX:
        raise ExceedsFuseRangeError(current, devices.MAXI_FUSE_MAX)
    if current <= devices.MICRO_FUSE_MAX:
        return "micro2"
    if current <= devices.REGULAR_FUSE_MAX:
        return "regular"
    return "maxi"


def uses_fuse(application: str, voltage: float, system: VoltageSystem) -> bool:
    return (system == VoltageSystem.DC and application in devices.FUSE_APPLICATIONS
            and voltage in devices.FUSE_VOLTAGES)


# Primary device preference, first match wins
def _nec_preferences(application: str):
    if application == "battery":
        yield lambda d: d.thermal_runaway_protection
    if application in ("industrial", "solar"):
        yield lambda d: d.standard == "UL489" and d.device_type == "thermal-magnetic"
    if application == "marine":
        yield lambda d: d.standard == "ABYC"
    if application == "automotive":
        yield lambda d: d.standard == "SAE"
    yield lambda d: d.standard == "UL489" and d.continuous_duty


def _iec_preferences(application: str):
    if application == "battery":
        yield lambda d: d.standard == "IEC62619"
    if application in ("solar", "industrial"):
        yield lambda d: d.standard == "IEC60947"
    if application == "solar":
        yield lambda d: d.standard == "IEC60898-3"
    yield lambda d: d.continuous_duty


class DeviceEngine(SizingEngine):
    """Breaker or fuse rating: factor chain, then round up the catalog ladder."""

    kind = CalculationKind.DEVICE

    @property
    def family(self) -> str:
        return self.standard.family

    def base_current(self, request: DeviceInput, application: str, efficiency: float) -> float:
        if application == "solar" and request.short_circuit_current:
            return request.short_circuit_current * request.parallel_strings
        if request.current is not None:
            return request.current
        return request.power / (request.voltage * efficiency * request.power_factor)

    def ladder(self, request: DeviceInput, application: str, fuse_path: bool) -> List[ProtectiveDeviceSpec]:
        if fuse_path:
            return [f for f in devices.ISO8820_FUSES
                    if application in f.applications and f.supports_voltage(request.voltage)]
        current_type = "dc" if request.voltage_system == VoltageSystem.DC else "ac"
        candidates = [d for d in self.standard.devices()
                      if d.current_type == current_type and d.supports_voltage(request.voltage)]
        matching = [d for d in candidates if application in d.applications]
        # AC panels serve any load type
        if not matching and current_type == "ac":
            return candidates
        return matching

    def pick_primary(self, at_rating: Sequence[ProtectiveDeviceSpec], application: str,
                     fuse_type: Optional[str]) -> ProtectiveDeviceSpec:
        if fuse_type is not None:
            return next((f for f in at_rating if f.device_type == fuse_type), at_rating[0])
        prefs = _iec_preferences if self.family == IEC_FAMILY else _nec_preferences
        for prefer in prefs(application):
            match = next((d for d in at_rating if prefer(d)), None)
            if match is not None:
                return match
        return at_rating[0]

    def calculate(self, request: DeviceInput) -> DeviceResult:
        std = self.standard
        application = request.application or std.info.default_application
        profile = std.profile(application)
        fuse_path = uses_fuse(application, request.voltage, request.voltage_system)

        efficiency = request.efficiency or profile.default_efficiency
        safety = None
        if fuse_path and application == "automotive":
            auto_eff, cont, inter = AUTOMOTIVE_VOLTAGE_SYSTEMS[int(request.voltage)]
            safety = cont if request.duty_cycle == DutyCycle.CONTINUOUS else inter
            efficiency = request.efficiency or auto_eff

        base = self.base_current(request, application, efficiency)
        steps = device_chain(self.family, profile, request.duty_cycle, request.ambient_temperature,
                             request.environment, fuse_path, safety)
        adjusted = apply_chain(base, steps)

        fuse_type = classify_fuse(adjusted) if fuse_path else None

        ladder = self.ladder(request, application, fuse_path)
        ratings = sorted({d.rating for d in ladder})
        rating = next((r for r in ratings if r >= adjusted), None)
        if rating is None:
            raise NoSuitableDeviceError(adjusted, application, request.voltage)

        at_rating = [d for d in ladder if d.rating == rating]
        primary = self.pick_primary(at_rating, application, fuse_type)
        alternatives = [d for d in at_rating if d is not primary]
        logger.debug("%s device for %.2fA (adjusted %.2fA): %g A %s %s", self.name, base,
                     adjusted, rating, primary.standard, primary.device_type)

        warnings = []
        if fuse_type is not None and primary.device_type != fuse_type:
            msg = (f"No {fuse_type} fuse rated {rating:g}A for {application}; "
                   f"{primary.device_type} fuse selected")
            logger.warning(msg)
            warnings.append(msg)
        v_min, v_max = profile.voltage_range
        if not v_min <= request.voltage <= v_max:
            warnings.append(f"{request.voltage:g}V outside the {application} range {v_min:g}..{v_max:g}V")

        # Oversize cap is a breaker rule; blade fuses follow the ISO 8820-3 ladder
        limit = None if fuse_path else devices.OVERSIZE_LIMITS[self.family].get(application)
        standard_ok = limit is None or rating / adjusted <= limit
        wire_ok = None
        if request.wire_gauge:
            wire_amps = std.wire_ampacity_map(fuse_path).get(request.wire_gauge)
            wire_ok = wire_amps is not None and wire_amps >= rating
        compliance = DeviceCompliance(
            standard_compliant=standard_ok,
            application_compliant=application in primary.applications,
            temperature_compliant=primary.temp_min <= request.ambient_temperature <= primary.temp_max,
            wire_compatible=wire_ok,
        )

        if not standard_ok:
            warnings.append(f"Rating {rating:g}A exceeds {limit:g}× the adjusted current")
        if wire_ok is False:
            warnings.append(f"Wire {request.wire_gauge} is undersized for a {rating:g}A device")

        power_analysis = None
        if request.power is not None and request.current is None:
            power_analysis = PowerAnalysis(
                input_power=request.power, voltage=request.voltage, efficiency=efficiency,
                power_factor=request.power_factor, calculated_current=round(base, 3),
                power_loss_watts=round(request.power * (1 - efficiency), 2),
            )

        assumptions = [f"{'Fuse' if fuse_path else 'Breaker'} ladder for {application} "
                       f"at {request.voltage:g}V {request.voltage_system.value}"]
        if fuse_type is not None:
            assumptions.append(f"Recommended fuse family: {fuse_type}")
        references = profile.references + tuple(s.reference for s in steps[1:] if s.reference)
        metadata = self.metadata(
            describe_chain(base, steps), request.ambient_temperature,
            (primary.standard,) + references,
            environment=request.environment,
            safety_factors={s.name: s.value for s in steps},
            assumptions=assumptions, warnings=warnings,
        )

        return DeviceResult(
            standard=std.standard,
            rating=rating,
            device_type=primary.device_type,
            primary=primary,
            alternatives=alternatives,
            base_current=round(base, 3),
            adjusted_current=round(adjusted, 3),
            steps=steps,
            available_ratings=ratings,
            compliance=compliance,
            metadata=metadata,
            power_analysis=power_analysis,
        )
