import logging
from typing import Any, Dict, List, Optional

from core.errors import ValidationError
from core.models import (
    AC_APPLICATIONS, APPLICATION_TYPES, FILL_APPLICATIONS, FILL_INSTALLATION_METHODS,
    INSTALLATION_METHODS, CalculationKind, ConductorInput, ConductorMaterial, ConduitFillInput,
    DeviceInput, DutyCycle, StandardId, VoltageSystem, WireEntry,
)
from core.settings import Settings, get_settings
from standards.catalog import IEC_FAMILY, STANDARDS, StandardSet, parse_standard
from standards.conductor import ConductorEngine
from standards.conduit_fill import ConduitFillEngine
from standards.dc_tables import DC_GAUGES
from standards.iec_tables import METRIC_SIZES
from standards.nec_tables import AWG_SIZES
from standards.protection import DeviceEngine

logger = logging.getLogger(__name__)

ENGINE_CLASSES = {
    CalculationKind.CONDUCTOR: ConductorEngine,
    CalculationKind.CONDUIT_FILL: ConduitFillEngine,
    CalculationKind.DEVICE: DeviceEngine,
}

# One engine instance per (standard, kind), built once
ENGINES = {
    (sid, kind): cls(std)
    for sid, std in STANDARDS.items()
    for kind, cls in ENGINE_CLASSES.items()
}


class _Collector:
    """Gathers every violation in one pass so they can be reported together."""

    def __init__(self, raw: Dict[str, Any]):
        self.raw = raw
        self.errors: List[str] = []
        self.fields: List[str] = []

    def fail(self, field: str, message: str):
        self.errors.append(message)
        self.fields.append(field)

    def number(self, field: str, default=None, minimum: Optional[float] = None,
               maximum: Optional[float] = None, strict: bool = True, required: bool = False):
        value = self.raw.get(field, default)
        if value is None:
            if required:
                self.fail(field, f"{field} is required")
            return None
        try:
            value = float(value)
        except (TypeError, ValueError):
            self.fail(field, f"{field} must be a number, got {value!r}")
            return None
        if minimum is not None and (value <= minimum if strict else value < minimum):
            self.fail(field, f"{field} must be {'>' if strict else '>='} {minimum:g}")
        if maximum is not None and value > maximum:
            self.fail(field, f"{field} must be <= {maximum:g}")
        return value

    def integer(self, field: str, default=None, minimum: int = 1):
        value = self.raw.get(field, default)
        if value is None:
            return None
        try:
            value = int(value)
        except (TypeError, ValueError):
            self.fail(field, f"{field} must be an integer, got {value!r}")
            return None
        if value < minimum:
            self.fail(field, f"{field} must be >= {minimum}")
        return value

    def enum(self, field: str, enum_cls, default):
        value = self.raw.get(field, default)
        if isinstance(value, enum_cls):
            return value
        try:
            return enum_cls(str(value).strip().lower())
        except ValueError:
            allowed = ", ".join(e.value for e in enum_cls)
            self.fail(field, f"{field} '{value}' is not one of: {allowed}")
            return None

    def choice(self, field: str, allowed, default=None):
        value = self.raw.get(field, default)
        if value not in allowed:
            self.fail(field, f"{field} '{value}' is not one of: {', '.join(map(str, allowed))}")
            return None
        return value

    def raise_if_failed(self):
        if self.errors:
            raise ValidationError(self.errors, self.fields)


def _application(c: _Collector, std: StandardSet) -> Optional[str]:
    application = c.choice("application", APPLICATION_TYPES, std.info.default_application)
    if application is not None and application not in std.applications:
        c.fail("application", f"application '{application}' is not covered by {std.info.name}; "
                              f"use one of: {', '.join(sorted(std.applications))}")
        return None
    return application


def size_ladder(std: StandardSet):
    if std.family == IEC_FAMILY:
        return METRIC_SIZES
    return AWG_SIZES + tuple(g for g in DC_GAUGES if g not in AWG_SIZES)


def conductor_request(std: StandardSet, raw: Dict[str, Any], settings: Settings) -> ConductorInput:
    c = _Collector(raw)
    current = c.number("current", required=True, minimum=0)
    length = c.number("length", required=True, minimum=0)
    voltage = c.number("voltage", required=True, minimum=0)
    default_system = VoltageSystem.DC if std.is_dc else VoltageSystem.SINGLE_PHASE
    system = c.enum("voltage_system", VoltageSystem, default_system)
    if system is not None and system not in std.voltage_systems:
        hint = "route DC circuits through a DC standard" if system == VoltageSystem.DC else "use dc"
        c.fail("voltage_system", f"{std.info.name} does not size {system.value} circuits; {hint}")
    material = c.enum("conductor_material", ConductorMaterial, ConductorMaterial.COPPER)
    application = _application(c, std)
    ambient = c.number("ambient_temperature", settings.ambient_temperature, minimum=-60,
                       maximum=150, strict=False)
    default_method = (settings.iec_installation_method if std.family == IEC_FAMILY
                      else settings.installation_method)
    method = c.choice("installation_method", INSTALLATION_METHODS, default_method)
    count = c.integer("conductor_count", settings.conductor_count)
    pf = c.number("power_factor", settings.power_factor, minimum=0, maximum=1)
    rating = None
    if not std.is_dc and raw.get("temperature_rating") is not None:
        rating = c.integer("temperature_rating")
        if rating is not None and rating not in std.rules.temperature_ratings:
            c.fail("temperature_rating", f"temperature_rating {rating} is not one of: "
                                         f"{', '.join(map(str, std.rules.temperature_ratings))}")
            rating = None
    duty = c.enum("duty_cycle", DutyCycle, settings.duty_cycle)
    override = c.number("voltage_drop_override", minimum=0, maximum=100)
    c.raise_if_failed()

    return ConductorInput(
        current=current, length=length, voltage=voltage, voltage_system=system,
        conductor_material=material, application=application, ambient_temperature=ambient,
        installation_method=method, conductor_count=count, power_factor=pf,
        temperature_rating=rating, duty_cycle=duty, voltage_drop_override=override,
        use_critical_limit=bool(raw.get("use_critical_limit", False)),
    )


def fill_request(std: StandardSet, raw: Dict[str, Any], settings: Settings) -> ConduitFillInput:
    c = _Collector(raw)
    fill = std.fill
    wires = []
    raw_wires = raw.get("wires") or []
    if not raw_wires:
        c.fail("wires", "at least one wire entry is required")
    for i, entry in enumerate(raw_wires):
        gauge = str(entry.get("gauge", ""))
        insulation = entry.get("insulation", fill.insulation_types[0])
        known_size = gauge in fill.size_ladder
        known_insulation = insulation in fill.insulation_types
        if not known_size:
            c.fail("wires", f"wire {i + 1}: size '{gauge}' is not a {std.info.wire_system} size")
        if not known_insulation:
            c.fail("wires", f"wire {i + 1}: insulation '{insulation}' is not one of: "
                            f"{', '.join(fill.insulation_types)}")
        if known_size and known_insulation and fill.wire_area(gauge, insulation) is None:
            c.fail("wires", f"wire {i + 1}: no {fill.area_unit} area for {gauge} {insulation}")
        try:
            quantity = int(entry.get("quantity", 1))
        except (TypeError, ValueError):
            quantity = 0
        if quantity < 1:
            c.fail("wires", f"wire {i + 1}: quantity must be a positive integer")
        wires.append(WireEntry(gauge, quantity, insulation))
    conduit_type = c.choice("conduit_type", fill.conduit_types, fill.conduit_types[0])
    reserve = c.number("future_fill_reserve", settings.future_fill_reserve, minimum=0,
                       maximum=100, strict=False)
    override = c.integer("wire_count_override")
    application = c.choice("application", FILL_APPLICATIONS, settings.fill_application)
    method = c.choice("installation_method", FILL_INSTALLATION_METHODS,
                      settings.fill_installation_method)
    ambient = c.number("ambient_temperature", settings.ambient_temperature, minimum=-60,
                       maximum=150, strict=False)
    c.raise_if_failed()

    size = raw.get("conduit_size")
    return ConduitFillInput(
        wires=wires, conduit_type=conduit_type, conduit_size=str(size) if size is not None else None,
        future_fill_reserve=reserve, wire_count_override=override, application=application,
        installation_method=method, ambient_temperature=ambient,
        environment=raw.get("environment", settings.fill_environment),
    )


def device_request(std: StandardSet, raw: Dict[str, Any], settings: Settings) -> DeviceInput:
    c = _Collector(raw)
    voltage = c.number("voltage", required=True, minimum=0)
    application = _application(c, std)
    current = c.number("current", minimum=0)
    power = c.number("power", minimum=0)
    isc = c.number("short_circuit_current", minimum=0)
    if current is None and power is None and not (application == "solar" and isc):
        c.fail("current", "either current or power is required")
    efficiency = c.number("efficiency", minimum=0, maximum=1)
    pf = c.number("power_factor", settings.power_factor, minimum=0, maximum=1)
    if std.is_dc or application not in AC_APPLICATIONS:
        default_system = VoltageSystem.DC
    else:
        default_system = VoltageSystem.SINGLE_PHASE
    system = c.enum("voltage_system", VoltageSystem, default_system)
    if std.is_dc and system not in (None, VoltageSystem.DC):
        c.fail("voltage_system", f"{std.info.name} only sizes dc circuits")
    duty = c.enum("duty_cycle", DutyCycle, settings.duty_cycle)
    ambient = c.number("ambient_temperature", settings.device_ambient_temperature, minimum=-60,
                       maximum=150, strict=False)
    gauge = raw.get("wire_gauge")
    if gauge is not None:
        gauge = str(gauge)
        if gauge not in size_ladder(std):
            c.fail("wire_gauge", f"wire_gauge '{gauge}' is not a {std.info.wire_system} size")
    strings = c.integer("parallel_strings", 1)
    c.raise_if_failed()

    return DeviceInput(
        voltage=voltage, application=application, current=current, power=power,
        efficiency=efficiency, power_factor=pf, voltage_system=system, duty_cycle=duty,
        ambient_temperature=ambient, environment=raw.get("environment", settings.device_environment),
        wire_gauge=gauge, short_circuit_current=isc, parallel_strings=strings,
    )


REQUEST_BUILDERS = {
    CalculationKind.CONDUCTOR: conductor_request,
    CalculationKind.CONDUIT_FILL: fill_request,
    CalculationKind.DEVICE: device_request,
}


def route(standard_id, raw: Dict[str, Any], settings: Optional[Settings] = None):
    """Validates a raw request for one standard and runs the matching engine."""
    sid: StandardId = parse_standard(standard_id)
    std = STANDARDS[sid]
    kind_value = raw.get("kind", CalculationKind.CONDUCTOR.value)
    try:
        kind = CalculationKind(kind_value)
    except ValueError:
        raise ValidationError([f"kind '{kind_value}' is not one of: "
                               f"{', '.join(k.value for k in CalculationKind)}"], ["kind"]) from None

    request = REQUEST_BUILDERS[kind](std, raw, settings or get_settings())
    logger.debug("Routing %s %s request", sid.value, kind.value)
    return ENGINES[(sid, kind)].calculate(request)
