from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Tuple

class StandardId(Enum):
    NEC = "NEC"
    IEC = "IEC"
    BS7671 = "BS7671"
    DC_AUTOMOTIVE = "DC_AUTOMOTIVE"
    DC_MARINE = "DC_MARINE"
    DC_SOLAR = "DC_SOLAR"
    DC_TELECOM = "DC_TELECOM"

    @property
    def is_dc(self) -> bool:
        return self.value.startswith("DC_")

class CalculationKind(Enum):
    CONDUCTOR = "conductor"
    CONDUIT_FILL = "conduit_fill"
    DEVICE = "device"

class ConductorMaterial(Enum):
    COPPER = "copper"
    ALUMINUM = "aluminum"

class VoltageSystem(Enum):
    SINGLE_PHASE = "single"
    THREE_PHASE = "three-phase"
    DC = "dc"

class DutyCycle(Enum):
    CONTINUOUS = "continuous"
    INTERMITTENT = "intermittent"

# Shared vocabularies checked by the router
INSTALLATION_METHODS = (
    "A1", "A2", "B1", "B2", "C", "D1", "D2", "E", "F", "G",
    "conduit", "cable_tray", "direct_burial", "free_air",
    "automotive", "marine", "solar_outdoor", "solar_indoor",
)
DC_APPLICATIONS = ("automotive", "marine", "solar", "telecom", "battery", "led", "industrial")
AC_APPLICATIONS = ("residential", "commercial", "industrial")
APPLICATION_TYPES = ("residential", "commercial") + DC_APPLICATIONS

FILL_APPLICATIONS = (
    "residential", "commercial", "industrial", "data_center", "healthcare",
    "educational", "outdoor", "hazardous", "underground", "marine",
)
FILL_INSTALLATION_METHODS = (
    "underground", "overhead", "indoor", "outdoor", "hazardous",
    "wet_location", "dry_location", "concrete_slab", "cable_tray", "free_air",
)


# --- Catalog rows ---

@dataclass(frozen=True)
class ConductorSpec:
    size: str
    area: float                 # in2 for AWG tables, mm2 for metric and DC tables
    resistance: float           # ohm per 1000 length units
    ampacity: Dict[int, float]  # temperature rating -> amps
    reactance: float = 0.0
    insulation: str = ""
    temperature_rating: int = 75
    intermittent_ampacity: Optional[float] = None
    applications: FrozenSet[str] = frozenset()
    cost_factor: float = 1.0

@dataclass(frozen=True)
class ConduitSpec:
    size: str
    internal_area: float
    conduit_type: str
    standard: str
    cost_factor: float = 1.0

@dataclass(frozen=True)
class ProtectiveDeviceSpec:
    rating: float
    device_type: str            # form factor: thermal-magnetic, electronic, regular, mini, maxi, micro2
    standard: str               # UL489, ABYC, SAE, IEC60947, ISO 8820-3 ...
    voltage_rating: float
    applications: FrozenSet[str]
    temp_min: float = -25.0
    temp_max: float = 80.0
    interrupting_capacity: float = 10000.0
    current_type: str = "dc"
    voltages: Tuple[int, ...] = ()
    continuous_duty: bool = True
    thermal_runaway_protection: bool = False
    color: Optional[str] = None

    def supports_voltage(self, voltage: float) -> bool:
        if self.voltages and int(voltage) not in self.voltages:
            return False
        return voltage <= self.voltage_rating

@dataclass(frozen=True)
class ApplicationProfile:
    name: str
    voltage_drop_normal: float
    voltage_drop_critical: float
    continuous_factor: float
    intermittent_factor: float
    voltage_range: Tuple[float, float]
    temperature_range: Tuple[float, float]
    references: Tuple[str, ...] = ()
    default_efficiency: float = 1.0

    def safety_factor(self, duty_cycle: DutyCycle) -> float:
        if duty_cycle == DutyCycle.CONTINUOUS:
            return self.continuous_factor
        return self.intermittent_factor

@dataclass(frozen=True)
class InstallationFactor:
    temperature_factor: float
    environment_factor: float = 1.0
    reference: str = ""


# --- Factor composition ---

@dataclass(frozen=True)
class FactorStep:
    name: str
    value: float
    operation: str = "multiply"  # or "divide"
    reference: str = ""

    def apply(self, current: float) -> float:
        if self.operation == "divide":
            return current / self.value
        return current * self.value

    def describe(self) -> str:
        symbol = "÷" if self.operation == "divide" else "×"
        text = f"{self.name}: {symbol}{self.value:g}"
        if self.reference:
            text += f" ({self.reference})"
        return text

@dataclass(frozen=True)
class CompositeFactor:
    temperature: float
    grouping: float
    installation: float
    environment: float
    safety: float
    steps: Tuple[FactorStep, ...] = ()

    @property
    def ampacity_multiplier(self) -> float:
        return self.temperature * self.grouping * self.installation


# --- Requests ---

@dataclass
class ConductorInput:
    current: float
    length: float
    voltage: float
    voltage_system: VoltageSystem = VoltageSystem.SINGLE_PHASE
    conductor_material: ConductorMaterial = ConductorMaterial.COPPER
    application: Optional[str] = None
    ambient_temperature: float = 30.0
    installation_method: str = "conduit"
    conductor_count: int = 3
    power_factor: float = 1.0
    temperature_rating: Optional[int] = None
    duty_cycle: DutyCycle = DutyCycle.CONTINUOUS
    voltage_drop_override: Optional[float] = None
    use_critical_limit: bool = False

@dataclass
class WireEntry:
    gauge: str
    quantity: int
    insulation: str

@dataclass
class ConduitFillInput:
    wires: List[WireEntry]
    conduit_type: str
    conduit_size: Optional[str] = None
    future_fill_reserve: float = 0.0
    wire_count_override: Optional[int] = None
    application: str = "commercial"
    installation_method: str = "indoor"
    ambient_temperature: float = 30.0
    environment: str = "dry"

@dataclass
class DeviceInput:
    voltage: float
    application: Optional[str] = None
    current: Optional[float] = None
    power: Optional[float] = None
    efficiency: Optional[float] = None
    power_factor: float = 1.0
    voltage_system: VoltageSystem = VoltageSystem.DC
    duty_cycle: DutyCycle = DutyCycle.CONTINUOUS
    ambient_temperature: float = 25.0
    environment: str = "indoor"
    wire_gauge: Optional[str] = None
    short_circuit_current: Optional[float] = None
    parallel_strings: int = 1


# --- Results ---

@dataclass
class CalculationMetadata:
    standards_applied: Tuple[str, ...]
    calculation_method: str
    ambient_temperature: float
    environment: str = ""
    safety_factors: Dict[str, float] = field(default_factory=dict)
    assumptions: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    timestamp: datetime = field(default_factory=datetime.now, compare=False)

@dataclass
class ConductorCompliance:
    ampacity_compliant: bool
    voltage_drop_compliant: bool
    temperature_compliant: bool
    installation_compliant: bool
    standard_compliant: bool

@dataclass
class ConductorAlternative:
    size: str
    ampacity: float
    voltage_drop_percent: float
    compliant: bool
    cost_factor: float

@dataclass
class ConductorResult:
    standard: StandardId
    size: str
    base_ampacity: float
    ampacity: float
    required_ampacity: float
    voltage_drop_volts: float
    voltage_drop_percent: float
    voltage_drop_limit: float
    power_loss_watts: float
    efficiency: float
    factors: CompositeFactor
    compliance: ConductorCompliance
    alternatives: List[ConductorAlternative]
    metadata: CalculationMetadata
    voltage_at_load: Optional[float] = None

@dataclass
class FillCompliance:
    fill_compliant: bool
    temperature_compliant: bool
    code_compliant: bool

@dataclass
class WireShare:
    gauge: str
    quantity: int
    insulation: str
    individual_area: float
    total_area: float
    percentage: float

@dataclass
class ConduitAlternative:
    size: str
    conduit_type: str
    fill_percent: float
    compliant: bool
    cost_factor: float

@dataclass
class FillResult:
    standard: StandardId
    conduit_size: str
    conduit_type: str
    total_wire_area: float
    conduit_area: float
    fill_percent: float
    max_fill_percent: float
    fill_rule: str
    available_area: float
    compliance: FillCompliance
    wire_breakdown: List[WireShare]
    alternatives: List[ConduitAlternative]
    metadata: CalculationMetadata

@dataclass
class DeviceCompliance:
    standard_compliant: bool
    application_compliant: bool
    temperature_compliant: bool
    wire_compatible: Optional[bool] = None

@dataclass
class PowerAnalysis:
    input_power: float
    voltage: float
    efficiency: float
    power_factor: float
    calculated_current: float
    power_loss_watts: float

@dataclass
class DeviceResult:
    standard: StandardId
    rating: float
    device_type: str
    primary: ProtectiveDeviceSpec
    alternatives: List[ProtectiveDeviceSpec]
    base_current: float
    adjusted_current: float
    steps: Tuple[FactorStep, ...]
    available_ratings: List[float]
    compliance: DeviceCompliance
    metadata: CalculationMetadata
    power_analysis: Optional[PowerAnalysis] = None
