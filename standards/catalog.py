from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Mapping, Optional, Tuple

from core.errors import UnsupportedStandardError
from core.models import (
    AC_APPLICATIONS, DC_APPLICATIONS, ApplicationProfile, ConductorSpec, ConduitSpec,
    InstallationFactor, ProtectiveDeviceSpec, StandardId, VoltageSystem,
)
from standards import bs7671_tables, dc_tables, devices, iec_tables, nec_tables
from standards.profiles import (
    BS7671_AC_PROFILES, IEC_AC_PROFILES, IEC_DC_PROFILES, NEC_AC_PROFILES, NEC_DC_PROFILES,
)

NEC_FAMILY = "NEC"
IEC_FAMILY = "IEC"


@dataclass(frozen=True)
class StandardInfo:
    name: str
    full_name: str
    wire_system: str            # "AWG" or "metric"
    ac_voltages: Tuple[int, ...]
    dc_voltages: Tuple[int, ...]
    voltage_drop_branch: float
    voltage_drop_feeder: float
    voltage_drop_total: float
    length_unit: str            # "ft" or "m", matching the resistance tables
    default_application: str


@dataclass(frozen=True)
class CorrectionRules:
    temperature: Mapping[int, Mapping[float, float]]
    grouping: Mapping[int, float]
    installation: Mapping[str, InstallationFactor]
    temperature_ratings: Tuple[int, ...]
    default_rating: int


@dataclass(frozen=True)
class FillTables:
    conduits: Tuple[ConduitSpec, ...]
    conduit_types: Tuple[str, ...]
    size_ladder: Tuple[str, ...]
    insulation_types: Tuple[str, ...]
    applications: Mapping[str, tuple]
    installation: Mapping[str, InstallationFactor]
    area_unit: str
    references: Tuple[str, ...]
    listings: Mapping[str, str] = field(default_factory=dict)

    def wire_area(self, gauge: str, insulation: str) -> Optional[float]:
        if self.area_unit == "mm2":
            return iec_tables.INSULATED_WIRE_AREAS.get(insulation, {}).get(gauge)
        row = nec_tables.NEC_310_16_COPPER.get(gauge)
        return row[0] if row else None

    def conduits_of(self, conduit_type: str) -> Tuple[ConduitSpec, ...]:
        return tuple(sorted((c for c in self.conduits if c.conduit_type == conduit_type),
                            key=lambda c: c.internal_area))


@dataclass(frozen=True)
class StandardSet:
    """Everything one standard needs: metadata, catalogs, correction rules and profiles."""
    standard: StandardId
    info: StandardInfo
    family: str
    applications: FrozenSet[str]
    voltage_systems: FrozenSet[VoltageSystem]
    conductors: Tuple[ConductorSpec, ...]
    rules: CorrectionRules
    fill: FillTables
    profiles: Dict[str, ApplicationProfile] = field(default_factory=dict)
    dc_rules: Optional[Mapping[str, Mapping[float, float]]] = None

    @property
    def is_dc(self) -> bool:
        return self.standard.is_dc

    def profile(self, application: str) -> ApplicationProfile:
        return self.profiles[application]

    def conductor_table(self, application: str) -> Tuple[ConductorSpec, ...]:
        """DC standards carry one wire table per application."""
        if self.is_dc:
            return dc_tables.DC_WIRE_TABLES[application]
        return self.conductors

    def devices(self) -> Tuple[ProtectiveDeviceSpec, ...]:
        if self.family == IEC_FAMILY:
            return devices.IEC_BREAKERS
        return devices.NEC_BREAKERS

    def wire_ampacity_map(self, fuse_path: bool = False) -> Dict[str, float]:
        if fuse_path:
            return devices.AUTOMOTIVE_WIRE_AMPACITY
        if self.family == IEC_FAMILY:
            return devices.IEC_WIRE_AMPACITY
        return devices.NEC_WIRE_AMPACITY


NEC_FILL = FillTables(
    conduits=nec_tables.NEC_CONDUITS,
    conduit_types=tuple(nec_tables.NEC_CONDUIT_AREAS),
    size_ladder=nec_tables.AWG_SIZES,
    insulation_types=nec_tables.INSULATION_TYPES,
    applications=nec_tables.FILL_APPLICATIONS,
    installation=nec_tables.FILL_INSTALLATION_FACTORS,
    area_unit="in2",
    references=("NEC Chapter 9 Table 1", "NEC Chapter 9 Table 4", "NEC Chapter 9 Table 5"),
    listings=nec_tables.CONDUIT_LISTINGS,
)

IEC_FILL = FillTables(
    conduits=iec_tables.IEC_CONDUITS,
    conduit_types=tuple(iec_tables.IEC_CONDUIT_AREAS),
    size_ladder=iec_tables.METRIC_SIZES,
    insulation_types=iec_tables.INSULATION_TYPES,
    applications=iec_tables.FILL_APPLICATIONS,
    installation=iec_tables.FILL_INSTALLATION_FACTORS,
    area_unit="mm2",
    references=("IEC 61386", "IEC 60364-5-52", "IEC 60228"),
    listings={"PVC": "IEC 61386-21", "Steel": "IEC 61386-21"},
)

NEC_RULES = CorrectionRules(
    temperature=nec_tables.TEMP_CORRECTION_FACTORS,
    grouping=nec_tables.GROUPING_FACTORS,
    installation=nec_tables.INSTALLATION_FACTORS,
    temperature_ratings=nec_tables.TEMPERATURE_RATINGS,
    default_rating=75,
)

IEC_RULES = CorrectionRules(
    temperature=iec_tables.TEMP_CORRECTION_FACTORS,
    grouping=iec_tables.GROUPING_FACTORS,
    installation=iec_tables.INSTALLATION_FACTORS,
    temperature_ratings=iec_tables.TEMPERATURE_RATINGS,
    default_rating=90,
)

BS7671_RULES = CorrectionRules(
    temperature=bs7671_tables.TEMP_CORRECTION_FACTORS,
    grouping=bs7671_tables.GROUPING_FACTORS,
    installation=bs7671_tables.INSTALLATION_FACTORS,
    temperature_ratings=bs7671_tables.TEMPERATURE_RATINGS,
    default_rating=70,
)

# DC tables: one rating per application table, temperature keyed by application
DC_RULES = CorrectionRules(
    temperature={},
    grouping=nec_tables.GROUPING_FACTORS,
    installation=dc_tables.INSTALLATION_FACTORS,
    temperature_ratings=(),
    default_rating=0,
)

_AC_SYSTEMS = frozenset((VoltageSystem.SINGLE_PHASE, VoltageSystem.THREE_PHASE))
_AC_ACCEPTED = frozenset(AC_APPLICATIONS + DC_APPLICATIONS)


def _dc_standard(standard, full_name, dc_voltages, limits, default_application, applications):
    branch, feeder, total = limits
    return StandardSet(
        standard=standard,
        info=StandardInfo(standard.value, full_name, "AWG", (), dc_voltages,
                          branch, feeder, total, "ft", default_application),
        family=NEC_FAMILY,
        applications=frozenset(applications),
        voltage_systems=frozenset((VoltageSystem.DC,)),
        conductors=(),
        rules=DC_RULES,
        fill=NEC_FILL,
        profiles=NEC_DC_PROFILES,
        dc_rules=dc_tables.DC_TEMP_CORRECTION_FACTORS,
    )


STANDARDS: Dict[StandardId, StandardSet] = {
    StandardId.NEC: StandardSet(
        standard=StandardId.NEC,
        info=StandardInfo("NEC", "National Electrical Code (NFPA 70)", "AWG",
                          (120, 208, 240, 277, 480), (), 3.0, 2.5, 5.0, "ft", "commercial"),
        family=NEC_FAMILY,
        applications=_AC_ACCEPTED,
        voltage_systems=_AC_SYSTEMS,
        conductors=nec_tables.NEC_CONDUCTORS,
        rules=NEC_RULES,
        fill=NEC_FILL,
        profiles={**NEC_DC_PROFILES, **NEC_AC_PROFILES},
    ),
    StandardId.IEC: StandardSet(
        standard=StandardId.IEC,
        info=StandardInfo("IEC", "IEC 60364 Low-voltage electrical installations", "metric",
                          (230, 400, 690), (), 3.0, 2.0, 5.0, "m", "commercial"),
        family=IEC_FAMILY,
        applications=_AC_ACCEPTED,
        voltage_systems=_AC_SYSTEMS,
        conductors=iec_tables.IEC_CONDUCTORS,
        rules=IEC_RULES,
        fill=IEC_FILL,
        profiles={**IEC_DC_PROFILES, **IEC_AC_PROFILES},
    ),
    StandardId.BS7671: StandardSet(
        standard=StandardId.BS7671,
        info=StandardInfo("BS7671", "BS 7671:2018+A2:2022 IET Wiring Regulations", "metric",
                          (230, 400), (), 3.0, 2.5, 5.0, "m", "commercial"),
        family=IEC_FAMILY,
        applications=_AC_ACCEPTED,
        voltage_systems=_AC_SYSTEMS,
        conductors=bs7671_tables.BS7671_CONDUCTORS,
        rules=BS7671_RULES,
        fill=IEC_FILL,
        profiles={**IEC_DC_PROFILES, **BS7671_AC_PROFILES},
    ),
    StandardId.DC_AUTOMOTIVE: _dc_standard(
        StandardId.DC_AUTOMOTIVE, "DC Automotive Systems (ISO 6722)", (12, 24),
        (2.0, 1.5, 3.0), "automotive", ("automotive", "led")),
    StandardId.DC_MARINE: _dc_standard(
        StandardId.DC_MARINE, "DC Marine Systems (ABYC Standards)", (12, 24, 48),
        (3.0, 2.0, 5.0), "marine", ("marine",)),
    StandardId.DC_SOLAR: _dc_standard(
        StandardId.DC_SOLAR, "DC Solar/Renewable Energy Systems", (12, 24, 48),
        (2.0, 1.5, 3.0), "solar", ("solar", "battery")),
    StandardId.DC_TELECOM: _dc_standard(
        StandardId.DC_TELECOM, "DC Telecommunications Systems", (24, 48),
        (1.0, 0.5, 2.0), "telecom", ("telecom",)),
}


def parse_standard(value) -> StandardId:
    if isinstance(value, StandardId):
        return value
    try:
        return StandardId(str(value).strip().upper())
    except ValueError:
        raise UnsupportedStandardError(str(value)) from None


def get_standard(value) -> StandardSet:
    return STANDARDS[parse_standard(value)]
