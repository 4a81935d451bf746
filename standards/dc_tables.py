from typing import Dict, Tuple

from core.models import ConductorSpec, InstallationFactor

# SAE J1128 / ISO 6722 low-voltage primary cable, copper
# R in Ohms per 1000 ft
# Format: (Gauge, Area_mm2, R, Continuous_A, Intermittent_A, Applications)
SAE_J1128_WIRES = (
    ("20", 0.52, 10.15, 11, 14, ("automotive", "led")),
    ("18", 0.82, 6.385, 16, 20, ("automotive", "marine", "led")),
    ("16", 1.31, 4.016, 22, 27, ("automotive", "marine", "led")),
    ("14", 2.08, 2.525, 32, 40, ("automotive", "marine", "solar", "battery")),
    ("12", 3.31, 1.588, 45, 55, ("automotive", "marine", "solar", "battery", "telecom")),
    ("10", 5.26, 0.999, 60, 75, ("automotive", "marine", "solar", "battery", "telecom")),
    ("8", 8.37, 0.628, 80, 100, ("automotive", "marine", "solar", "battery")),
    ("6", 13.3, 0.395, 105, 130, ("automotive", "marine", "solar", "battery")),
    ("4", 21.2, 0.249, 140, 175, ("automotive", "marine", "solar", "battery")),
    ("2", 33.6, 0.156, 190, 240, ("automotive", "marine", "solar", "battery")),
    ("1", 42.4, 0.124, 220, 275, ("automotive", "marine", "solar", "battery")),
    ("1/0", 53.5, 0.098, 260, 325, ("automotive", "marine", "solar", "battery")),
    ("2/0", 67.4, 0.078, 300, 375, ("marine", "solar", "battery")),
    ("4/0", 107.0, 0.049, 380, 475, ("marine", "solar", "battery")),
)

# Telecom signal/power pairs below 20 AWG
TELECOM_SMALL_WIRES = (
    ("24", 0.20, 25.67, 3.5, 4.5, ("telecom",)),
    ("22", 0.33, 16.14, 7, 9, ("telecom",)),
)

# Per application: (Ampacity_scale, Insulation, Temp_Rating, Gauges_allowed or None)
_APPLICATION_TABLES = {
    "automotive": (1.0, "TXL", 105, None),
    "industrial": (1.0, "TXL", 105, None),
    "marine": (0.9, "Tinned Marine", 105, None),
    "solar": (1.1, "USE-2 (UV Resistant)", 90, None),
    "battery": (1.2, "Battery Cable", 105, None),
    "telecom": (1.0, "PVC/Plenum", 75, ("24", "22", "12", "10")),
    "led": (1.0, "CL2/CL3", 75, ("20", "18", "16")),
}


def _build_table(application: str) -> Tuple[ConductorSpec, ...]:
    scale, insulation, rating, gauges = _APPLICATION_TABLES[application]
    # automotive rows back the generic industrial table
    tag = "automotive" if application == "industrial" else application
    rows = [w for w in TELECOM_SMALL_WIRES + SAE_J1128_WIRES if tag in w[5]]
    if gauges is not None:
        rows = [w for w in rows if w[0] in gauges]
    smallest = rows[0][1]
    table = []
    for gauge, area, r, cont, inter, apps in rows:
        if scale != 1.0:
            cont, inter = round(cont * scale), round(inter * scale)
        table.append(ConductorSpec(
            size=gauge, area=area, resistance=r, ampacity={rating: cont},
            insulation=insulation, temperature_rating=rating,
            intermittent_ampacity=inter, applications=frozenset(apps),
            cost_factor=round(area / smallest, 2),
        ))
    return tuple(table)


DC_WIRE_TABLES: Dict[str, Tuple[ConductorSpec, ...]] = {
    app: _build_table(app) for app in _APPLICATION_TABLES
}

# Application specific temperature correction (25C base)
DC_TEMP_CORRECTION_FACTORS = {
    "automotive": {-40: 1.15, -20: 1.10, 0: 1.05, 25: 1.0, 40: 0.95, 60: 0.87,
                   80: 0.76, 100: 0.62, 125: 0.40},
    "industrial": {-40: 1.15, -20: 1.10, 0: 1.05, 25: 1.0, 40: 0.95, 60: 0.87,
                   80: 0.76, 100: 0.62, 125: 0.40},
    "marine": {-20: 1.10, 0: 1.05, 25: 1.0, 40: 0.95, 60: 0.87, 80: 0.76},
    "solar": {-40: 1.15, -20: 1.10, 0: 1.05, 25: 1.0, 40: 0.95, 60: 0.87,
              70: 0.82, 80: 0.76, 90: 0.67},
    "telecom": {0: 1.05, 10: 1.02, 25: 1.0, 40: 0.95, 50: 0.87},
    "battery": {-20: 1.10, 0: 1.05, 25: 1.0, 40: 0.95, 60: 0.87},
    "led": {-10: 1.05, 0: 1.02, 25: 1.0, 40: 0.95, 60: 0.87, 70: 0.82},
}

INSTALLATION_FACTORS = {
    "automotive": InstallationFactor(1.0, 1.05, "SAE J1128"),
    "marine": InstallationFactor(1.0, 1.05, "ABYC E-11"),
    "solar_outdoor": InstallationFactor(1.0, 1.02, "NEC 690.31"),
    "solar_indoor": InstallationFactor(1.0, reference="NEC 690.31"),
    "conduit": InstallationFactor(1.0, reference="NEC 310.16"),
    "cable_tray": InstallationFactor(1.0, 1.05, "NEC 392.80"),
    "direct_burial": InstallationFactor(0.8, reference="NEC 300.5"),
    "free_air": InstallationFactor(1.2, reference="NEC 310.17"),
}

DC_GAUGES = tuple(w[0] for w in TELECOM_SMALL_WIRES + SAE_J1128_WIRES)
