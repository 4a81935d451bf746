from core.models import ConductorSpec, ConduitSpec, InstallationFactor

# IEC 60364-5-52 Table B.52 - Copper cable current-carrying capacity
# R, X in Ohms per km
# Format: {Size_mm2: (R, X, Amps_70C, Amps_90C)}
IEC_60364_COPPER = {
    "0.75": (24.5, 0.080, 13, 16),
    "1.0": (18.1, 0.080, 16, 19),
    "1.5": (12.1, 0.080, 21, 24),
    "2.5": (7.41, 0.080, 28, 32),
    "4": (4.61, 0.075, 37, 43),
    "6": (3.08, 0.075, 47, 54),
    "10": (1.83, 0.075, 66, 75),
    "16": (1.15, 0.070, 87, 100),
    "25": (0.727, 0.070, 115, 132),
    "35": (0.524, 0.065, 144, 165),
    "50": (0.387, 0.065, 173, 196),
    "70": (0.268, 0.065, 218, 246),
    "95": (0.193, 0.060, 263, 297),
    "120": (0.153, 0.060, 305, 344),
    "150": (0.124, 0.055, 350, 394),
    "185": (0.099, 0.055, 400, 450),
    "240": (0.077, 0.050, 469, 527),
    "300": (0.061, 0.050, 539, 606),
    "400": (0.047, 0.045, 618, 695),
    "500": (0.037, 0.045, 689, 775),
    "630": (0.030, 0.040, 776, 873),
    "800": (0.023, 0.040, 857, 964),
    "1000": (0.018, 0.035, 920, 1035),
}

IEC_COST_FACTORS = {
    "0.75": 1.0, "1.0": 1.1, "1.5": 1.2, "2.5": 1.4, "4": 1.7, "6": 2.0,
    "10": 2.5, "16": 3.2, "25": 4.1, "35": 5.0, "50": 6.2, "70": 7.8,
    "95": 9.5, "120": 11.5, "150": 13.8, "185": 16.2, "240": 19.5, "300": 23.0,
    "400": 27.5, "500": 32.0, "630": 38.0, "800": 45.0, "1000": 52.0,
}

IEC_CONDUCTORS = tuple(
    ConductorSpec(
        size=size, area=float(size), resistance=r, reactance=x,
        ampacity={70: a70, 90: a90}, insulation="PVC/XLPE", temperature_rating=90,
        cost_factor=IEC_COST_FACTORS[size],
    )
    for size, (r, x, a70, a90) in IEC_60364_COPPER.items()
)

# IEC 60364-5-52 Table B.52.14 - Ambient temperature correction (30C base)
TEMP_CORRECTION_FACTORS = {
    70: {10: 1.22, 15: 1.17, 20: 1.12, 25: 1.06, 30: 1.00, 35: 0.94, 40: 0.87,
         45: 0.79, 50: 0.71, 55: 0.61, 60: 0.50, 65: 0.35, 70: 0.0},
    90: {10: 1.15, 15: 1.12, 20: 1.08, 25: 1.04, 30: 1.00, 35: 0.96, 40: 0.91,
         45: 0.87, 50: 0.82, 55: 0.76, 60: 0.71, 65: 0.65, 70: 0.58, 75: 0.50,
         80: 0.41, 85: 0.29, 90: 0.0},
}

# IEC 60364-5-52 Table B.52.17 - Grouping of circuits
GROUPING_FACTORS = {
    1: 1.0, 2: 0.80, 3: 0.70, 4: 0.65, 5: 0.60, 6: 0.57, 7: 0.54, 8: 0.52,
    9: 0.50, 10: 0.48, 12: 0.45, 14: 0.43, 16: 0.41, 18: 0.39, 20: 0.38,
}

# IEC 60364-5-52 Table B.52.1 - Reference installation methods
INSTALLATION_FACTORS = {
    "A1": InstallationFactor(1.0, reference="IEC 60364-5-52 A1"),
    "A2": InstallationFactor(0.95, reference="IEC 60364-5-52 A2"),
    "B1": InstallationFactor(0.95, reference="IEC 60364-5-52 B1"),
    "B2": InstallationFactor(0.90, reference="IEC 60364-5-52 B2"),
    "C": InstallationFactor(0.80, reference="IEC 60364-5-52 C"),
    "D1": InstallationFactor(1.0, reference="IEC 60364-5-52 D1"),
    "D2": InstallationFactor(0.95, reference="IEC 60364-5-52 D2"),
    "E": InstallationFactor(1.2, reference="IEC 60364-5-52 E"),
    "F": InstallationFactor(1.0, reference="IEC 60364-5-52 F"),
    "G": InstallationFactor(0.95, reference="IEC 60364-5-52 G"),
}

TEMPERATURE_RATINGS = (70, 90)
INSULATION_TYPES = ("PVC", "XLPE", "EPR", "LSOH")

METRIC_SIZES = (
    "0.75", "1.0", "1.5", "2.5", "4", "6", "10", "16", "25", "35", "50", "70",
    "95", "120", "150", "185", "240", "300", "400", "500",
)

# Overall area including insulation (mm2), IEC 60228 / EN 50525
INSULATED_WIRE_AREAS = {
    "PVC": {
        "0.75": 3.73, "1.0": 4.26, "1.5": 6.07, "2.5": 8.96, "4": 11.65, "6": 14.93,
        "10": 24.35, "16": 33.29, "25": 50.77, "35": 64.75, "50": 91.35, "70": 117.61,
        "95": 158.36, "120": 190.40, "150": 238.10, "185": 282.74, "240": 362.17,
        "300": 436.63, "400": 571.77, "500": 690.88,
    },
    "XLPE": {
        "1.5": 6.07, "2.5": 7.94, "4": 10.46, "6": 13.59, "10": 22.65, "16": 31.28,
        "25": 48.25, "35": 61.93, "50": 84.67, "70": 117.61, "95": 158.36,
        "120": 190.40, "150": 238.10, "185": 282.74, "240": 362.17, "300": 451.33,
        "400": 588.68, "500": 728.11,
    },
}
# EPR and LSOH share XLPE wall thickness
INSULATED_WIRE_AREAS["EPR"] = INSULATED_WIRE_AREAS["XLPE"]
INSULATED_WIRE_AREAS["LSOH"] = INSULATED_WIRE_AREAS["XLPE"]

# EN 61386 - Conduit internal area (mm2) by nominal outside diameter
IEC_CONDUIT_SIZES = ("16", "20", "25", "32", "40", "50", "63", "75", "90", "110", "125", "160")
IEC_CONDUIT_AREAS = {
    "PVC": (86.6, 143.1, 268.8, 490.9, 804.2, 1256.6, 1963.5, 3117.2, 4536.5,
            6939.8, 9160.9, 15393.8),
    "Steel": (81.7, 136.8, 260.2, 479.1, 789.4, 1238.9, 1940.8, 3088.8, 4499.7,
              6900.4, 9122.3, 15348.5),
}
_TYPE_COST = {"PVC": 0.6, "Steel": 1.4}

IEC_CONDUITS = tuple(
    ConduitSpec(size=size, internal_area=area, conduit_type=ctype, standard="IEC",
                cost_factor=round(int(size) / 16 * _TYPE_COST[ctype], 2))
    for ctype, areas in IEC_CONDUIT_AREAS.items()
    for size, area in zip(IEC_CONDUIT_SIZES, areas)
)

# Fill application requirements: (min C, max C, references)
FILL_APPLICATIONS = {
    "residential": (5, 35, ("IEC 60364-7-701", "IEC 60364-4-41")),
    "commercial": (0, 40, ("IEC 60364-5-52", "IEC 61386")),
    "industrial": (-25, 60, ("IEC 60364-5-52", "IEC 60204-1")),
    "hazardous": (-40, 80, ("IEC 60079-14", "IEC 60079-0")),
    "data_center": (18, 27, ("IEC 60364-8-1", "EN 50600")),
    "healthcare": (20, 26, ("IEC 60364-7-710", "IEC 60601")),
    "educational": (15, 26, ("IEC 60364-5-52",)),
    "outdoor": (-30, 50, ("IEC 60364-5-52", "IEC 60529")),
    "underground": (0, 30, ("IEC 60364-5-52 D1", "IEC 61386-24")),
    "marine": (-10, 45, ("IEC 60092-352", "IEC 60364-7-709")),
}

FILL_INSTALLATION_FACTORS = {
    "indoor": InstallationFactor(1.0, 1.0, "IEC 60364-5-52"),
    "outdoor": InstallationFactor(1.1, 1.15, "IEC 60364-5-51"),
    "underground": InstallationFactor(1.0, 1.0, "IEC 61386-24"),
    "hazardous": InstallationFactor(1.05, 1.2, "IEC 60079-14"),
    "wet_location": InstallationFactor(1.0, 1.1, "IEC 60364-5-51"),
    "concrete_slab": InstallationFactor(0.95, 1.0, "IEC 60364-5-52"),
    "overhead": InstallationFactor(1.1, 1.2, "IEC 60364-5-52"),
    "dry_location": InstallationFactor(1.0, 1.0, "IEC 60364-5-52"),
    "cable_tray": InstallationFactor(1.0, 1.05, "IEC 61537"),
    "free_air": InstallationFactor(1.0, 1.0, "IEC 60364-5-52 F"),
}
