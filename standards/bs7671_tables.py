from core.models import ConductorSpec, InstallationFactor

# BS 7671 Appendix 4 Table 4D5A - Thermoplastic (70C) and thermosetting (90C) cables, BS 6004
# Format: {Size_mm2: (R_ohm_km, X_ohm_km, Amps_70C, Amps_90C)}
BS7671_4D5A = {
    "1.0": (18.1, 0.080, 13, 16),
    "1.5": (12.1, 0.080, 17.5, 20),
    "2.5": (7.41, 0.080, 24, 27),
    "4": (4.61, 0.075, 32, 36),
    "6": (3.08, 0.075, 41, 46),
    "10": (1.83, 0.075, 57, 64),
    "16": (1.15, 0.070, 76, 85),
    "25": (0.727, 0.070, 101, 112),
    "35": (0.524, 0.065, 125, 138),
    "50": (0.387, 0.065, 151, 167),
    "70": (0.268, 0.065, 192, 213),
    "95": (0.193, 0.060, 232, 258),
    "120": (0.153, 0.060, 269, 299),
    "150": (0.124, 0.055, 309, 344),
    "185": (0.099, 0.055, 353, 392),
    "240": (0.077, 0.050, 415, 461),
    "300": (0.061, 0.050, 477, 530),
    "400": (0.047, 0.045, 546, 607),
    "500": (0.037, 0.045, 609, 677),
    "630": (0.030, 0.040, 686, 763),
}

BS7671_COST_FACTORS = {
    "1.0": 1.0, "1.5": 1.1, "2.5": 1.3, "4": 1.6, "6": 1.9, "10": 2.4, "16": 3.0,
    "25": 3.8, "35": 4.6, "50": 5.7, "70": 7.1, "95": 8.6, "120": 10.4, "150": 12.5,
    "185": 14.8, "240": 17.8, "300": 20.9, "400": 24.8, "500": 28.8, "630": 34.2,
}

BS7671_CONDUCTORS = tuple(
    ConductorSpec(
        size=size, area=float(size), resistance=r, reactance=x,
        ampacity={70: a70, 90: a90}, insulation="BS 6004", temperature_rating=70,
        cost_factor=BS7671_COST_FACTORS[size],
    )
    for size, (r, x, a70, a90) in BS7671_4D5A.items()
)

# Table 4B1 - Ambient temperature correction
TEMP_CORRECTION_FACTORS = {
    70: {10: 1.15, 15: 1.12, 20: 1.08, 25: 1.04, 30: 1.00, 35: 0.96, 40: 0.91,
         45: 0.87, 50: 0.82, 55: 0.76, 60: 0.71, 65: 0.65, 70: 0.58},
    90: {10: 1.10, 15: 1.08, 20: 1.05, 25: 1.03, 30: 1.00, 35: 0.98, 40: 0.95,
         45: 0.93, 50: 0.90, 55: 0.87, 60: 0.84, 65: 0.81, 70: 0.77, 75: 0.74,
         80: 0.70, 85: 0.67, 90: 0.63},
}

# Table 4C1 - Grouping
GROUPING_FACTORS = {
    1: 1.0, 2: 0.80, 3: 0.70, 4: 0.65, 5: 0.60, 6: 0.57, 7: 0.54, 8: 0.52, 9: 0.50,
    10: 0.48, 11: 0.46, 12: 0.45, 13: 0.44, 14: 0.43, 15: 0.42, 16: 0.41, 17: 0.40,
    18: 0.39, 19: 0.38, 20: 0.38,
}

INSTALLATION_FACTORS = {
    "A1": InstallationFactor(1.0, reference="BS 7671 Method A"),
    "A2": InstallationFactor(1.0, reference="BS 7671 Method A"),
    "B1": InstallationFactor(1.0, reference="BS 7671 Method B"),
    "B2": InstallationFactor(1.0, reference="BS 7671 Method B"),
    "C": InstallationFactor(1.0, reference="BS 7671 Method C (clipped direct)"),
    "D1": InstallationFactor(1.0, reference="BS 7671 Method D"),
    "D2": InstallationFactor(1.0, reference="BS 7671 Method D"),
    "E": InstallationFactor(1.2, reference="BS 7671 Method E"),
    "F": InstallationFactor(1.1, reference="BS 7671 Method F"),
    "G": InstallationFactor(1.0, reference="BS 7671 Method G"),
}

TEMPERATURE_RATINGS = (70, 90)
