from core.models import ConductorSpec, ConduitSpec, InstallationFactor

# NEC Table 310.16 - Allowable Ampacities, Copper, with Chapter 9 Table 5 areas (THHN/THWN)
# R from Chapter 9 Table 8 (Ohms per 1000 ft), X from Table 9 (PVC conduit)
# Format: {SizeAWG: (Area_in2, R, X, {TempRating: Amps})}
NEC_310_16_COPPER = {
    "14":  (0.0097, 3.07, 0.048, {60: 15, 75: 20, 90: 25}),
    "12":  (0.0133, 1.93, 0.046, {60: 20, 75: 25, 90: 30}),
    "10":  (0.0211, 1.21, 0.044, {60: 30, 75: 35, 90: 40}),
    "8":   (0.0366, 0.764, 0.052, {60: 40, 75: 50, 90: 55}),
    "6":   (0.0507, 0.491, 0.051, {60: 55, 75: 65, 90: 75}),
    "4":   (0.0824, 0.308, 0.048, {60: 70, 75: 85, 90: 95}),
    "3":   (0.1040, 0.245, 0.047, {60: 85, 75: 100, 90: 115}),
    "2":   (0.1318, 0.194, 0.045, {60: 95, 75: 115, 90: 130}),
    "1":   (0.1662, 0.154, 0.046, {60: 110, 75: 130, 90: 150}),
    "1/0": (0.2109, 0.122, 0.044, {60: 125, 75: 150, 90: 170}),
    "2/0": (0.2642, 0.097, 0.043, {60: 145, 75: 175, 90: 195}),
    "3/0": (0.3355, 0.077, 0.042, {60: 165, 75: 200, 90: 225}),
    "4/0": (0.4202, 0.061, 0.041, {60: 195, 75: 230, 90: 260}),
    "250": (0.4963, 0.052, 0.041, {60: 215, 75: 255, 90: 290}),
    "300": (0.5958, 0.043, 0.041, {60: 240, 75: 285, 90: 320}),
    "350": (0.6837, 0.037, 0.040, {60: 260, 75: 310, 90: 350}),
    "400": (0.7901, 0.032, 0.040, {60: 280, 75: 335, 90: 380}),
    "500": (0.9887, 0.026, 0.039, {60: 320, 75: 380, 90: 430}),
    "600": (1.1705, 0.022, 0.039, {60: 355, 75: 420, 90: 475}),
    "750": (1.4784, 0.017, 0.038, {60: 400, 75: 475, 90: 535}),
    "1000": (1.9635, 0.013, 0.037, {60: 455, 75: 545, 90: 615}),
}

# Relative cost per size (14 AWG = 1.0)
NEC_COST_FACTORS = {
    "14": 1.0, "12": 1.2, "10": 1.8, "8": 2.5, "6": 3.2, "4": 4.1, "3": 4.8,
    "2": 5.6, "1": 6.5, "1/0": 7.5, "2/0": 8.8, "3/0": 10.2, "4/0": 11.8,
    "250": 13.5, "300": 15.2, "350": 16.8, "400": 18.5, "500": 22.0,
    "600": 25.5, "750": 30.0, "1000": 36.0,
}

NEC_CONDUCTORS = tuple(
    ConductorSpec(
        size=size, area=area, resistance=r, reactance=x, ampacity=dict(amps),
        insulation="THHN/THWN", temperature_rating=90, cost_factor=NEC_COST_FACTORS[size],
    )
    for size, (area, r, x, amps) in NEC_310_16_COPPER.items()
)

# NEC Table 310.15(B)(1) - Ambient Temperature Correction Factors (30C base)
# Format: {Insulation_Rating: {Ambient_Upper_Bound_C: Factor}}
TEMP_CORRECTION_FACTORS = {
    60: {21: 1.08, 25: 1.05, 30: 1.00, 35: 0.94, 40: 0.88, 45: 0.82, 50: 0.75,
         55: 0.67, 60: 0.58, 65: 0.47, 70: 0.33},
    75: {21: 1.05, 25: 1.02, 30: 1.00, 35: 0.96, 40: 0.91, 45: 0.87, 50: 0.82,
         55: 0.76, 60: 0.71, 65: 0.65, 70: 0.58, 75: 0.50, 80: 0.41},
    90: {21: 1.04, 25: 1.02, 30: 1.00, 35: 0.97, 40: 0.95, 45: 0.92, 50: 0.89,
         55: 0.86, 60: 0.83, 65: 0.80, 70: 0.76, 75: 0.73, 80: 0.69, 85: 0.65, 90: 0.61},
}

# NEC Table 310.15(C)(1) - Adjustment Factors for More Than Three Current-Carrying Conductors
# Format: {Max_Conductors: Factor}
GROUPING_FACTORS = {
    3: 1.0,
    6: 0.80,   # 4-6 conductors
    21: 0.70,  # 7-21
    30: 0.60,  # 22-30
    40: 0.50,  # 31-40
    41: 0.45,  # 41+
}

INSTALLATION_FACTORS = {
    "conduit": InstallationFactor(1.0, reference="NEC 310.16"),
    "cable_tray": InstallationFactor(1.0, 1.05, "NEC 392.80"),
    "direct_burial": InstallationFactor(0.8, reference="NEC 300.5"),
    "free_air": InstallationFactor(1.2, reference="NEC 310.17"),
}

TEMPERATURE_RATINGS = (60, 75, 90)
INSULATION_TYPES = ("THWN", "THHN", "XHHW", "USE", "RHH", "RHW", "THWN-2", "THHW")

# Discrete AWG/kcmil ladder accepted on input
AWG_SIZES = (
    "14", "12", "10", "8", "6", "4", "3", "2", "1", "1/0", "2/0", "3/0", "4/0",
    "250", "300", "350", "400", "500", "600", "750", "1000",
)

# NEC Chapter 9 Table 4 - Total internal area (in2), by conduit type
NEC_CONDUIT_SIZES = ("1/2", "3/4", "1", "1-1/4", "1-1/2", "2", "2-1/2", "3", "3-1/2", "4")
_EMT_AREAS = (0.304, 0.533, 0.864, 1.496, 2.036, 3.356, 5.858, 8.846, 11.545, 14.753)
NEC_CONDUIT_AREAS = {
    "EMT": _EMT_AREAS,
    "PVC": (0.285, 0.508, 0.832, 1.453, 1.986, 3.291, 5.793, 8.688, 11.427, 14.519),
    "Steel": _EMT_AREAS,
    "IMC": (0.342, 0.586, 0.959, 1.647, 2.225, 3.630, 6.135, 9.180, 11.990, 15.279),
    "RMC": _EMT_AREAS,
}

# Relative conduit cost, 1/2" EMT = 1.0
_SIZE_COST = (1.0, 1.3, 1.8, 2.5, 3.2, 4.5, 6.8, 9.5, 12.0, 15.0)
_TYPE_COST = {"EMT": 1.0, "PVC": 0.6, "Steel": 1.4, "IMC": 1.2, "RMC": 1.8}

NEC_CONDUITS = tuple(
    ConduitSpec(size=size, internal_area=area, conduit_type=ctype, standard="NEC",
                cost_factor=round(cost * _TYPE_COST[ctype], 2))
    for ctype, areas in NEC_CONDUIT_AREAS.items()
    for size, area, cost in zip(NEC_CONDUIT_SIZES, areas, _SIZE_COST)
)

# UL listing per conduit type
CONDUIT_LISTINGS = {"EMT": "UL 797", "PVC": "UL 651", "Steel": "UL 6", "IMC": "UL 1242", "RMC": "UL 6"}

# Fill application requirements: (min C, max C, references)
FILL_APPLICATIONS = {
    "residential": (10, 40, ("NEC 210", "NEC 250", "NEC 314", "NEC 300")),
    "commercial": (0, 50, ("NEC 215", "NEC 314", "NEC 408", "NEC 700", "NEC 760")),
    "industrial": (-20, 70, ("NEC 430", "NEC 501-506", "NEMA 250", "IEEE 3007")),
    "hazardous": (-40, 85, ("NEC 500-516", "API RP 500", "NFPA 497", "IEC 60079")),
    "data_center": (18, 25, ("NEC 645", "TIA-942", "ISO/IEC 24764")),
    "healthcare": (20, 26, ("NEC 517", "NFPA 99", "IEC 60601")),
    "educational": (18, 24, ("NEC 210", "NEC 700", "ASHRAE 90.1")),
    "outdoor": (-30, 50, ("NEC 110.11", "NEMA 250", "UL 508A")),
    "underground": (0, 30, ("NEC 300.5", "IEEE 516", "NECA 230")),
    "marine": (-10, 40, ("NEC 555", "ABYC E-11", "UL 1059")),
}

FILL_INSTALLATION_FACTORS = {
    "indoor": InstallationFactor(1.0, 1.0, "NEC 300"),
    "outdoor": InstallationFactor(1.1, 1.15, "NEC 300.6"),
    "underground": InstallationFactor(1.0, 1.0, "NEC 300.5"),
    "hazardous": InstallationFactor(1.05, 1.2, "NEC 501"),
    "wet_location": InstallationFactor(1.0, 1.1, "NEC 300.9"),
    "concrete_slab": InstallationFactor(0.95, 1.0, "NEC 300.5"),
    "overhead": InstallationFactor(1.1, 1.2, "NEC 225"),
    "dry_location": InstallationFactor(1.0, 1.0, "NEC 300"),
    "cable_tray": InstallationFactor(1.0, 1.05, "NEC 392"),
    "free_air": InstallationFactor(1.0, 1.0, "NEC 310.17"),
}
