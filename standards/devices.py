from core.models import ProtectiveDeviceSpec

AUTO = "automotive"
MARINE = "marine"
SOLAR = "solar"
TELECOM = "telecom"
BATTERY = "battery"
LED = "led"
INDUSTRIAL = "industrial"

def _devices(standard, device_type, rows, **common):
    return tuple(
        ProtectiveDeviceSpec(rating=rating, device_type=device_type, standard=standard,
                             voltage_rating=voltage, applications=frozenset(apps),
                             interrupting_capacity=icu, **common)
        for rating, voltage, apps, icu in rows
    )


# --- NEC family ---

# UL 489 DC thermal-magnetic breakers
# Format: (Rating_A, Max_VDC, Applications, Interrupting_A)
UL489_DC = _devices("UL489", "thermal-magnetic", (
    (1, 80, (AUTO, LED), 10000),
    (5, 80, (AUTO, MARINE, LED), 10000),
    (10, 80, (AUTO, MARINE, TELECOM, LED), 10000),
    (15, 80, (AUTO, MARINE, TELECOM), 10000),
    (20, 125, (AUTO, MARINE, SOLAR, TELECOM), 15000),
    (25, 125, (AUTO, MARINE, SOLAR, BATTERY), 15000),
    (30, 125, (AUTO, MARINE, SOLAR, BATTERY), 15000),
    (32, 125, (SOLAR, BATTERY, INDUSTRIAL), 20000),
    (35, 125, (AUTO, MARINE, SOLAR, BATTERY), 20000),
    (40, 125, (MARINE, SOLAR, BATTERY, INDUSTRIAL), 20000),
    (45, 125, (AUTO, MARINE, SOLAR, BATTERY), 20000),
    (50, 125, (MARINE, SOLAR, BATTERY, INDUSTRIAL), 20000),
    (60, 125, (SOLAR, BATTERY, INDUSTRIAL), 25000),
    (80, 125, (SOLAR, BATTERY, INDUSTRIAL), 25000),
    (100, 125, (SOLAR, BATTERY, INDUSTRIAL), 25000),
    (125, 125, (AUTO, MARINE, SOLAR, BATTERY, INDUSTRIAL), 35000),
    (150, 125, (AUTO, MARINE, SOLAR, BATTERY, INDUSTRIAL), 35000),
    (200, 125, (AUTO, SOLAR, BATTERY, INDUSTRIAL), 42000),
    (225, 125, (AUTO, SOLAR, BATTERY, INDUSTRIAL), 42000),
), temp_min=-25, temp_max=80)

# ABYC E-11 marine DC panel breakers
ABYC_DC = _devices("ABYC", "thermal-magnetic", (
    (15, 50, (MARINE,), 5000),
    (20, 50, (MARINE,), 5000),
    (30, 50, (MARINE,), 10000),
), temp_min=-25, temp_max=80)

# SAE J553 automotive circuit breakers
SAE_DC = _devices("SAE", "thermal-magnetic", (
    (7.5, 32, (AUTO,), 1000),
    (10, 32, (AUTO,), 1000),
    (15, 32, (AUTO,), 1000),
    (20, 32, (AUTO,), 2000),
    (25, 32, (AUTO,), 2000),
    (30, 32, (AUTO,), 2000),
), temp_min=-40, temp_max=125)

# NEC 240.6(A) standard AC ratings, UL 489 molded case
NEC_AC_RATINGS = [15, 20, 25, 30, 35, 40, 45, 50, 60, 70, 80, 90, 100, 110, 125, 150,
                  175, 200, 225, 250, 300, 350, 400, 500, 600, 800, 1000, 1200]
UL489_AC = _devices("UL489", "molded-case", tuple(
    (rating, 600, ("residential", "commercial", "industrial"), 10000 if rating <= 100 else 25000)
    for rating in NEC_AC_RATINGS
), temp_min=-25, temp_max=40, current_type="ac")

# ISO 8820-3 blade fuses: (Rating_A, Applications, Color)
FUSE_VOLTAGES = (12, 24, 32, 48)


def _fuses(device_type, rows):
    return tuple(
        ProtectiveDeviceSpec(rating=rating, device_type=device_type, standard="ISO 8820-3",
                             voltage_rating=58, applications=frozenset(apps),
                             temp_min=-40, temp_max=85, interrupting_capacity=1000,
                             voltages=FUSE_VOLTAGES, color=color)
        for rating, apps, color in rows
    )


ISO8820_FUSES = (
    _fuses("regular", (
        (0.5, (AUTO, LED), "black"),
        (1, (AUTO, LED), "black"),
        (2, (AUTO, LED), "grey"),
        (3, (AUTO, LED), "violet"),
        (5, (AUTO, LED), "tan"),
        (7.5, (AUTO, LED), "brown"),
        (10, (AUTO, MARINE, LED), "red"),
        (15, (AUTO, MARINE, LED), "blue"),
        (20, (AUTO, MARINE), "yellow"),
        (25, (AUTO, MARINE), "white"),
        (30, (AUTO, MARINE), "green"),
        (35, (AUTO, MARINE), "light green"),
        (40, (AUTO, MARINE), "orange"),
    ))
    + _fuses("mini", (
        (2, (AUTO, LED), "grey"),
        (5, (AUTO, LED), "tan"),
        (10, (AUTO, LED), "red"),
        (15, (AUTO, LED), "blue"),
        (20, (AUTO,), "yellow"),
        (25, (AUTO,), "white"),
        (30, (AUTO,), "green"),
    ))
    + _fuses("maxi", (
        (20, (AUTO, MARINE, INDUSTRIAL), "yellow"),
        (30, (AUTO, MARINE, INDUSTRIAL), "green"),
        (40, (AUTO, MARINE, INDUSTRIAL), "orange"),
        (50, (AUTO, MARINE, INDUSTRIAL), "red"),
        (60, (AUTO, MARINE, INDUSTRIAL), "blue"),
        (70, (AUTO, MARINE, INDUSTRIAL), "tan"),
        (80, (AUTO, MARINE, INDUSTRIAL), "clear"),
        (100, (AUTO, MARINE, INDUSTRIAL), "violet"),
        (120, (AUTO, MARINE, INDUSTRIAL), "grey"),
    ))
    + _fuses("micro2", (
        (5, (AUTO, LED), "tan"),
        (10, (AUTO, LED), "red"),
        (15, (AUTO, LED), "blue"),
        (20, (AUTO,), "yellow"),
        (25, (AUTO,), "white"),
        (30, (AUTO,), "green"),
    ))
)

NEC_BREAKERS = UL489_DC + ABYC_DC + SAE_DC + UL489_AC

# --- IEC family ---

IEC60947_DC = _devices("IEC60947", "thermal-magnetic", (
    (6, 250, (AUTO, MARINE, TELECOM, LED), 10000),
    (10, 250, (AUTO, MARINE, TELECOM, LED), 10000),
    (16, 250, (AUTO, MARINE, SOLAR, BATTERY), 15000),
    (20, 250, (MARINE, SOLAR, BATTERY, INDUSTRIAL), 15000),
    (25, 250, (AUTO, MARINE, SOLAR, BATTERY, INDUSTRIAL), 15000),
    (32, 250, (AUTO, MARINE, SOLAR, BATTERY, INDUSTRIAL), 20000),
    (35, 250, (AUTO, MARINE, SOLAR, BATTERY), 20000),
    (40, 250, (SOLAR, BATTERY, INDUSTRIAL), 20000),
    (50, 250, (MARINE, SOLAR, BATTERY, INDUSTRIAL), 25000),
    (63, 250, (AUTO, SOLAR, BATTERY, INDUSTRIAL), 25000),
    (80, 250, (MARINE, SOLAR, BATTERY, INDUSTRIAL), 25000),
    (100, 250, (SOLAR, BATTERY, INDUSTRIAL), 35000),
    (125, 250, (MARINE, SOLAR, BATTERY, INDUSTRIAL), 35000),
    (150, 250, (MARINE, SOLAR, BATTERY, INDUSTRIAL), 50000),
    (160, 250, (MARINE, SOLAR, BATTERY, INDUSTRIAL), 50000),
    (200, 250, (SOLAR, BATTERY, INDUSTRIAL), 50000),
), temp_min=-25, temp_max=85)

# IEC 62619 battery disconnects with thermal runaway detection
IEC62619_DC = _devices("IEC62619", "electronic", (
    (16, 120, (BATTERY,), 15000),
    (25, 120, (BATTERY,), 20000),
    (32, 120, (BATTERY,), 20000),
    (50, 120, (BATTERY,), 25000),
    (60, 120, (BATTERY,), 30000),
    (63, 120, (BATTERY,), 25000),
    (80, 120, (BATTERY,), 30000),
    (90, 120, (BATTERY,), 35000),
    (100, 120, (BATTERY,), 35000),
), temp_min=-20, temp_max=60, thermal_runaway_protection=True)

# IEC 60898-1 miniature breakers, DC up to 48V
IEC60898_1_DC = _devices("IEC60898-1", "thermal-magnetic", (
    (1, 48, (AUTO, LED), 6000),
    (2, 48, (AUTO, LED), 6000),
    (6, 48, (AUTO, MARINE, TELECOM, LED), 6000),
    (10, 48, (AUTO, MARINE, TELECOM, LED), 6000),
    (15, 48, (AUTO, MARINE, TELECOM), 6000),
    (16, 48, (AUTO, MARINE, TELECOM, BATTERY), 6000),
    (20, 48, (AUTO, MARINE, SOLAR), 10000),
    (25, 48, (AUTO, MARINE, SOLAR, BATTERY), 10000),
    (30, 48, (AUTO, MARINE, SOLAR, BATTERY), 10000),
    (32, 48, (AUTO, MARINE, SOLAR, BATTERY), 10000),
), temp_min=-25, temp_max=85)

# IEC 60898-3 DC miniature breakers above 48V
IEC60898_3_DC = _devices("IEC60898-3", "thermal-magnetic", (
    (6, 440, (SOLAR, INDUSTRIAL), 10000),
    (10, 440, (SOLAR, INDUSTRIAL), 10000),
    (16, 440, (SOLAR, BATTERY, INDUSTRIAL), 10000),
    (20, 440, (SOLAR, BATTERY, INDUSTRIAL), 15000),
    (25, 440, (SOLAR, BATTERY, INDUSTRIAL), 15000),
    (30, 440, (MARINE, SOLAR, BATTERY, INDUSTRIAL), 15000),
    (32, 440, (SOLAR, BATTERY, INDUSTRIAL), 15000),
    (40, 440, (SOLAR, BATTERY, INDUSTRIAL), 20000),
    (50, 440, (SOLAR, BATTERY, INDUSTRIAL), 20000),
    (63, 440, (SOLAR, BATTERY, INDUSTRIAL), 25000),
), temp_min=-25, temp_max=85)

# IEC 60898-1 MCB up to 125A, IEC 60947-2 MCCB above
IEC_AC_RATINGS = [6, 10, 16, 20, 25, 32, 40, 50, 63, 80, 100, 125, 160, 250, 400, 630]
IEC_AC = tuple(
    ProtectiveDeviceSpec(
        rating=rating, device_type="mcb" if rating <= 125 else "mccb",
        standard="IEC60898-1" if rating <= 125 else "IEC60947-2", voltage_rating=415,
        applications=frozenset(("residential", "commercial", "industrial")),
        temp_min=-25, temp_max=40, interrupting_capacity=6000 if rating <= 125 else 36000,
        current_type="ac",
    )
    for rating in IEC_AC_RATINGS
)

IEC_BREAKERS = IEC60947_DC + IEC62619_DC + IEC60898_1_DC + IEC60898_3_DC + IEC_AC

# --- Simplified wire ampacity maps for the compatibility check ---

# NEC 310.16 copper, 75C column
NEC_WIRE_AMPACITY = {
    "14": 20, "12": 25, "10": 35, "8": 50, "6": 65, "4": 85, "2": 115, "1": 130,
    "1/0": 150, "2/0": 175, "3/0": 200, "4/0": 230,
}
IEC_WIRE_AMPACITY = {
    "1.5": 18, "2.5": 25, "4": 35, "6": 45, "10": 65, "16": 85, "25": 115, "35": 130,
    "50": 155, "70": 195, "95": 230, "120": 270, "150": 310, "185": 355, "240": 415,
    "300": 480,
}
AUTOMOTIVE_WIRE_AMPACITY = {
    "20": 11, "18": 16, "16": 22, "14": 32, "12": 41, "10": 55, "8": 73, "6": 101,
    "4": 135, "2": 181, "1": 211, "1/0": 245, "2/0": 283, "3/0": 328, "4/0": 380,
}

# --- Device factor chain rules ---

# Ambient above which breakers are derated, per family (C)
DERATING_BASELINE = {"NEC": 40, "IEC": 25}
FUSE_DERATING_BASELINE = 40

# IEC 60947-2 Annex B thermal derating, 25C calibration
IEC_DEVICE_DERATING = {25: 1.0, 30: 0.94, 35: 0.87, 40: 0.82, 45: 0.76, 50: 0.71,
                       55: 0.65, 60: 0.58, 65: 0.50, 70: 0.41, 75: 0.29}

# Format: {environment: (Factor, Reference)}
ENVIRONMENT_FACTORS = {
    "marine": (1.05, "ABYC E-11"),
    "automotive": (1.05, "SAE J1128"),
    "engine_room": (1.08, "ABYC E-11 engine space"),
    "hazardous": (1.2, "NEC 500"),
}

SOLAR_SHORT_CIRCUIT = {"NEC": (1.25, "NEC 690.8(B)"), "IEC": (1.1, "IEC 62548-1")}
NEC_BATTERY_CONTINUOUS = (1.1, "NEC 480.4")
# IEC 62619 thermal runaway margin: (continuous, intermittent)
IEC_BATTERY_THERMAL_RUNAWAY = (1.2, 1.1)

# Upper bound on rating / adjusted current for standard compliance
OVERSIZE_LIMITS = {
    "NEC": {MARINE: 1.5, AUTO: 1.3, TELECOM: 1.2},
    "IEC": {MARINE: 1.4, AUTO: 1.25, TELECOM: 1.2, LED: 1.3},
}

# Fuse family thresholds (A)
FUSE_APPLICATIONS = (AUTO, MARINE, LED)
MICRO_FUSE_MAX = 10
REGULAR_FUSE_MAX = 40
MAXI_FUSE_MAX = 120
