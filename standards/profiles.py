from core.models import ApplicationProfile

# Format: name, VD normal %, VD critical %, SF continuous, SF intermittent,
#         (V min, V max), (T min C, T max C), references, default efficiency
_NEC_DC = (
    ("automotive", 2.0, 1.0, 1.25, 1.15, (12, 48), (-40, 125), ("SAE J1128", "ISO 8820-3"), 0.98),
    ("marine", 3.0, 2.0, 1.30, 1.20, (12, 48), (-20, 80), ("ABYC E-11", "ABYC E-13"), 0.97),
    ("solar", 2.0, 1.0, 1.25, 1.0, (12, 1000), (-40, 90), ("NEC 690.8(A)", "UL 4703"), 0.95),
    ("telecom", 1.0, 0.5, 1.15, 1.10, (12, 60), (0, 50), ("NECA/BICSI 568", "GR-1089"), 0.99),
    ("battery", 1.5, 1.0, 1.40, 1.25, (12, 400), (-20, 60), ("UL 1973", "UL 9540A"), 0.93),
    ("led", 3.0, 2.0, 1.20, 1.15, (12, 48), (-10, 70), ("UL 8750", "NEC 411"), 0.90),
    ("industrial", 3.0, 2.0, 1.25, 1.15, (24, 600), (-20, 70), ("NEC 430",), 0.96),
)

_IEC_DC = (
    ("automotive", 2.0, 1.0, 1.25, 1.15, (12, 48), (-40, 125), ("IEC 60364-7-722", "ISO 8820-3"), 0.98),
    ("marine", 3.0, 2.0, 1.30, 1.20, (12, 48), (-20, 80), ("IEC 60364-7-709", "IEC 60092"), 0.97),
    ("solar", 2.0, 1.0, 1.25, 1.0, (12, 1000), (-40, 90), ("IEC 62548-1:2023", "IEC 60364-7-712"), 0.95),
    ("telecom", 1.0, 0.5, 1.15, 1.10, (12, 60), (0, 50), ("IEC 60364-7-711", "ETSI EN 300 132-2"), 0.99),
    ("battery", 1.5, 1.0, 1.40, 1.25, (12, 400), (-20, 60), ("IEC 62619:2022", "IEC 62485-2"), 0.93),
    ("led", 3.0, 2.0, 1.20, 1.15, (12, 48), (-10, 70), ("IEC 60364-7-715", "IEC 61347"), 0.90),
    ("industrial", 3.0, 2.0, 1.25, 1.15, (24, 600), (-20, 70), ("IEC 60364-4-43",), 0.96),
)


def _ac_profiles(normal, critical, continuous, references):
    return (
        ("residential", normal, critical, continuous, 1.0, (100, 250), (-40, 90), references, 1.0),
        ("commercial", normal, critical, continuous, 1.0, (100, 600), (-40, 90), references, 1.0),
        ("industrial", normal, critical, continuous, 1.0, (100, 1000), (-40, 90), references, 1.0),
    )


def _profiles(rows):
    return {row[0]: ApplicationProfile(*row) for row in rows}


# NEC 210.19(A)(1): conductors and OCPD at 125% of continuous load
NEC_AC_PROFILES = _profiles(_ac_profiles(3.0, 1.0, 1.25, ("NEC 210.19(A)(1)", "NEC 215.2")))
# IEC and BS 7671 size on design current Ib directly
IEC_AC_PROFILES = _profiles(_ac_profiles(4.0, 2.0, 1.0, ("IEC 60364-5-52", "IEC 60364-4-43")))
BS7671_AC_PROFILES = _profiles(_ac_profiles(4.0, 2.0, 1.0, ("BS 7671:2018+A2:2022 Appendix 4",)))

NEC_DC_PROFILES = _profiles(_NEC_DC)
IEC_DC_PROFILES = _profiles(_IEC_DC)

# ISO 8820-3 automotive voltage systems: (efficiency, SF continuous, SF intermittent)
AUTOMOTIVE_VOLTAGE_SYSTEMS = {
    12: (0.85, 1.25, 1.15),
    24: (0.90, 1.30, 1.20),
    32: (0.92, 1.25, 1.15),
    48: (0.95, 1.20, 1.10),
}
