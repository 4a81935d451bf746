import unittest
from core.errors import UnsupportedStandardError
from core.models import StandardId
from standards import bs7671_tables, dc_tables, iec_tables, nec_tables
from standards.catalog import STANDARDS, get_standard, parse_standard
from standards.devices import IEC_BREAKERS, ISO8820_FUSES, NEC_BREAKERS

def non_increasing(table):
    values = [table[k] for k in sorted(table)]
    return all(a >= b for a, b in zip(values, values[1:]))

class TestCatalogInvariants(unittest.TestCase):

    def test_conductor_tables_ordered(self):
        for std in (StandardId.NEC, StandardId.IEC, StandardId.BS7671):
            table = STANDARDS[std].conductors
            for rating in STANDARDS[std].rules.temperature_ratings:
                amps = [c.ampacity[rating] for c in table]
                self.assertEqual(amps, sorted(amps), f"{std.value} {rating}C")
            self.assertTrue(all(c.resistance > 0 for c in table))

    def test_dc_tables_ordered(self):
        for application, table in dc_tables.DC_WIRE_TABLES.items():
            rating = table[0].temperature_rating
            cont = [c.ampacity[rating] for c in table]
            self.assertEqual(cont, sorted(cont), application)
            self.assertTrue(all(c > 0 for c in cont))
            self.assertTrue(all(c.intermittent_ampacity >= c.ampacity[rating] for c in table))

    def test_conduit_areas_increase(self):
        for areas in list(nec_tables.NEC_CONDUIT_AREAS.values()) + list(iec_tables.IEC_CONDUIT_AREAS.values()):
            self.assertTrue(all(a < b for a, b in zip(areas, areas[1:])))

    def test_correction_tables_non_increasing(self):
        for module in (nec_tables, iec_tables, bs7671_tables):
            for table in module.TEMP_CORRECTION_FACTORS.values():
                self.assertTrue(non_increasing(table))
            self.assertTrue(non_increasing(module.GROUPING_FACTORS))
        for table in dc_tables.DC_TEMP_CORRECTION_FACTORS.values():
            self.assertTrue(non_increasing(table))

    def test_installation_factors_positive(self):
        for module in (nec_tables, iec_tables, bs7671_tables, dc_tables):
            self.assertTrue(all(f.temperature_factor > 0 for f in module.INSTALLATION_FACTORS.values()))

    def test_profile_safety_factors(self):
        for std in STANDARDS.values():
            for profile in std.profiles.values():
                self.assertGreaterEqual(profile.continuous_factor, profile.intermittent_factor, profile.name)
                self.assertGreaterEqual(profile.intermittent_factor, 1.0, profile.name)

    def test_every_application_has_a_profile(self):
        for std in STANDARDS.values():
            for application in std.applications:
                self.assertIn(application, std.profiles)

    def test_device_ratings_positive(self):
        for d in NEC_BREAKERS + IEC_BREAKERS + ISO8820_FUSES:
            self.assertGreater(d.rating, 0)
            self.assertGreater(d.voltage_rating, 0)
            self.assertLess(d.temp_min, d.temp_max)

class TestStandardsMetadata(unittest.TestCase):

    def test_dc_limits(self):
        info = STANDARDS[StandardId.DC_TELECOM].info
        self.assertEqual((info.voltage_drop_branch, info.voltage_drop_feeder, info.voltage_drop_total),
                         (1.0, 0.5, 2.0))
        self.assertEqual(STANDARDS[StandardId.DC_AUTOMOTIVE].info.full_name,
                         "DC Automotive Systems (ISO 6722)")
        self.assertEqual(STANDARDS[StandardId.DC_MARINE].info.dc_voltages, (12, 24, 48))

    def test_length_units(self):
        self.assertEqual(get_standard("NEC").info.length_unit, "ft")
        self.assertEqual(get_standard("IEC").info.length_unit, "m")
        self.assertEqual(get_standard("DC_SOLAR").info.length_unit, "ft")

    def test_catalog_resolution(self):
        self.assertIs(get_standard("BS7671").fill, get_standard("IEC").fill)
        self.assertIs(get_standard("DC_MARINE").fill, get_standard("NEC").fill)
        self.assertEqual(get_standard("BS7671").family, "IEC")
        self.assertEqual(get_standard("DC_SOLAR").family, "NEC")
        self.assertEqual(get_standard("DC_SOLAR").applications, frozenset(("solar", "battery")))

    def test_unknown_standard(self):
        with self.assertRaises(UnsupportedStandardError):
            parse_standard("AS/NZS 3000")

if __name__ == '__main__':
    unittest.main()
