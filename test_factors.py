import unittest
from core.errors import UnknownInstallationMethodError
from core.factors import (
    apply_chain, compose, describe_chain, device_chain, device_temperature_derating,
    grouping_factor, temperature_factor,
)
from core.models import DutyCycle
from standards import nec_tables
from standards.profiles import IEC_DC_PROFILES, NEC_DC_PROFILES

class TestCorrectionFactors(unittest.TestCase):

    def test_temperature_rungs(self):
        table = nec_tables.TEMP_CORRECTION_FACTORS[75]
        self.assertEqual(temperature_factor(table, 30), 1.0)
        # 31C falls in the 35C rung
        self.assertEqual(temperature_factor(table, 31), 0.96)
        self.assertEqual(temperature_factor(table, 10), 1.05)
        # Above the table: most conservative value, no extrapolation
        self.assertEqual(temperature_factor(table, 95), 0.41)

    def test_grouping(self):
        table = nec_tables.GROUPING_FACTORS
        self.assertEqual(grouping_factor(table, 3), 1.0)
        self.assertEqual(grouping_factor(table, 4), 0.80)
        self.assertEqual(grouping_factor(table, 9), 0.70)
        self.assertEqual(grouping_factor(table, 200), 0.45)

    def test_compose_nec(self):
        f = compose("NEC", 40.0, 6, "conduit", "commercial", "continuous", 90)
        # 0.95 (90C @ 40C) * 0.80 (4-6 conductors) * 1.0
        self.assertAlmostEqual(f.ampacity_multiplier, 0.76, delta=0.0001)
        self.assertEqual(f.safety, 1.25)
        self.assertEqual([s.name for s in f.steps][:3],
                         ["Temperature correction", "Grouping adjustment", "Installation method"])

    def test_environment_factor_tracked_separately(self):
        f = compose("NEC", 30.0, 3, "cable_tray", "commercial", "continuous", 75)
        self.assertEqual(f.environment, 1.05)
        self.assertEqual(f.ampacity_multiplier, 1.0)

    def test_compose_is_memoized(self):
        a = compose("IEC", 35.0, 2, "C", "residential", "intermittent", 70)
        b = compose("IEC", 35.0, 2, "C", "residential", "intermittent", 70)
        self.assertIs(a, b)

    def test_unknown_method(self):
        with self.assertRaises(UnknownInstallationMethodError):
            compose("NEC", 30.0, 3, "A1", "commercial", "continuous", 75)

    def test_device_derating(self):
        self.assertEqual(device_temperature_derating("NEC", 35), (1.0, 40))
        self.assertAlmostEqual(device_temperature_derating("NEC", 50)[0], 0.90, delta=1e-9)
        self.assertEqual(device_temperature_derating("NEC", 120)[0], 0.58)
        self.assertEqual(device_temperature_derating("IEC", 40), (0.82, 25))
        self.assertEqual(device_temperature_derating("IEC", 90)[0], 0.29)
        self.assertAlmostEqual(device_temperature_derating("NEC", 60, fuse_path=True)[0], 0.90, delta=1e-9)

    def test_chain_order(self):
        print("\n--- TEST: Cadena de factores (batería IEC, sala de máquinas, 45C) ---")
        steps = device_chain("IEC", IEC_DC_PROFILES["battery"], DutyCycle.CONTINUOUS, 45, "engine_room")
        print(describe_chain(10, steps))
        self.assertEqual([s.name for s in steps], ["Application safety factor", "Temperature derating",
                                                   "Environment factor", "Battery thermal runaway"])
        # 10 * 1.40 / 0.76 * 1.08 * 1.2
        self.assertAlmostEqual(apply_chain(10, steps), 10 * 1.40 / 0.76 * 1.08 * 1.2, delta=1e-9)

    def test_nec_battery_intermittent_has_no_addendum(self):
        steps = device_chain("NEC", NEC_DC_PROFILES["battery"], DutyCycle.INTERMITTENT, 25, "indoor")
        self.assertEqual(len(steps), 1)
        self.assertEqual(steps[0].value, 1.25)

if __name__ == '__main__':
    unittest.main()
