import unittest
from core.errors import ValidationError
from core.router import route
from standards.conduit_fill import max_fill_percent

def fill(standard, wires, **kw):
    raw = {"kind": "conduit_fill", "wires": wires}
    raw.update(kw)
    return route(standard, raw)

class TestConduitFill(unittest.TestCase):

    def test_fill_tiers(self):
        self.assertEqual(max_fill_percent(1)[0], 53.0)
        self.assertEqual(max_fill_percent(2)[0], 31.0)
        self.assertEqual(max_fill_percent(3)[0], 40.0)
        self.assertEqual(max_fill_percent(25)[0], 40.0)

    def test_three_conductors_in_emt(self):
        print("\n--- TEST: 3 x 12 AWG THHN en EMT ---")
        # 3 * 0.0133 = 0.0399 in2 <= 0.304 * 40% = 0.1216
        res = fill("NEC", [{"gauge": "12", "quantity": 3, "insulation": "THHN"}], conduit_type="EMT")
        print(f"Conduit: {res.conduit_size} | Fill: {res.fill_percent:.2f}%")
        self.assertEqual(res.conduit_size, "1/2")
        self.assertEqual(res.max_fill_percent, 40.0)
        self.assertAlmostEqual(res.fill_percent, 13.125, delta=0.01)
        self.assertTrue(res.compliance.fill_compliant)
        self.assertEqual(len(res.alternatives), 10)

    def test_single_and_pair_tiers_change_selection(self):
        # 1 x 4/0: 0.4202 <= 0.864 * 53% -> 1"
        one = fill("NEC", [{"gauge": "4/0", "quantity": 1, "insulation": "THHN"}], conduit_type="EMT")
        self.assertEqual(one.conduit_size, "1")
        self.assertEqual(one.max_fill_percent, 53.0)
        # 2 x 4/0: 0.8404 / 31% = 2.711 -> 2" (3.356)
        two = fill("NEC", [{"gauge": "4/0", "quantity": 2, "insulation": "THHN"}], conduit_type="EMT")
        self.assertEqual(two.conduit_size, "2")
        self.assertEqual(two.max_fill_percent, 31.0)

    def test_overflow_returns_largest(self):
        res = fill("NEC", [{"gauge": "1000", "quantity": 40, "insulation": "THHN"}], conduit_type="EMT")
        self.assertEqual(res.conduit_size, "4")
        self.assertFalse(res.compliance.fill_compliant)
        self.assertFalse(res.compliance.code_compliant)
        self.assertLess(res.available_area, 0)
        self.assertTrue(res.metadata.warnings)

    def test_specific_size(self):
        res = fill("NEC", [{"gauge": "12", "quantity": 3, "insulation": "THHN"}],
                   conduit_type="EMT", conduit_size="3/4")
        self.assertEqual(res.conduit_size, "3/4")
        self.assertEqual(res.alternatives, [])
        with self.assertRaises(ValidationError) as ctx:
            fill("NEC", [{"gauge": "12", "quantity": 3, "insulation": "THHN"}],
                 conduit_type="EMT", conduit_size="7")
        self.assertIn("conduit_size", ctx.exception.fields)

    def test_future_reserve(self):
        # 0.0399 * 1.25 = 0.0499
        res = fill("NEC", [{"gauge": "12", "quantity": 3, "insulation": "THHN"}],
                   conduit_type="EMT", future_fill_reserve=25)
        self.assertAlmostEqual(res.total_wire_area, 0.0499, delta=0.0001)

    def test_wire_count_override(self):
        res = fill("NEC", [{"gauge": "12", "quantity": 3, "insulation": "THHN"}],
                   conduit_type="EMT", wire_count_override=2)
        self.assertEqual(res.max_fill_percent, 31.0)

    def test_breakdown_shares(self):
        res = fill("NEC", [{"gauge": "12", "quantity": 2, "insulation": "THHN"},
                           {"gauge": "10", "quantity": 1, "insulation": "THHN"}], conduit_type="PVC")
        self.assertEqual(len(res.wire_breakdown), 2)
        self.assertAlmostEqual(sum(w.percentage for w in res.wire_breakdown), 100.0, delta=0.02)
        self.assertAlmostEqual(res.wire_breakdown[0].total_area, 0.0266, delta=0.0001)

    def test_iec_and_bs7671_share_metric_tables(self):
        # 3 x 8.96 = 26.88 mm2 <= 86.6 * 40% = 34.64
        wires = [{"gauge": "2.5", "quantity": 3, "insulation": "PVC"}]
        iec = fill("IEC", wires, conduit_type="PVC")
        bs = fill("BS7671", wires, conduit_type="PVC")
        self.assertEqual(iec.conduit_size, "16")
        self.assertEqual(bs.conduit_size, "16")
        self.assertEqual(iec.fill_percent, bs.fill_percent)

    def test_application_temperature_range(self):
        res = fill("NEC", [{"gauge": "12", "quantity": 3, "insulation": "THHN"}],
                   conduit_type="EMT", application="data_center", ambient_temperature=30)
        self.assertTrue(res.compliance.fill_compliant)
        self.assertFalse(res.compliance.temperature_compliant)
        self.assertFalse(res.compliance.code_compliant)

    def test_invalid_wires_reported_together(self):
        with self.assertRaises(ValidationError) as ctx:
            fill("NEC", [{"gauge": "13", "quantity": 3, "insulation": "XYZ"}], conduit_type="EMT")
        self.assertEqual(len(ctx.exception.errors), 2)

    def test_missing_wire_area_batched_with_other_errors(self):
        # XLPE has no 0.75 mm2 row
        with self.assertRaises(ValidationError) as ctx:
            fill("IEC", [{"gauge": "0.75", "quantity": 3, "insulation": "XLPE"}],
                 conduit_type="PVC", application="bogus")
        print(ctx.exception.errors)
        self.assertEqual(len(ctx.exception.errors), 2)
        self.assertEqual(sorted(ctx.exception.fields), ["application", "wires"])

    def test_idempotent(self):
        wires = [{"gauge": "6", "quantity": 4, "insulation": "THWN"}]
        self.assertEqual(fill("NEC", wires, conduit_type="IMC"), fill("NEC", wires, conduit_type="IMC"))

if __name__ == '__main__':
    unittest.main()
