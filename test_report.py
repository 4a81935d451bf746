import os
import tempfile
import unittest
from openpyxl import load_workbook
from core.converters import convert_length, convert_power, parse_quantity
from core.models import VoltageSystem
from core.report import alternatives_frame, export_to_excel
from core.router import route

class TestReport(unittest.TestCase):

    def setUp(self):
        self.conductor = route("NEC", {"kind": "conductor", "current": 20, "length": 100, "voltage": 120})
        self.fill = route("NEC", {"kind": "conduit_fill", "conduit_type": "EMT",
                                  "wires": [{"gauge": "12", "quantity": 3, "insulation": "THHN"}]})
        self.device = route("DC_AUTOMOTIVE", {"kind": "device", "current": 20, "voltage": 12})

    def test_conductor_frame(self):
        frame = alternatives_frame(self.conductor)
        self.assertEqual(len(frame), 1 + len(self.conductor.alternatives))
        self.assertTrue(frame["selected"].iloc[0])
        self.assertEqual(frame["size"].iloc[0], self.conductor.size)

    def test_fill_frame(self):
        frame = alternatives_frame(self.fill)
        self.assertEqual(int(frame["selected"].sum()), 1)
        self.assertIn("fill_percent", frame.columns)

    def test_device_frame(self):
        frame = alternatives_frame(self.device)
        self.assertEqual(list(frame["rating"].unique()), [25])
        self.assertEqual(frame["device_type"].iloc[0], "regular")

    def test_export(self):
        print("\n--- TEST: Exportar memoria a Excel ---")
        with tempfile.TemporaryDirectory() as tmp:
            path = export_to_excel([self.conductor, self.fill, self.device],
                                   os.path.join(tmp, "memoria.xlsx"))
            wb = load_workbook(path)
            print(wb.sheetnames)
            for name in ("Resumen", "Conductores", "Ductos", "Protecciones", "Normas Aplicadas"):
                self.assertIn(name, wb.sheetnames)
            self.assertEqual(wb["Conductores"]["B2"].value, "8")
            self.assertEqual(wb["Protecciones"]["B2"].value, 25)

class TestConverters(unittest.TestCase):

    def test_power_units(self):
        self.assertEqual(convert_power(2, "kW", 240, VoltageSystem.SINGLE_PHASE), (2000.0, None))
        self.assertEqual(convert_power(1, "HP", 240, VoltageSystem.SINGLE_PHASE), (746.0, None))
        watts, amps = convert_power(10, "A", 240, VoltageSystem.SINGLE_PHASE)
        self.assertEqual((watts, amps), (2400.0, 10))
        watts, _ = convert_power(10, "kVA", 400, VoltageSystem.THREE_PHASE, 0.8)
        self.assertAlmostEqual(watts, 8000.0, delta=0.001)
        with self.assertRaises(ValueError):
            convert_power(1, "BTU", 240, VoltageSystem.SINGLE_PHASE)

    def test_length_units(self):
        self.assertAlmostEqual(convert_length(100, "ft", "m"), 30.48, delta=0.001)
        self.assertAlmostEqual(convert_length(30.48, "metros", "ft"), 100.0, delta=0.001)
        self.assertAlmostEqual(convert_length(1, "yd", "ft"), 3.0, delta=0.001)

    def test_parse_quantity(self):
        self.assertEqual(parse_quantity("10 kW", "W"), (10.0, "kW"))
        self.assertEqual(parse_quantity("50", "m"), (50.0, "m"))
        with self.assertRaises(ValueError):
            parse_quantity("ten", "A")

if __name__ == '__main__':
    unittest.main()
