import os
import tempfile
import unittest
from core.errors import UnknownInstallationMethodError, UnsupportedStandardError, ValidationError
from core.models import ConductorResult, DeviceResult, FillResult
from core.router import route
from core.settings import Settings, load_settings

class TestRouter(unittest.TestCase):

    def test_unknown_standard(self):
        with self.assertRaises(UnsupportedStandardError) as ctx:
            route("JIS", {"kind": "conductor", "current": 10, "length": 10, "voltage": 120})
        self.assertEqual(ctx.exception.field, "standard")

    def test_standard_id_is_case_insensitive(self):
        res = route("nec", {"kind": "conductor", "current": 10, "length": 10, "voltage": 120})
        self.assertIsInstance(res, ConductorResult)

    def test_dispatch_by_kind(self):
        self.assertIsInstance(route("NEC", {"kind": "conductor", "current": 10, "length": 10,
                                            "voltage": 120}), ConductorResult)
        self.assertIsInstance(route("NEC", {"kind": "conduit_fill", "conduit_type": "EMT",
                                            "wires": [{"gauge": "12", "quantity": 3}]}), FillResult)
        self.assertIsInstance(route("NEC", {"kind": "device", "current": 10, "voltage": 120}),
                              DeviceResult)

    def test_unknown_kind(self):
        with self.assertRaises(ValidationError) as ctx:
            route("NEC", {"kind": "transformer"})
        self.assertEqual(ctx.exception.fields, ["kind"])

    def test_errors_are_batched(self):
        print("\n--- TEST: Errores de validación agrupados ---")
        with self.assertRaises(ValidationError) as ctx:
            route("NEC", {"kind": "conductor", "current": -5, "length": "abc",
                          "application": "spaceship", "installation_method": "underwater"})
        for e in ctx.exception.errors:
            print(e)
        self.assertEqual(len(ctx.exception.errors), 5)
        for field in ("current", "length", "voltage", "application", "installation_method"):
            self.assertIn(field, ctx.exception.fields)

    def test_application_outside_dc_standard(self):
        with self.assertRaises(ValidationError) as ctx:
            route("DC_TELECOM", {"kind": "conductor", "current": 5, "length": 10, "voltage": 48,
                                 "application": "marine"})
        self.assertIn("application", ctx.exception.fields)

    def test_method_without_table(self):
        # "conduit" is a known method, but IEC only tabulates A1..G
        with self.assertRaises(UnknownInstallationMethodError) as ctx:
            route("IEC", {"kind": "conductor", "current": 10, "length": 10, "voltage": 230,
                          "installation_method": "conduit"})
        self.assertEqual(ctx.exception.field, "installation_method")

    def test_temperature_rating_vocabulary(self):
        with self.assertRaises(ValidationError) as ctx:
            route("IEC", {"kind": "conductor", "current": 10, "length": 10, "voltage": 230,
                          "temperature_rating": 60})
        self.assertIn("temperature_rating", ctx.exception.fields)

    def test_device_needs_current_or_power(self):
        with self.assertRaises(ValidationError) as ctx:
            route("DC_SOLAR", {"kind": "device", "voltage": 48})
        self.assertIn("current", ctx.exception.fields)

    def test_settings_fill_defaults(self):
        settings = Settings(ambient_temperature=40.0)
        res = route("NEC", {"kind": "conductor", "current": 10, "length": 10, "voltage": 120},
                    settings=settings)
        self.assertEqual(res.metadata.ambient_temperature, 40.0)
        # NEC 310.15(B)(1), 75C column at 40C
        self.assertAlmostEqual(res.factors.temperature, 0.91, delta=0.001)

class TestSettings(unittest.TestCase):

    def test_packaged_defaults(self):
        s = load_settings()
        self.assertEqual(s.conductor_count, 3)
        self.assertEqual(s.duty_cycle, "continuous")
        self.assertEqual(s.iec_installation_method, "B1")

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_settings("/nonexistent/defaults.yaml")

    def test_not_a_mapping(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "bad.yaml")
            with open(path, "w") as f:
                f.write("- 1\n- 2\n")
            with self.assertRaises(ValueError):
                load_settings(path)

if __name__ == '__main__':
    unittest.main()
