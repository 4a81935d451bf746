from typing import List, Optional


class SizingError(Exception):
    """Base class for every failure raised by the sizing engines."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class ValidationError(SizingError):
    """One or more request fields are malformed. All violations are reported together."""

    def __init__(self, errors: List[str], fields: Optional[List[str]] = None):
        super().__init__("Input validation failed: " + "; ".join(errors))
        self.errors = list(errors)
        self.fields = list(fields or [])


class UnsupportedStandardError(SizingError):
    def __init__(self, standard_id):
        super().__init__(
            f"Unsupported electrical standard: {standard_id}. "
            "Use NEC, IEC, BS7671, DC_AUTOMOTIVE, DC_MARINE, DC_SOLAR or DC_TELECOM",
            field="standard",
        )
        self.standard_id = standard_id


class UnknownInstallationMethodError(SizingError):
    def __init__(self, method: str, standard_id: str, known: List[str]):
        super().__init__(
            f"Installation method '{method}' has no {standard_id} correction table. "
            f"Known methods: {', '.join(known)}",
            field="installation_method",
        )
        self.method = method


class NoAmpacitySolutionError(SizingError):
    def __init__(self, required_ampacity: float, standard_id: str, largest: str):
        super().__init__(
            f"No {standard_id} conductor carries {required_ampacity:.1f}A after correction "
            f"(largest size {largest})",
            field="current",
        )
        self.required_ampacity = required_ampacity


class NoSuitableDeviceError(SizingError):
    def __init__(self, adjusted_current: float, application: str, voltage: float):
        super().__init__(
            f"No protective device rated for {adjusted_current:.1f}A "
            f"({application}, {voltage:g}V)",
            field="current",
        )
        self.adjusted_current = adjusted_current


class ExceedsFuseRangeError(SizingError):
    def __init__(self, adjusted_current: float, maximum: float):
        super().__init__(
            f"Adjusted current ({adjusted_current:.1f}A) exceeds automotive fuse range "
            f"({maximum:g}A max). Use circuit breaker instead.",
            field="current",
        )
        self.adjusted_current = adjusted_current
