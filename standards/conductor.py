import logging
from typing import List

from core.calculator import SizingEngine, adjusted_resistance, power_loss, voltage_drop
from core.errors import NoAmpacitySolutionError
from core.factors import compose
from core.models import (
    CalculationKind, ConductorAlternative, ConductorCompliance, ConductorInput,
    ConductorResult, ConductorSpec, DutyCycle, VoltageSystem,
)

logger = logging.getLogger(__name__)

MAX_ALTERNATIVES = 5


class ConductorEngine(SizingEngine):
    """Smallest conductor meeting corrected ampacity, then the voltage drop limit."""

    kind = CalculationKind.CONDUCTOR

    def temperature_rating(self, request: ConductorInput, table) -> int:
        if self.standard.is_dc:
            return table[0].temperature_rating
        return request.temperature_rating or self.standard.rules.default_rating

    def voltage_drop_limit(self, request: ConductorInput, profile) -> float:
        if request.voltage_drop_override is not None:
            return request.voltage_drop_override
        if request.use_critical_limit:
            return profile.voltage_drop_critical
        return profile.voltage_drop_normal

    def base_ampacity(self, conductor: ConductorSpec, rating: int, duty: DutyCycle) -> float:
        if duty == DutyCycle.INTERMITTENT and conductor.intermittent_ampacity is not None:
            return conductor.intermittent_ampacity
        return conductor.ampacity[rating]

    def drop_for(self, request: ConductorInput, conductor: ConductorSpec) -> float:
        r = adjusted_resistance(conductor.resistance, request.conductor_material)
        return voltage_drop(request.current, request.length, r, conductor.reactance,
                            request.voltage_system, request.power_factor)

    def calculate(self, request: ConductorInput) -> ConductorResult:
        std = self.standard
        application = request.application or std.info.default_application
        profile = std.profile(application)
        table = std.conductor_table(application)
        rating = self.temperature_rating(request, table)

        factors = compose(std.standard.value, request.ambient_temperature, request.conductor_count,
                          request.installation_method, application, request.duty_cycle.value, rating)
        limit = self.voltage_drop_limit(request, profile)
        required = request.current * factors.safety

        # 1. Ampacity filter
        qualifying = []
        for conductor in table:
            base = self.base_ampacity(conductor, rating, request.duty_cycle)
            corrected = base * factors.ampacity_multiplier
            if corrected >= required:
                qualifying.append((conductor, base, corrected))
        if not qualifying:
            raise NoAmpacitySolutionError(required, self.name, table[-1].size)

        # 2. Voltage drop, smallest first
        drops = [self.drop_for(request, c) / request.voltage * 100 for c, _, _ in qualifying]
        index = next((i for i, pct in enumerate(drops) if pct <= limit), None)
        warnings = []
        vd_compliant = index is not None
        if index is None:
            index = min(range(len(drops)), key=lambda i: drops[i])
            msg = (f"No {self.name} conductor meets the {limit:g}% voltage drop limit; "
                   f"{qualifying[index][0].size} gives {drops[index]:.2f}%")
            logger.warning(msg)
            warnings.append(msg)

        conductor, base, corrected = qualifying[index]
        vd_volts = self.drop_for(request, conductor)
        vd_percent = drops[index]
        r_adj = adjusted_resistance(conductor.resistance, request.conductor_material)
        loss = power_loss(request.current, request.length, r_adj, request.voltage_system)
        efficiency = (request.voltage - vd_volts) / request.voltage * 100
        logger.debug("%s conductor %s: %.1fA corrected vs %.1fA required, VD %.2f%%",
                     self.name, conductor.size, corrected, required, vd_percent)

        # 3. Larger sizes for comparison
        alternatives: List[ConductorAlternative] = []
        for (alt, _, alt_amp), pct in list(zip(qualifying, drops))[index + 1:index + 1 + MAX_ALTERNATIVES]:
            alternatives.append(ConductorAlternative(
                size=alt.size, ampacity=round(alt_amp, 2), voltage_drop_percent=round(pct, 3),
                compliant=pct <= limit, cost_factor=alt.cost_factor,
            ))

        t_min, t_max = profile.temperature_range
        temp_ok = t_min <= request.ambient_temperature <= t_max and request.ambient_temperature < rating
        install_ok = request.installation_method in std.rules.installation
        compliance = ConductorCompliance(
            ampacity_compliant=True,
            voltage_drop_compliant=vd_compliant,
            temperature_compliant=temp_ok,
            installation_compliant=install_ok,
            standard_compliant=vd_compliant and temp_ok and install_ok,
        )

        assumptions = [f"Conductor material: {request.conductor_material.value}",
                       f"Length in {std.info.length_unit}",
                       f"Insulation {conductor.insulation} rated {rating}C"]
        if not temp_ok:
            warnings.append(f"Ambient {request.ambient_temperature:g}C outside the "
                            f"{application} range {t_min:g}..{t_max:g}C")
        v_min, v_max = profile.voltage_range
        if not v_min <= request.voltage <= v_max:
            warnings.append(f"{request.voltage:g}V outside the {application} range {v_min:g}..{v_max:g}V")
        method = (f"Ampacity {base:g}A × {factors.ampacity_multiplier:.3f} = {corrected:.1f}A "
                  f"≥ {request.current:g}A × {factors.safety:g} = {required:.1f}A; "
                  f"voltage drop {vd_percent:.2f}% ≤ {limit:g}%")
        metadata = self.metadata(
            method, request.ambient_temperature,
            profile.references + tuple(s.reference for s in factors.steps[:3] if s.reference),
            environment=request.installation_method,
            safety_factors={s.name: s.value for s in factors.steps},
            assumptions=assumptions, warnings=warnings,
        )

        return ConductorResult(
            standard=std.standard,
            size=conductor.size,
            base_ampacity=base,
            ampacity=round(corrected, 2),
            required_ampacity=round(required, 2),
            voltage_drop_volts=round(vd_volts, 3),
            voltage_drop_percent=round(vd_percent, 3),
            voltage_drop_limit=limit,
            power_loss_watts=round(loss, 2),
            efficiency=round(efficiency, 2),
            factors=factors,
            compliance=compliance,
            alternatives=alternatives,
            metadata=metadata,
            voltage_at_load=round(request.voltage - vd_volts, 3)
            if request.voltage_system == VoltageSystem.DC else None,
        )
