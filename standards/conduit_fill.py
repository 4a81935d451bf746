import logging
from typing import List

from core.calculator import SizingEngine
from core.errors import ValidationError
from core.models import (
    CalculationKind, ConduitAlternative, ConduitFillInput, FillCompliance, FillResult, WireShare,
)

logger = logging.getLogger(__name__)


def max_fill_percent(wire_count: int):
    """NEC Chapter 9 Table 1 tiers. Returns (percent, rule text)."""
    if wire_count == 1:
        return 53.0, "1 conductor: 53%"
    if wire_count == 2:
        return 31.0, "2 conductors: 31%"
    return 40.0, "Over 2 conductors: 40%"


class ConduitFillEngine(SizingEngine):
    kind = CalculationKind.CONDUIT_FILL

    def wire_breakdown(self, request: ConduitFillInput):
        fill = self.standard.fill
        shares = []
        for wire in request.wires:
            area = fill.wire_area(wire.gauge, wire.insulation)
            if area is None:
                raise ValidationError(
                    [f"No {fill.area_unit} area for {wire.gauge} {wire.insulation}"], ["wires"])
            shares.append((wire, area, area * wire.quantity))
        return shares

    def calculate(self, request: ConduitFillInput) -> FillResult:
        fill = self.standard.fill
        shares = self.wire_breakdown(request)
        wire_area = sum(total for _, _, total in shares)
        required = wire_area * (1 + request.future_fill_reserve / 100)

        count = request.wire_count_override or sum(w.quantity for w in request.wires)
        max_fill, rule = max_fill_percent(count)

        conduits = fill.conduits_of(request.conduit_type)
        if request.conduit_size is not None:
            conduits = tuple(c for c in conduits if c.size == request.conduit_size)
            if not conduits:
                raise ValidationError(
                    [f"Unknown {request.conduit_type} size: {request.conduit_size}"], ["conduit_size"])

        selected = next((c for c in conduits if required <= c.internal_area * max_fill / 100), None)
        warnings = []
        fill_ok = selected is not None
        if selected is None:
            selected = conduits[-1]
            msg = (f"{required:.4f} {fill.area_unit} exceeds {max_fill:g}% of the largest "
                   f"{request.conduit_type} conduit ({selected.size})")
            logger.warning(msg)
            warnings.append(msg)

        fill_percent = required / selected.internal_area * 100
        logger.debug("%s fill: %s %s at %.1f%% (max %g%%)", self.name, selected.size,
                     selected.conduit_type, fill_percent, max_fill)

        alternatives: List[ConduitAlternative] = []
        if request.conduit_size is None:
            for c in conduits:
                pct = required / c.internal_area * 100
                alternatives.append(ConduitAlternative(
                    size=c.size, conduit_type=c.conduit_type, fill_percent=round(pct, 2),
                    compliant=pct <= max_fill, cost_factor=c.cost_factor,
                ))

        breakdown = [
            WireShare(gauge=w.gauge, quantity=w.quantity, insulation=w.insulation,
                      individual_area=area, total_area=round(total, 4),
                      percentage=round(total / wire_area * 100, 2) if wire_area else 0.0)
            for w, area, total in shares
        ]

        t_min, t_max, app_refs = fill.applications[request.application]
        temp_ok = t_min <= request.ambient_temperature <= t_max
        if not temp_ok:
            warnings.append(f"Ambient {request.ambient_temperature:g}C outside the "
                            f"{request.application} range {t_min}..{t_max}C")
        install = fill.installation[request.installation_method]

        assumptions = [f"Wire count {count}", f"Areas in {fill.area_unit}"]
        if request.future_fill_reserve:
            assumptions.append(f"Future fill reserve {request.future_fill_reserve:g}%")
        references = fill.references + (fill.listings[selected.conduit_type],) + tuple(app_refs)
        metadata = self.metadata(
            f"{rule}; {required:.4f} ≤ {selected.internal_area:g} × {max_fill:g}%",
            request.ambient_temperature, references + (install.reference,),
            environment=request.environment,
            safety_factors={"Installation temperature factor": install.temperature_factor,
                            "Installation environment factor": install.environment_factor},
            assumptions=assumptions, warnings=warnings,
        )

        return FillResult(
            standard=self.standard.standard,
            conduit_size=selected.size,
            conduit_type=selected.conduit_type,
            total_wire_area=round(required, 4),
            conduit_area=selected.internal_area,
            fill_percent=round(fill_percent, 2),
            max_fill_percent=max_fill,
            fill_rule=rule,
            available_area=round(selected.internal_area * max_fill / 100 - required, 4),
            compliance=FillCompliance(
                fill_compliant=fill_ok,
                temperature_compliant=temp_ok,
                code_compliant=fill_ok and temp_ok,
            ),
            wire_breakdown=breakdown,
            alternatives=alternatives,
            metadata=metadata,
        )
