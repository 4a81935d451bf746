import datetime
from dataclasses import asdict
from typing import Iterable, Optional

import pandas as pd
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill

from core.models import ConductorResult, DeviceResult, FillResult

HEADER_FILL = PatternFill(start_color="DDDDDD", end_color="DDDDDD", fill_type="solid")
HEADER_FONT = Font(bold=True)


def alternatives_frame(result) -> pd.DataFrame:
    """Alternatives of any result as a table, the selected entry first."""
    if isinstance(result, DeviceResult):
        rows = [{"rating": d.rating, "device_type": d.device_type, "standard": d.standard,
                 "voltage_rating": d.voltage_rating, "interrupting_capacity": d.interrupting_capacity,
                 "selected": d is result.primary}
                for d in [result.primary] + list(result.alternatives)]
        return pd.DataFrame(rows)

    rows = [asdict(a) for a in result.alternatives]
    if isinstance(result, ConductorResult):
        selected = {"size": result.size, "ampacity": result.ampacity,
                    "voltage_drop_percent": result.voltage_drop_percent,
                    "compliant": result.compliance.standard_compliant, "cost_factor": None}
        frame = pd.DataFrame([selected] + rows)
        frame["selected"] = frame["size"] == result.size
        return frame

    frame = pd.DataFrame(rows, columns=["size", "conduit_type", "fill_percent", "compliant", "cost_factor"])
    frame["selected"] = frame["size"] == result.conduit_size
    return frame


def _header(ws, headers):
    ws.append(headers)
    for cell in ws[ws.max_row]:
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL


def export_to_excel(results: Iterable, path: Optional[str] = None) -> str:
    """Writes one sheet per result kind plus the standards applied. Returns the file name."""
    results = list(results)
    wb = Workbook()
    ws = wb.active
    ws.title = "Resumen"
    ws.append(["MEMORIA DE CÁLCULO"])
    ws.append(["Fecha:", datetime.datetime.now().strftime("%Y-%m-%d %H:%M")])
    ws.append(["Cálculos:", len(results)])

    conductors = [r for r in results if isinstance(r, ConductorResult)]
    fills = [r for r in results if isinstance(r, FillResult)]
    devices = [r for r in results if isinstance(r, DeviceResult)]

    if conductors:
        ws1 = wb.create_sheet("Conductores")
        _header(ws1, ["Norma", "Calibre", "Ampacidad Base", "Ampacidad Corregida", "Requerida",
                      "% VD", "Límite VD", "Pérdidas (W)", "Eficiencia %", "Cumple"])
        for r in conductors:
            ws1.append([r.standard.value, r.size, r.base_ampacity, r.ampacity, r.required_ampacity,
                        r.voltage_drop_percent, r.voltage_drop_limit, r.power_loss_watts,
                        r.efficiency, "Sí" if r.compliance.standard_compliant else "No"])

    if fills:
        ws2 = wb.create_sheet("Ductos")
        _header(ws2, ["Norma", "Tipo", "Tamaño", "Área Cables", "Área Ducto", "% Llenado",
                      "% Máximo", "Regla", "Cumple"])
        for r in fills:
            ws2.append([r.standard.value, r.conduit_type, r.conduit_size, r.total_wire_area,
                        r.conduit_area, r.fill_percent, r.max_fill_percent, r.fill_rule,
                        "Sí" if r.compliance.code_compliant else "No"])

    if devices:
        ws3 = wb.create_sheet("Protecciones")
        _header(ws3, ["Norma", "Capacidad (A)", "Tipo", "Estándar Equipo", "Corriente Base",
                      "Corriente Ajustada", "Método", "Cumple"])
        for r in devices:
            ws3.append([r.standard.value, r.rating, r.device_type, r.primary.standard,
                        r.base_current, r.adjusted_current, r.metadata.calculation_method,
                        "Sí" if r.compliance.standard_compliant else "No"])

    ws4 = wb.create_sheet("Normas Aplicadas")
    _header(ws4, ["Cálculo", "Referencia"])
    for i, r in enumerate(results, start=1):
        for ref in r.metadata.standards_applied:
            ws4.append([i, ref])
        for warning in r.metadata.warnings:
            ws4.append([i, f"Advertencia: {warning}"])

    for sheet in wb.worksheets:
        for col in sheet.columns:
            sheet.column_dimensions[col[0].column_letter].width = 15

    filename = path or f"Memoria_{datetime.datetime.now().strftime('%Y%m%d_%H%M%S')}.xlsx"
    wb.save(filename)
    return filename
