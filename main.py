import logging
import sys

from core.converters import convert_length, convert_power, parse_quantity
from core.errors import SizingError, ValidationError
from core.models import ConductorResult, DeviceResult, StandardId, VoltageSystem
from core.report import alternatives_frame, export_to_excel
from core.router import route
from core.settings import get_settings
from standards.catalog import STANDARDS

KINDS = {"1": "conductor", "2": "conduit_fill", "3": "device"}


def ask(prompt, default=None):
    suffix = f" [{default}]" if default is not None else ""
    value = input(f"{prompt}{suffix}: ").strip()
    return value or default


def select_standard() -> StandardId:
    print("\nNormas disponibles:")
    ids = list(StandardId)
    for i, sid in enumerate(ids, start=1):
        print(f"  ({i}) {sid.value:<14} {STANDARDS[sid].info.full_name}")
    choice = ask("Seleccione Norma", "1")
    try:
        return ids[int(choice) - 1]
    except (ValueError, IndexError):
        return StandardId.NEC


def conductor_params(sid: StandardId) -> dict:
    std = STANDARDS[sid]
    system = "dc" if std.is_dc else ask("Sistema (single / three-phase)", "single")
    voltage = float(ask("Voltaje (V)"))
    pf = float(ask("Factor de Potencia", "1.0"))
    value, unit = parse_quantity(ask("Carga (ej: 20 A, 2 kW, 3 HP)"), "A")
    watts, amps = convert_power(value, unit, voltage, VoltageSystem(system), pf)
    if amps is None:
        phase = 3 ** 0.5 if system == "three-phase" else 1.0
        amps = watts / (voltage * phase * pf)
    l_val, l_unit = parse_quantity(ask("Longitud del circuito (ej: 50 m, 100 ft)"), std.info.length_unit)
    return {
        "kind": "conductor",
        "current": amps,
        "voltage": voltage,
        "power_factor": pf,
        "voltage_system": system,
        "length": convert_length(l_val, l_unit, std.info.length_unit),
        "application": ask("Aplicación", std.info.default_application),
        "conductor_material": ask("Material (copper / aluminum)", "copper"),
        "ambient_temperature": ask("Temperatura Ambiente (°C)", "30"),
        "installation_method": ask("Método de instalación", "B1" if std.family == "IEC" else "conduit"),
        "conductor_count": ask("N° de conductores agrupados", "3"),
        "duty_cycle": ask("Servicio (continuous / intermittent)", "continuous"),
    }


def fill_params(sid: StandardId) -> dict:
    fill = STANDARDS[sid].fill
    wires = []
    print(f"Aislamientos: {', '.join(fill.insulation_types)}")
    while True:
        gauge = ask(f"Calibre del conductor #{len(wires) + 1} (vacío para terminar)")
        if not gauge:
            break
        wires.append({
            "gauge": gauge,
            "quantity": int(ask("Cantidad", "1")),
            "insulation": ask("Aislamiento", fill.insulation_types[0]),
        })
    return {
        "kind": "conduit_fill",
        "wires": wires,
        "conduit_type": ask(f"Tipo de ducto ({' / '.join(fill.conduit_types)})", fill.conduit_types[0]),
        "future_fill_reserve": ask("Reserva futura (%)", "0"),
    }


def device_params(sid: StandardId) -> dict:
    std = STANDARDS[sid]
    params = {
        "kind": "device",
        "voltage": float(ask("Voltaje (V)", str((std.info.dc_voltages or std.info.ac_voltages)[0]))),
        "application": ask("Aplicación", std.info.default_application),
        "duty_cycle": ask("Servicio (continuous / intermittent)", "continuous"),
        "ambient_temperature": ask("Temperatura Ambiente (°C)", "25"),
        "environment": ask("Entorno (indoor / marine / automotive / engine_room / hazardous)", "indoor"),
    }
    value, unit = parse_quantity(ask("Carga (ej: 20 A, 500 W)"), "A")
    if unit.upper() == "A":
        params["current"] = value
    else:
        params["power"], _ = convert_power(value, unit, params["voltage"], VoltageSystem.DC)
    gauge = ask("Calibre del cable a verificar (opcional)")
    if gauge:
        params["wire_gauge"] = gauge
    return params


def print_result(result):
    print("-" * 80)
    if isinstance(result, ConductorResult):
        print(f"Conductor: {result.size}  |  Ampacidad {result.ampacity:.1f} A "
              f"(requerida {result.required_ampacity:.1f} A)")
        print(f"Caída de tensión: {result.voltage_drop_volts:.2f} V ({result.voltage_drop_percent:.2f}% "
              f"/ límite {result.voltage_drop_limit:g}%)  |  Eficiencia {result.efficiency:.2f}%")
    elif isinstance(result, DeviceResult):
        print(f"Protección: {result.rating:g} A {result.device_type} ({result.primary.standard})")
        print(f"Corriente base {result.base_current:.2f} A -> ajustada {result.adjusted_current:.2f} A")
    else:
        print(f"Ducto: {result.conduit_size} {result.conduit_type}  |  Llenado {result.fill_percent:.1f}% "
              f"(máx {result.max_fill_percent:g}%)")
    print(f"Método: {result.metadata.calculation_method}")
    for warning in result.metadata.warnings:
        print(f"(!) {warning}")
    frame = alternatives_frame(result)
    if not frame.empty:
        print("\nAlternativas:")
        print(frame.to_string(index=False))
    print("-" * 80)


def main():
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    print("==========================================================")
    print(" CALCULADORA MULTINORMA (CONDUCTORES, DUCTOS, PROTECCIONES)")
    print("==========================================================")

    results = []
    builders = {"conductor": conductor_params, "conduit_fill": fill_params, "device": device_params}
    while True:
        sid = select_standard()
        print("Cálculo: (1) Conductor, (2) Llenado de ducto, (3) Protección")
        kind = KINDS.get(ask("Seleccione", "1"), "conductor")
        try:
            params = builders[kind](sid)
            result = route(sid, params)
        except ValidationError as e:
            for error in e.errors:
                print(f"Error: {error}")
        except SizingError as e:
            print(f"Error: {e}")
        except ValueError as e:
            print(f"Error en entrada de datos: {e}. Intente de nuevo.")
        else:
            results.append(result)
            print_result(result)

        if ask("¿Otro cálculo? (s/n)", "n").lower() != "s":
            break

    if not results:
        print("No se realizaron cálculos.")
        sys.exit()

    if ask("\n¿Exportar reporte a Excel? (s/n)", "n").lower() == "s":
        filename = export_to_excel(results)
        print(f"\n[INFO] Excel generado: {filename}")


if __name__ == "__main__":
    main()
