from dataclasses import dataclass, fields
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

import yaml

DEFAULTS_PATH = Path(__file__).parent / "defaults.yaml"


@dataclass(frozen=True)
class Settings:
    ambient_temperature: float = 30.0
    device_ambient_temperature: float = 25.0
    conductor_count: int = 3
    installation_method: str = "conduit"
    iec_installation_method: str = "B1"
    power_factor: float = 1.0
    duty_cycle: str = "continuous"
    future_fill_reserve: float = 0.0
    fill_application: str = "commercial"
    fill_installation_method: str = "indoor"
    fill_environment: str = "dry"
    device_environment: str = "indoor"
    log_level: str = "INFO"


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
    """Reads request defaults from YAML. Keys not named in Settings are ignored."""
    path = Path(path) if path is not None else DEFAULTS_PATH
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Settings file must contain a mapping: {path}")
    known = {f.name for f in fields(Settings)}
    return Settings(**{k: v for k, v in data.items() if k in known})


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
