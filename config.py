"""
Run configuration for routesim.

Defaults reproduce the distvec/linkstate tools exactly; a YAML file named by
ROUTESIM_CONFIG can override them.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
import os

from report import CHANGE_SEPARATOR
from simulation import ENGINES

CONFIG_ENV_VAR = "ROUTESIM_CONFIG"


@dataclass(frozen=True)
class SimulationConfig:
    algorithm: str = "distance_vector"
    output: str = "output.txt"
    separator: str = CHANGE_SEPARATOR
    verbose: bool = False
    verify: bool = False


def load_config(path: Path, base: SimulationConfig | None = None) -> SimulationConfig:
    import yaml  # type: ignore

    try:
        text = Path(path).read_text()
    except OSError as exc:
        raise ValueError(f"{path}: cannot read config: {exc}") from exc
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: config must be a mapping")

    known = {f.name for f in fields(SimulationConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"{path}: unknown config keys: {', '.join(unknown)}")

    cfg = replace(base or SimulationConfig(), **data)
    if cfg.algorithm not in ENGINES:
        raise ValueError(f"{path}: unknown algorithm {cfg.algorithm!r}")
    return replace(
        cfg,
        output=str(cfg.output),
        separator=str(cfg.separator),
        verbose=bool(cfg.verbose),
        verify=bool(cfg.verify),
    )


def config_from_env(base: SimulationConfig | None = None) -> SimulationConfig:
    """Load the file named by ROUTESIM_CONFIG, or return base/defaults."""
    path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return base or SimulationConfig()
    return load_config(Path(path), base)
