# src/prm_roadmap/io/config.py
from pathlib import Path

import yaml

from prm_roadmap.config.models import ScenarioModel


def load_scenario(path: str | Path) -> ScenarioModel:
    cfg_path = Path(path).expanduser()
    if not cfg_path.exists():
        raise FileNotFoundError(f"Scenario not found: {cfg_path}")
    with cfg_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    return ScenarioModel.model_validate(raw)
