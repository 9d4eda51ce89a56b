import logging
import os
import random
from pathlib import Path
from typing import Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from hexgame.core.constants import DEFAULT_DEPTH, DEFAULT_TRIALS
from hexgame.core.predictor import MovePredictor

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "predictor.yaml"

class PredictorConfig(BaseModel):
    depth: int = Field(DEFAULT_DEPTH, ge=1)
    trials: int = Field(DEFAULT_TRIALS, ge=1)
    seed: Optional[int] = None  # None draws a fresh seed from the OS

    def build(self) -> MovePredictor:
        return MovePredictor(self.depth, self.trials, random.Random(self.seed))

class PredictorRegistry:
    def __init__(self, config_path: Optional[str] = None):
        self.presets: Dict[str, PredictorConfig] = {}
        path = config_path or os.getenv("HEX_PREDICTOR_CONFIG") or DEFAULT_CONFIG_PATH
        self._load(Path(path))

    def _load(self, path: Path):
        if not path.exists():
            logger.warning("Predictor config %s not found, using built-in default preset", path)
            self.presets["default"] = PredictorConfig()
            return
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
            for key, val in (data.get("presets") or {}).items():
                self.presets[key] = PredictorConfig(**(val or {}))
        self.presets.setdefault("default", PredictorConfig())

    def get(self, name: str) -> Optional[PredictorConfig]:
        return self.presets.get(name)

    def list_all(self) -> Dict[str, PredictorConfig]:
        return self.presets

    def resolve(self, name: str = "default") -> PredictorConfig:
        """Returns the named preset with HEX_PREDICTOR_* environment overrides applied."""
        preset = self.get(name)
        if preset is None:
            raise KeyError(f"Unknown predictor preset: {name}")

        overrides = {}
        for field, env_key in (("depth", "HEX_PREDICTOR_DEPTH"),
                               ("trials", "HEX_PREDICTOR_TRIALS"),
                               ("seed", "HEX_PREDICTOR_SEED")):
            value = os.getenv(env_key)
            if value:
                overrides[field] = value

        if not overrides:
            return preset
        # Re-validate so overrides obey the same bounds as the YAML
        return PredictorConfig(**{**preset.model_dump(), **overrides})

# Singleton instance
registry = PredictorRegistry()
