from __future__ import annotations
import copy
from dataclasses import dataclass
from typing import Any, Dict, List
import yaml

from dcb.bits import WIDTH

# BFS over the small cubes, then the mirror coloring along 2 -> 4 -> 16
DEFAULT_CONFIG: Dict[str, Any] = {
    "runs": [
        {"generator": "bfs", "dims": [2, 3, 4]},
        {"generator": "mirror", "dims": [2, 4, 16]},
    ],
    "progress": False,
    "cross_check": False,
    "strict": False,
}

@dataclass
class RunSpec:
    generator: str
    dims: List[int]

    def __post_init__(self):
        if not self.dims:
            raise ValueError(f"run '{self.generator}' has no dims")
        for d in self.dims:
            if not isinstance(d, int) or isinstance(d, bool) or not 1 <= d < WIDTH:
                raise ValueError(f"run '{self.generator}': dims must be integers in [1, {WIDTH}), got {d!r}")

def load_config(path: str | None = None) -> Dict[str, Any]:
    cfg = copy.deepcopy(DEFAULT_CONFIG)
    if path is None:
        return cfg
    with open(path, "r", encoding="utf-8") as f:
        try:
            user = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"{path}: invalid YAML: {e}") from e
    if not isinstance(user, dict):
        raise ValueError(f"{path}: expected a mapping at top level, got {type(user).__name__}")
    unknown = set(user) - set(DEFAULT_CONFIG)
    if unknown:
        raise ValueError(f"{path}: unknown keys {sorted(unknown)}")
    cfg.update(user)
    return cfg

def run_specs(cfg: Dict[str, Any]) -> List[RunSpec]:
    runs = cfg.get("runs") or []
    specs = []
    for r in runs:
        if not isinstance(r, dict) or set(r) != {"generator", "dims"}:
            raise ValueError(f"each run needs exactly 'generator' and 'dims', got {r!r}")
        specs.append(RunSpec(generator=str(r["generator"]), dims=list(r["dims"])))
    return specs
