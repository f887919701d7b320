from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

@dataclass
class Registry:
    """Named factories, filled in by ``@REGISTRY.register("key")`` at import time."""
    name: str
    items: Dict[str, Any] = field(default_factory=dict)
    max_ndim: Dict[str, int] = field(default_factory=dict)

    def register(self, key: str, max_ndim: Optional[int] = None) -> Callable[[Any], Any]:
        def deco(obj: Any) -> Any:
            if key in self.items:
                raise KeyError(f"[{self.name}] '{key}' already registered")
            self.items[key] = obj
            if max_ndim is not None:
                self.max_ndim[key] = max_ndim
            return obj
        return deco

    def get(self, key: str) -> Any:
        if key not in self.items:
            raise KeyError(f"[{self.name}] Unknown key '{key}'. Available: {self.names()}")
        return self.items[key]

    def names(self) -> List[str]:
        return sorted(self.items.keys())

    def check_ndim(self, key: str, ndim: int) -> None:
        """Raise ValueError when ``key`` was registered with a lower dimension cap."""
        self.get(key)
        limit = self.max_ndim.get(key)
        if limit is not None and ndim > limit:
            raise ValueError(f"[{self.name}] '{key}' supports ndim <= {limit}, got {ndim}")

    def build(self, key: str, ndim: int) -> Any:
        """
        Call the factory registered under ``key`` with ``ndim``.
        Factories take the cube dimension and return a Coloring of Q_ndim.
        """
        self.check_ndim(key, ndim)
        return self.get(key)(ndim)

# generator name -> callable(ndim) returning a Coloring
GENERATORS = Registry("generators")
