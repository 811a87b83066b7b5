# wikisummary/surfaces.py
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from .errors import SurfaceNotFound, TargetSurfaceReadOnly

logger = logging.getLogger(__name__)


@dataclass
class Surface:
    name: str
    text: str = ""
    point: int = 0
    read_only: bool = False

    def insert(self, text: str) -> None:
        if self.read_only:
            raise TargetSurfaceReadOnly(self.name)
        self.text = self.text[: self.point] + text + self.text[self.point :]
        self.point += len(text)


class SurfaceRegistry:
    """Named text surfaces, plus which one is currently on display."""

    def __init__(self):
        self._surfaces: Dict[str, Surface] = {}
        self.displayed: Optional[str] = None

    def unique_name(self, base: str) -> str:
        if base not in self._surfaces:
            return base
        n = 2
        while f"{base}<{n}>" in self._surfaces:
            n += 1
        return f"{base}<{n}>"

    def create(self, base: str, text: str = "", read_only: bool = False) -> Surface:
        surface = Surface(name=self.unique_name(base), text=text, read_only=read_only)
        self._surfaces[surface.name] = surface
        logger.debug("Created surface %s", surface.name)
        return surface

    def add(self, surface: Surface) -> Surface:
        if surface.name in self._surfaces:
            raise ValueError(f"Surface '{surface.name}' already exists")
        surface.point = max(0, min(surface.point, len(surface.text)))
        self._surfaces[surface.name] = surface
        return surface

    def get(self, name: str) -> Surface:
        try:
            return self._surfaces[name]
        except KeyError:
            raise SurfaceNotFound(name) from None

    def names(self) -> List[str]:
        return list(self._surfaces)

    def display(self, name: str) -> None:
        self.get(name)
        self.displayed = name
