# wikisummary/presenter.py
import logging

from .formatter import Formatter
from .surfaces import Surface, SurfaceRegistry

logger = logging.getLogger(__name__)


class Presenter:
    """Accepts summary text and puts it on a surface."""

    def __init__(self, registry: SurfaceRegistry, formatter: Formatter):
        self.registry = registry
        self.formatter = formatter

    def present(self, title: str, text: str) -> Surface:
        raise NotImplementedError


class NewSurfacePresenter(Presenter):
    def present(self, title: str, text: str) -> Surface:
        surface = self.registry.create(f"*Wikipedia: {title}*")
        surface.insert(self.formatter.reflow(text))
        surface.point = 0
        surface.read_only = True
        self.registry.display(surface.name)
        logger.info("Summary for %r shown in %s", title, surface.name)
        return surface


class InsertPresenter(Presenter):
    def __init__(self, registry: SurfaceRegistry, formatter: Formatter, target: str):
        super().__init__(registry, formatter)
        # captured by name at invocation time, looked up again on completion
        self.target = target

    def present(self, title: str, text: str) -> Surface:
        surface = self.registry.get(self.target)
        surface.insert(self.formatter.reflow(text))
        self.registry.display(surface.name)
        logger.info("Summary for %r inserted into %s", title, surface.name)
        return surface
