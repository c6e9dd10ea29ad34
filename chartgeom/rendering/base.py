# chartgeom/rendering/base.py
"""
Common renderer plumbing: dataset validation, option handling and the
chart-type registry.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from ..config.chart_config import InvalidDatasetError, InvalidOptionError
from ..config.layout_config import DEFAULT_LAYOUT
from ..models.data_types import Scene


logger = logging.getLogger(__name__)


# ==================== BASE RENDERER ====================


class ChartRenderer(ABC):
    """
    Abstract base class for chart façades.

    Subclasses turn a list of dataset items into a Scene. The base class
    validates the dataset, resolves options and short-circuits empty input
    to an empty, well-formed scene.
    """

    chart_type: str = ""
    config_class: type

    def __init__(self, config: Any = None, palette: Sequence[str] = DEFAULT_LAYOUT.PALETTE):
        """
        Args:
            config: Default options for every render call (config instance
                or mapping of option names)
            palette: Fallback colors indexed by item position
        """
        self.config = self._resolve_config(config)
        self.palette = tuple(palette)
        self.logger = logging.getLogger(type(self).__module__)

    def get_name(self) -> str:
        return type(self).__name__

    def _resolve_config(self, config: Any):
        if config is None:
            return self.config_class()
        if isinstance(config, self.config_class):
            return config
        if isinstance(config, Mapping):
            return self.config_class.from_options(config)
        raise InvalidOptionError(
            f"{self.get_name()} expects {self.config_class.__name__} or a mapping, got {type(config)}"
        )

    @staticmethod
    def _validate_dataset(data: Any) -> List[Any]:
        """
        Raises:
            InvalidDatasetError: If data is not a list-like sequence
        """
        if isinstance(data, (str, bytes, Mapping)) or not isinstance(data, Sequence):
            raise InvalidDatasetError(f"Dataset must be a sequence, got {type(data).__name__}")
        return list(data)

    def render(self, data: Sequence[Any], config: Any = None, **overrides) -> Scene:
        """
        Build the scene for ``data``.

        Args:
            data: Dataset items (model objects or their dict form)
            config: Options for this call only; defaults to the renderer's
            **overrides: Individual options on top of ``config``

        Returns:
            Scene sized to the configured width and height. Empty input
            yields a scene with no primitives and no legend entries.
        """
        cfg = self._resolve_config(config) if config is not None else self.config
        cfg = cfg.with_overrides(**overrides)
        items = [self._coerce_item(item) for item in self._validate_dataset(data)]

        if not items:
            self.logger.debug(f"{self.get_name()}: empty dataset, returning empty scene")
            return Scene.empty(self.chart_type, cfg.width, cfg.height)

        scene = self._build(items, cfg)
        self.logger.debug(
            f"{self.get_name()}: {len(items)} items -> "
            f"{len(scene.primitives)} primitives, {len(scene.legend)} legend entries"
        )
        return scene

    @abstractmethod
    def _coerce_item(self, item: Any) -> Any:
        """Convert one dataset item to its model type."""
        pass

    @abstractmethod
    def _build(self, items: List[Any], config: Any) -> Scene:
        """Build a scene for a non-empty, coerced dataset."""
        pass


# ==================== REGISTRY ====================


class ChartRegistry:
    """Registry mapping chart type names to renderer factories."""

    def __init__(self):
        self._renderers: Dict[str, Callable[..., ChartRenderer]] = {}

    def register(self, chart_type: str, factory: Callable[..., ChartRenderer]) -> None:
        """Register a renderer factory for a chart type."""
        self._renderers[chart_type] = factory

    @property
    def chart_types(self) -> List[str]:
        return sorted(self._renderers)

    def get(self, chart_type: str, config: Any = None) -> ChartRenderer:
        if chart_type not in self._renderers:
            raise InvalidOptionError(f"No renderer registered for chart type: {chart_type!r}")
        return self._renderers[chart_type](config)

    def render(self, chart_type: str, data: Sequence[Any],
               options: Optional[Mapping[str, Any]] = None) -> Scene:
        """Render a chart by delegating to the registered renderer."""
        return self.get(chart_type, options).render(data)
