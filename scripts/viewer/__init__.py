"""Report viewer engine: page controller, page builders and drilldown handling."""

from .config import PieConfig, ViewerConfig, load_viewer_config
from .context import EngineContext
from .controller import OVERVIEW, NavEntry, PageController, UnknownNavigationTarget
from .document import ContainerNotFound, Document, Element
from .drilldown import DrilldownHandler

__all__ = [
    "ContainerNotFound",
    "Document",
    "DrilldownHandler",
    "Element",
    "EngineContext",
    "NavEntry",
    "OVERVIEW",
    "PageController",
    "PieConfig",
    "UnknownNavigationTarget",
    "ViewerConfig",
    "load_viewer_config",
]
