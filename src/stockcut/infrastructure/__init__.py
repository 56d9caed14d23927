"""Infrastructure layer - formatters, exporters and diagram rendering."""

from .cut_diagram_renderer import CutDiagramRenderer
from .formatters import CutPlanFormatter, DemandFormatter, JsonExporter

__all__ = [
    "CutDiagramRenderer",
    "CutPlanFormatter",
    "DemandFormatter",
    "JsonExporter",
]
