"""Class diagrams for Python types, rendered by the yUML service."""

from yumlgen.builder import DiagramFragmentBuilder
from yumlgen.diagram_model import DetailLevel, DiagramStyle, DiagramType, Direction, Scale
from yumlgen.yuml_factory import YumlFactory

__version__ = "0.1.0"

__all__ = [
    "DetailLevel",
    "DiagramFragmentBuilder",
    "DiagramStyle",
    "DiagramType",
    "Direction",
    "Scale",
    "YumlFactory",
    "__version__",
]
