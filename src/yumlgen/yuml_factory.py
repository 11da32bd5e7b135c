"""
yUML factory - Generates class diagram fragments and image URIs for a list of types.
"""

from typing import Any, List, Optional, Sequence
import logging

from yumlgen.builder import DiagramFragmentBuilder
from yumlgen.config import Configuration
from yumlgen.diagram_model import DetailLevel, DiagramStyle
from yumlgen.renderers.factory import get_resolver
from yumlgen.renderers.yuml_renderer import DiagramUriResolver

log = logging.getLogger(__name__)


class YumlFactory:
    """
    Generates yUML class diagrams for a list of types.

    Usage:
        uri = YumlFactory.create(Animal, Dog).generate_class_diagram_uri(DetailLevel.PUBLIC_PROPERTIES)
    """

    def __init__(
        self,
        types: type | Sequence[Any],
        style: Optional[DiagramStyle] = None,
        config: Optional[Configuration] = None,
        resolver: Optional[DiagramUriResolver] = None,
        builder: Optional[DiagramFragmentBuilder] = None,
    ):
        """
        Initialize the factory.

        :param types: a single class or a list of types to draw
        :param style: diagram style, taken from configuration if not given
        :param config: Configuration object
        :param resolver: URI resolver, built from configuration if not given
        :param builder: fragment builder, reflection based if not given
        """
        self.config = config if config is not None else Configuration()
        self.types: List[Any] = [types] if isinstance(types, type) else list(types)
        self.style = style if style is not None else self.config.style.to_style()
        self.resolver = resolver if resolver is not None else get_resolver(self.config)
        self.builder = builder if builder is not None else DiagramFragmentBuilder(type_names=self.config.get_type_names())

    @classmethod
    def create(cls, *types: Any, **kwargs) -> "YumlFactory":
        """Create a factory for the given types."""
        return cls(list(types), **kwargs)

    @classmethod
    def create_for(cls, tp: type, **kwargs) -> "YumlFactory":
        """Create a factory for a single type."""
        return cls(tp, **kwargs)

    def _names(self) -> str:
        return ", ".join(getattr(tp, "__name__", str(tp)) for tp in self.types)

    def generate_class_diagram_fragment(self, *detail_levels: DetailLevel | str) -> str:
        """
        Generate the yUML DSL of the class diagram.

        :param detail_levels: detail levels, configured ones if none are given
        :return: yUML DSL string
        """
        if not detail_levels:
            detail_levels = tuple(self.config.detail_levels)
        return self.builder.build(self.types, self.style, detail_levels)

    def generate_class_diagram_uri(self, *detail_levels: DetailLevel | str) -> str:
        """
        Generate a class diagram and return its URL.

        :param detail_levels: detail levels, configured ones if none are given
        :return: URL of the rendered diagram
        :raises YumlServerError: If the yUML server request fails
        """
        fragment = self.generate_class_diagram_fragment(*detail_levels)
        log.info(f"Generated yUML string representation for '{self._names()}': '{fragment}'")
        uri = self.resolver.resolve(fragment, self.style)
        log.info(f"Return yUML uri for '{self._names()}': '{uri}'")
        return uri
