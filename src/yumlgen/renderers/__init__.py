"""Diagram URI resolution through the yUML service."""

from yumlgen.renderers.yuml_renderer import DiagramUriResolver, YumlClient, YumlServerError
from yumlgen.renderers.factory import get_resolver

__all__ = ["DiagramUriResolver", "YumlClient", "YumlServerError", "get_resolver"]
