"""Stuff related to application configuration."""

from pydantic import BaseModel, ConfigDict, Field
from typing import TypeAlias, List, Dict

from yumlgen.diagram_model import DetailLevel, DiagramStyle, DiagramType, Direction, Scale
from yumlgen.type_names import DEFAULT_TYPE_NAMES

DEFAULT_BASE_URI = "https://yuml.me/diagram/"
DEFAULT_IMAGE_HOST = "https://yuml.me/"
DEFAULT_CACHE_TTL = 30000

#: General JSON type
JSON: TypeAlias = dict[str, "JSON"] | list["JSON"] | str | int | float | bool | None


class ConfigurationStyle(BaseModel):
    """Default look of generated diagrams."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)
    diagram_type: DiagramType = DiagramType.PLAIN
    direction: Direction = Direction.LEFT_TO_RIGHT
    scale: Scale = Scale.NORMAL

    def to_style(self) -> DiagramStyle:
        return DiagramStyle(diagram_type=self.diagram_type, direction=self.direction, scale=self.scale)


class Configuration(BaseModel):
    style: ConfigurationStyle = Field(default_factory=ConfigurationStyle)
    model_config = ConfigDict(extra="forbid", validate_assignment=True)
    #: Detail levels used when none are given on the command line.
    detail_levels: List[DetailLevel] = []
    #: Diagram endpoint of the yUML service, style and diagram kind are appended.
    base_uri: str = DEFAULT_BASE_URI
    #: Prefix of returned diagram URLs.
    image_host: str = DEFAULT_IMAGE_HOST
    #: Request timeout in seconds.
    timeout: int = 30
    #: Lifetime of cached diagram URLs in seconds.
    cache_ttl: int = DEFAULT_CACHE_TTL
    #: Display names for member value types, merged over the built-in table.
    type_names: Dict[str, str] = {}

    def get_type_names(self) -> Dict[str, str]:
        """Built-in display name table with configured overrides applied."""
        return {**DEFAULT_TYPE_NAMES, **self.type_names}
