"""
Diagram description model - Style options, detail levels and relationships.

This module defines the small value types shared by the fragment builder and the
URI resolver: how the diagram should look (``DiagramStyle``), which members are
serialized (``DetailLevel``), and the relationship triples recorded while the
type graph is walked.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, FrozenSet, Iterable, List, Optional, Protocol, Set


class DiagramType(str, Enum):
    """Visual palette of the rendered diagram."""

    PLAIN = "plain"
    BORING = "boring"
    SCRUFFY = "scruffy"


class Direction(str, Enum):
    """Layout direction of the rendered diagram."""

    LEFT_TO_RIGHT = "LR"
    TOP_TO_BOTTOM = "TD"
    RIGHT_TO_LEFT = "RL"


class Scale(str, Enum):
    """Rendering scale. The value is the percentage sent to the service."""

    TINY = "60"
    SMALL = "80"
    NORMAL = "100"
    BIG = "120"
    HUGE = "180"


class DetailLevel(str, Enum):
    """Member categories that can be serialized into class blocks."""

    PUBLIC_PROPERTIES = "public_properties"
    PRIVATE_PROPERTIES = "private_properties"
    PUBLIC_METHODS = "public_methods"
    PRIVATE_METHODS = "private_methods"


PROPERTY_LEVELS = frozenset({DetailLevel.PUBLIC_PROPERTIES, DetailLevel.PRIVATE_PROPERTIES})
METHOD_LEVELS = frozenset({DetailLevel.PUBLIC_METHODS, DetailLevel.PRIVATE_METHODS})


def normalize_detail(levels: Iterable[DetailLevel | str]) -> FrozenSet[DetailLevel]:
    """Turn any iterable of detail levels (or their values) into a set.

    :param levels: detail levels, in any order, duplicates allowed
    :return: frozen set of ``DetailLevel``
    :raises ValueError: if a value is not a known detail level
    """
    return frozenset(DetailLevel(level) for level in levels)


@dataclass(frozen=True)
class DiagramStyle:
    """Style options, fixed for one diagram request."""

    diagram_type: DiagramType = DiagramType.PLAIN
    direction: Direction = Direction.LEFT_TO_RIGHT
    scale: Scale = Scale.NORMAL

    def settings_fragment(self) -> str:
        """
        Style part of the rendering service URL path.

        :return: e.g. ``plain;dir:LR;scale:100;``
        """
        return f"{self.diagram_type.value};dir:{self.direction.value};scale:{self.scale.value};"


class RelationshipKind(str, Enum):
    """Kind of edge between two classes."""

    INHERITS = "inherits"
    ASSOCIATES = "associates"
    AGGREGATES_MANY = "aggregates_many"


@dataclass(frozen=True)
class Relationship:
    """Directed relationship between two types. Equal iff all fields are equal."""

    source: type
    target: type
    kind: RelationshipKind


@dataclass
class RelationshipLedger:
    """Relationships already emitted during one fragment build."""

    relationships: Set[Relationship] = field(default_factory=set)

    def __contains__(self, relationship: Relationship) -> bool:
        return relationship in self.relationships

    def __len__(self) -> int:
        return len(self.relationships)

    def record(self, relationship: Relationship) -> bool:
        """
        Add a relationship unless it is already known.

        :param relationship: relationship to add
        :return: True if it was new
        """
        if relationship in self.relationships:
            return False
        self.relationships.add(relationship)
        return True


@dataclass(frozen=True)
class PropertyDescriptor:
    """Declared property of a type."""

    name: str
    value_type: Any
    settable: bool = True


@dataclass(frozen=True)
class MethodDescriptor:
    """Declared instance method of a type."""

    name: str
    is_private: bool = False


class TypeMetadataProvider(Protocol):
    """Protocol for type metadata sources used by the fragment builder."""

    def is_class_like(self, tp: Any) -> bool:
        """True if ``tp`` may be emitted as a class block."""
        ...

    def is_interface(self, tp: Any) -> bool:
        """True if ``tp`` is an interface (protocol or pure abstract class)."""
        ...

    def base_type(self, tp: type) -> Optional[type]:
        """Direct base type, or None at the root of the hierarchy."""
        ...

    def interfaces(self, tp: type) -> List[type]:
        """Implemented interfaces, in declaration order."""
        ...

    def properties(self, tp: type) -> List[PropertyDescriptor]:
        """Declared (non-inherited) instance properties, in declaration order."""
        ...

    def methods(self, tp: type) -> List[MethodDescriptor]:
        """Declared (non-inherited), non-special instance methods."""
        ...

    def element_type(self, value_type: Any) -> Optional[Any]:
        """First type argument of an enumerable generic value type, else None."""
        ...
