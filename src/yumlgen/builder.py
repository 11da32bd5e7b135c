"""
Diagram fragment builder - Serializes a set of classes into yUML class diagram DSL.

For every class-like type in the requested list the builder emits a class block,
then the inheritance edges to ancestors that are also in the list, then the
association edges for properties whose type (or element type, for collections)
is in the list::

    [Animal|+ Name : String],[Dog|+ Breed : String]^-[Animal|+ Name : String]

Inheritance edges are tracked in a ``RelationshipLedger`` so the same edge is not
emitted twice during one build. Association edges are emitted once per property
and are not deduplicated.
"""

from dataclasses import dataclass, field
from typing import Any, FrozenSet, Iterable, List, Mapping, Optional, Sequence
import logging

from yumlgen.diagram_model import (
    METHOD_LEVELS,
    PROPERTY_LEVELS,
    DetailLevel,
    DiagramStyle,
    Relationship,
    RelationshipKind,
    RelationshipLedger,
    TypeMetadataProvider,
    normalize_detail,
)
from yumlgen.introspection import ReflectionMetadataProvider
from yumlgen.members import MemberSerializer

log = logging.getLogger(__name__)

INHERITANCE_EDGE = "^-"
ASSOCIATION_EDGE = "->"
COLLECTION_EDGE = "1-0..*"


def type_name(tp: Any) -> str:
    return getattr(tp, "__name__", str(tp))


@dataclass
class BuildContext:
    """State of a single ``build`` call."""

    types: List[Any]
    detail: FrozenSet[DetailLevel]
    ledger: RelationshipLedger = field(default_factory=RelationshipLedger)

    def contains(self, tp: Any) -> bool:
        return any(tp == candidate for candidate in self.types)


class DiagramFragmentBuilder:
    """Builds yUML class diagram fragments from Python classes."""

    def __init__(
        self,
        provider: Optional[TypeMetadataProvider] = None,
        type_names: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize the builder.

        :param provider: type metadata source, reflection based by default
        :param type_names: display name lookup table for member value types
        """
        self.provider = provider if provider is not None else ReflectionMetadataProvider()
        self.members = MemberSerializer(self.provider, type_names)

    def build(
        self,
        types: Sequence[Any],
        style: Optional[DiagramStyle] = None,
        detail: Iterable[DetailLevel | str] = (),
    ) -> str:
        """
        Build the diagram fragment for a list of types.

        :param types: types to draw, in order; non class-like entries are not drawn
            as roots but may still be targets of edges
        :param style: style of the requested diagram
        :param detail: detail levels, order and duplicates do not matter
        :return: yUML DSL string, empty if there is no class-like type
        """
        context = BuildContext(types=list(types), detail=normalize_detail(detail))
        blocks = []
        for tp in context.types:
            if not self.provider.is_class_like(tp):
                continue
            blocks.append(
                self.class_block(context, tp) + self.inheritance_edges(context, tp) + self.association_edges(context, tp)
            )
        fragment = ",".join(blocks)
        log.debug(f"Built fragment for {len(blocks)} classes (style {style}, {len(context.ledger)} inheritance edges)")
        return fragment

    def interface_markers(self, context: BuildContext, tp: Any) -> str:
        """
        Markers for the implemented interfaces that are part of the diagram.

        :param context: current build
        :param tp: type to mark
        :return: e.g. ``<<Walker>>;<<Swimmer>>;`` or empty string
        """
        return "".join(
            f"<<{type_name(interface)}>>;" for interface in self.provider.interfaces(tp) if context.contains(interface)
        )

    def class_header(self, context: BuildContext, tp: Any) -> str:
        """Interface markers followed by the type name."""
        return self.interface_markers(context, tp) + type_name(tp)

    def class_block(self, context: BuildContext, tp: Any) -> str:
        """
        Full class block with member compartments allowed by the detail levels.

        :param context: current build
        :param tp: type to serialize
        :return: e.g. ``[Dog|+ Breed : String|+ bark()]``
        """
        parts = [self.class_header(context, tp)]
        if context.detail & PROPERTY_LEVELS:
            properties = self.members.properties(tp, context.detail)
            if properties:
                parts.append(properties)
        if context.detail & METHOD_LEVELS:
            methods = self.members.methods(tp, context.detail)
            if methods:
                parts.append(methods)
        return "[" + "|".join(parts) + "]"

    def inheritance_edges(self, context: BuildContext, tp: type) -> str:
        """
        Inheritance edges from ``tp`` up its ancestor chain.

        Ancestors that are not part of the diagram are skipped, so a grandparent
        is linked directly when the parent is missing. The first edge leaving
        ``tp`` itself is attached to its class block (``[Dog]^-[Animal]``), the
        following ones are written as separate statements.

        :param context: current build
        :param tp: root type
        :return: serialized edges
        """
        edges = []
        child = tp
        ancestor = self.provider.base_type(tp)
        while ancestor is not None:
            if context.contains(ancestor):
                relationship = Relationship(child, ancestor, RelationshipKind.INHERITS)
                if context.ledger.record(relationship):
                    target = self.class_block(context, ancestor)
                    if child is tp and not edges:
                        edges.append(f"{INHERITANCE_EDGE}{target}")
                    else:
                        edges.append(f",{self.class_block(context, child)}{INHERITANCE_EDGE}{target}")
                child = ancestor
            ancestor = self.provider.base_type(ancestor)
        return "".join(edges)

    def association_edges(self, context: BuildContext, tp: type) -> str:
        """
        Association edges for the declared properties of ``tp``.

        A property typed with a diagram type gives ``->``, an iterable generic
        whose first type argument is a diagram type gives ``1-0..*``.

        :param context: current build
        :param tp: root type
        :return: serialized edges
        """
        edges = []
        source = f"[{self.class_header(context, tp)}]"
        for prop in self.provider.properties(tp):
            if context.contains(prop.value_type):
                edges.append(f",{source}{ASSOCIATION_EDGE}{self.class_block(context, prop.value_type)}")
                continue
            element = self.provider.element_type(prop.value_type)
            if element is not None and context.contains(element):
                edges.append(f",{source}{COLLECTION_EDGE}{self.class_block(context, element)}")
        return "".join(edges)
