"""Member compartments - Serializes declared properties and methods of a class block."""

from typing import Collection, Mapping, Optional

from yumlgen.diagram_model import DetailLevel, TypeMetadataProvider
from yumlgen.type_names import DEFAULT_TYPE_NAMES, yuml_name


class MemberSerializer:
    """
    Formats the member compartments of a class block.

    Properties without a public setter are shown as private (``-``), the rest as
    public (``+``). Private members come first, then members are sorted by name ignoring case.
    """

    def __init__(self, provider: TypeMetadataProvider, type_names: Optional[Mapping[str, str]] = None):
        """
        Initialize the serializer.

        :param provider: source of declared properties and methods
        :param type_names: display name lookup table for value types
        """
        self.provider = provider
        self.type_names = DEFAULT_TYPE_NAMES if type_names is None else type_names

    def properties(self, tp: type, detail: Collection[DetailLevel]) -> str:
        """
        Serialize declared properties, e.g. ``- Id : Int;+ Name : String``.

        :param tp: type to serialize
        :param detail: requested detail levels
        :return: formatted properties, empty string if none qualify
        """
        show_private = DetailLevel.PRIVATE_PROPERTIES in detail
        show_public = DetailLevel.PUBLIC_PROPERTIES in detail
        lines = []
        for prop in sorted(self.provider.properties(tp), key=lambda p: (p.settable, p.name.lower(), p.name)):
            if prop.settable and show_public:
                lines.append(f"+ {prop.name} : {yuml_name(prop.value_type, self.type_names)}")
            elif not prop.settable and show_private:
                lines.append(f"- {prop.name} : {yuml_name(prop.value_type, self.type_names)}")
        return ";".join(lines)

    def methods(self, tp: type, detail: Collection[DetailLevel]) -> str:
        """
        Serialize declared methods, e.g. ``- _validate();+ bark()``.

        :param tp: type to serialize
        :param detail: requested detail levels
        :return: formatted methods, empty string if none qualify
        """
        show_private = DetailLevel.PRIVATE_METHODS in detail
        show_public = DetailLevel.PUBLIC_METHODS in detail
        lines = []
        for method in sorted(self.provider.methods(tp), key=lambda m: (not m.is_private, m.name.lower(), m.name)):
            if method.is_private and show_private:
                lines.append(f"- {method.name}()")
            elif not method.is_private and show_public:
                lines.append(f"+ {method.name}()")
        return ";".join(lines)
