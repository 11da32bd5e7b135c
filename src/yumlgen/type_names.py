"""
Display names for member value types.

yUML member lines read ``+ Name : String``; Python type names are translated
through a lookup table and generic types are written as ``List<Dog>``.
"""

import types
import typing
from typing import Any, Dict, Mapping, Optional

#: Display name for a type, keyed by the type's own ``__name__``.
DEFAULT_TYPE_NAMES: Dict[str, str] = {
    "str": "String",
    "int": "Int",
    "float": "Float",
    "complex": "Complex",
    "bool": "Boolean",
    "bytes": "Bytes",
    "bytearray": "ByteArray",
    "object": "Object",
    "NoneType": "None",
    "list": "List",
    "dict": "Dict",
    "set": "Set",
    "frozenset": "FrozenSet",
    "tuple": "Tuple",
    "datetime": "DateTime",
    "date": "Date",
    "time": "Time",
    "timedelta": "TimeSpan",
    "Decimal": "Decimal",
    "UUID": "Guid",
}


def _is_union(origin: Any) -> bool:
    return origin is typing.Union or origin is getattr(types, "UnionType", None)


def yuml_name(tp: Any, names: Optional[Mapping[str, str]] = None) -> str:
    """
    Render a value type the way it is shown in member lines.

    Examples:
        str -> "String"
        list[Dog] -> "List<Dog>"
        dict[str, int] -> "Dict<String,Int>"
        Optional[Dog] -> "Dog?"

    :param tp: type, generic alias, forward reference or string annotation
    :param names: lookup table, defaults to ``DEFAULT_TYPE_NAMES``
    :return: display name
    """
    if names is None:
        names = DEFAULT_TYPE_NAMES
    if tp is None:
        tp = type(None)
    if tp is typing.Any:
        return "Any"
    if isinstance(tp, str):
        return tp
    if isinstance(tp, typing.ForwardRef):
        return tp.__forward_arg__

    origin = typing.get_origin(tp)
    args = typing.get_args(tp)
    if origin is not None:
        if _is_union(origin):
            members = [arg for arg in args if arg is not type(None)]
            if len(members) == 1 and len(members) < len(args):
                return f"{yuml_name(members[0], names)}?"
            return "Union<" + ",".join(yuml_name(arg, names) for arg in args) + ">"
        if origin is typing.Literal:
            return "Literal"
        base = yuml_name(origin, names)
        if not args:
            return base
        rendered = [yuml_name(arg, names) for arg in args if arg is not Ellipsis]
        return f"{base}<{','.join(rendered)}>"

    name = getattr(tp, "__name__", None) or getattr(tp, "_name", None) or str(tp)
    return names.get(name, name)
