"""
Reflection based metadata provider.

Reads declared properties, methods, bases and interfaces straight from Python
classes so the fragment builder never touches ``inspect`` or ``typing`` itself.
"""

import abc
import collections.abc
import enum
import inspect
import sys
import typing
from typing import Any, List, Optional

from yumlgen.diagram_model import MethodDescriptor, PropertyDescriptor

#: Types that are never emitted as class blocks.
SCALAR_TYPES = (int, float, complex, bool, str, bytes, bytearray, type(None))

#: Classes that only provide machinery, never shown as base types or interfaces.
INFRASTRUCTURE_TYPES = (object, abc.ABC, typing.Protocol, typing.Generic)


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def _display_member_name(tp: type, name: str) -> str:
    """Undo private name mangling (``_Dog__secret`` -> ``__secret``)."""
    prefix = f"_{tp.__name__.lstrip('_')}__"
    if name.startswith(prefix):
        return "__" + name[len(prefix) :]
    return name


def _declared_type_hints(tp: type) -> dict:
    """
    Resolve the annotations declared on the class itself.

    Quoted names nested inside generics (``List["Node"]``) are resolved too.
    Inherited annotations are left out.
    """
    own = inspect.get_annotations(tp)
    if not own:
        return {}
    # get_type_hints walks the whole MRO, so resolve a holder carrying only the own annotations
    holder = type(tp.__name__, (), {"__annotations__": dict(own), "__module__": tp.__module__})
    module = sys.modules.get(tp.__module__)
    globalns = dict(vars(module)) if module is not None else {}
    localns = {**vars(tp), tp.__name__: tp}
    return typing.get_type_hints(holder, globalns=globalns, localns=localns)


def _is_frozen(tp: type) -> bool:
    params = getattr(tp, "__dataclass_params__", None)
    if params is not None and params.frozen:
        return True
    # pydantic v2 models keep their settings in a dict called model_config
    model_config = getattr(tp, "model_config", None)
    if isinstance(model_config, dict) and model_config.get("frozen"):
        return True
    return False


class ReflectionMetadataProvider:
    """TypeMetadataProvider backed by runtime introspection of Python classes."""

    def is_interface(self, tp: Any) -> bool:
        """
        Check if a class is an interface.

        Protocol classes are interfaces, and so are abstract classes that only
        declare abstract methods and no fields.

        :param tp: type to check
        :return: True if it is an interface
        """
        if not isinstance(tp, type) or tp in INFRASTRUCTURE_TYPES:
            return False
        if getattr(tp, "_is_protocol", False):
            return True
        if not inspect.isabstract(tp) or inspect.get_annotations(tp):
            return False
        for name, value in vars(tp).items():
            if _is_dunder(name):
                continue
            if callable(value) or isinstance(value, (property, staticmethod, classmethod)):
                if not getattr(value, "__isabstractmethod__", False):
                    return False
        return True

    def is_class_like(self, tp: Any) -> bool:
        if not isinstance(tp, type):
            return False
        if tp in SCALAR_TYPES or issubclass(tp, enum.Enum):
            return False
        return not self.is_interface(tp)

    def base_type(self, tp: type) -> Optional[type]:
        if not isinstance(tp, type) or tp is object:
            return None
        for base in tp.__bases__:
            if base in INFRASTRUCTURE_TYPES or self.is_interface(base):
                continue
            return base
        return object

    def interfaces(self, tp: type) -> List[type]:
        if not isinstance(tp, type):
            return []
        return [base for base in tp.__mro__[1:] if self.is_interface(base)]

    def properties(self, tp: type) -> List[PropertyDescriptor]:
        """
        List declared instance properties.

        Annotated fields come first, then ``property`` objects, both in the order
        they appear in the class body.

        :param tp: type to inspect
        :return: list of property descriptors
        """
        if not isinstance(tp, type):
            return []
        result: List[PropertyDescriptor] = []
        seen = set()
        annotations = _declared_type_hints(tp)
        if annotations:
            frozen = _is_frozen(tp)
            for name, value_type in annotations.items():
                if value_type is typing.ClassVar or typing.get_origin(value_type) is typing.ClassVar:
                    continue
                if isinstance(inspect.getattr_static(tp, name, None), property):
                    continue
                seen.add(name)
                result.append(
                    PropertyDescriptor(
                        name=_display_member_name(tp, name),
                        value_type=value_type,
                        settable=not frozen and not name.startswith("_"),
                    )
                )
        for name, value in vars(tp).items():
            if not isinstance(value, property) or name in seen:
                continue
            value_type = Any
            if value.fget is not None:
                value_type = typing.get_type_hints(value.fget, localns={tp.__name__: tp}).get("return", Any)
            result.append(
                PropertyDescriptor(
                    name=_display_member_name(tp, name),
                    value_type=value_type,
                    settable=value.fset is not None and not name.startswith("_"),
                )
            )
        return result

    def methods(self, tp: type) -> List[MethodDescriptor]:
        if not isinstance(tp, type):
            return []
        result = []
        for name, value in vars(tp).items():
            # staticmethod/classmethod wrappers and properties are not plain functions
            if _is_dunder(name) or not inspect.isfunction(value):
                continue
            result.append(MethodDescriptor(name=_display_member_name(tp, name), is_private=name.startswith("_")))
        return result

    def element_type(self, value_type: Any) -> Optional[Any]:
        origin = typing.get_origin(value_type)
        args = typing.get_args(value_type)
        if not isinstance(origin, type) or not args:
            return None
        if not issubclass(origin, collections.abc.Iterable):
            return None
        return args[0]


def classes_in_module(module) -> List[type]:
    """
    Collect classes defined in a module, in definition order.

    Imported classes are skipped.

    :param module: imported module object
    :return: list of classes
    """
    return [
        value
        for value in vars(module).values()
        if isinstance(value, type) and value.__module__ == module.__name__
    ]
