"""Tests for introspection.py - Reflection based type metadata."""

import pytest
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict
from yumlgen.diagram_model import MethodDescriptor, PropertyDescriptor
from yumlgen.introspection import classes_in_module

import sample_types
from sample_types import (
    Account,
    Animal,
    Color,
    Dog,
    Labrador,
    Node,
    Owner,
    Point,
    Shape,
    Swimmer,
    Tree,
    Walker,
)


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)
    key: str


class Untyped:
    @property
    def value(self):
        return 1


class Folder:
    @property
    def subfolders(self) -> List["Folder"]:
        return []


class TestClassification:
    """Test class-like and interface detection."""

    @pytest.mark.parametrize("tp", [Animal, Dog, Labrador, Point, Account, FrozenModel])
    def test_class_like(self, provider, tp):
        assert provider.is_class_like(tp) is True

    @pytest.mark.parametrize("tp", [int, str, bool, float, bytes, type(None), Color, Walker, Swimmer, List[Dog], 42])
    def test_not_class_like(self, provider, tp):
        assert provider.is_class_like(tp) is False

    def test_protocol_is_interface(self, provider):
        assert provider.is_interface(Walker) is True

    def test_pure_abstract_class_is_interface(self, provider):
        assert provider.is_interface(Swimmer) is True

    def test_concrete_class_is_not_interface(self, provider):
        assert provider.is_interface(Labrador) is False
        assert provider.is_interface(object) is False


class TestHierarchy:
    """Test base types and interfaces."""

    def test_base_type(self, provider):
        assert provider.base_type(Dog) is Animal
        assert provider.base_type(Animal) is object
        assert provider.base_type(object) is None

    def test_base_type_skips_interfaces(self, provider):
        assert provider.base_type(Labrador) is Dog
        assert provider.base_type(Swimmer) is object

    def test_interfaces_in_declaration_order(self, provider):
        assert provider.interfaces(Labrador) == [Walker, Swimmer]
        assert provider.interfaces(Dog) == []


class TestProperties:
    """Test declared property discovery."""

    def test_annotated_fields(self, provider):
        assert provider.properties(Dog) == [PropertyDescriptor(name="Breed", value_type=str, settable=True)]

    def test_inherited_fields_excluded(self, provider):
        names = [p.name for p in provider.properties(Dog)]
        assert "Name" not in names

    def test_class_vars_excluded(self, provider):
        names = [p.name for p in provider.properties(Owner)]
        assert names == ["Name", "Pet", "Pets", "OtherPets", "Nicknames", "Favorite"]

    def test_property_objects(self, provider):
        props = {p.name: p for p in provider.properties(Account)}
        assert props["Balance"] == PropertyDescriptor(name="Balance", value_type=float, settable=False)
        assert props["Limit"] == PropertyDescriptor(name="Limit", value_type=int, settable=True)
        assert props["_balance"].settable is False
        assert props["Owner"].settable is True

    def test_fields_before_property_objects(self, provider):
        assert [p.name for p in provider.properties(Account)] == ["Owner", "_balance", "Balance", "Limit"]

    def test_frozen_dataclass(self, provider):
        assert [p.settable for p in provider.properties(Point)] == [False, False]

    def test_frozen_pydantic_model(self, provider):
        assert provider.properties(FrozenModel) == [PropertyDescriptor(name="key", value_type=str, settable=False)]

    def test_unannotated_property(self, provider):
        assert provider.properties(Untyped) == [PropertyDescriptor(name="value", value_type=Any, settable=False)]

    def test_forward_references_resolved(self, provider):
        assert provider.properties(Node) == [
            PropertyDescriptor(name="children", value_type=List[Node], settable=True),
            PropertyDescriptor(name="parent", value_type=Node, settable=True),
        ]
        assert [p.value_type for p in provider.properties(Tree)] == [list[Node], Optional[Node]]

    def test_forward_reference_in_getter(self, provider):
        assert provider.properties(Folder) == [
            PropertyDescriptor(name="subfolders", value_type=List[Folder], settable=False)
        ]
        assert provider.element_type(provider.properties(Folder)[0].value_type) is Folder

    def test_dataclass_fields(self, provider):
        props = provider.properties(Shape)
        assert [p.name for p in props] == ["name", "points", "origin"]
        assert props[2].value_type == Optional[Point]


class TestMethods:
    """Test declared method discovery."""

    def test_methods(self, provider):
        assert provider.methods(Account) == [
            MethodDescriptor(name="deposit", is_private=False),
            MethodDescriptor(name="withdraw", is_private=False),
            MethodDescriptor(name="_audit", is_private=True),
            MethodDescriptor(name="__secret", is_private=True),
        ]

    def test_special_members_excluded(self, provider):
        names = [m.name for m in provider.methods(Account)]
        for excluded in ["__init__", "__repr__", "Balance", "Limit", "create", "restore"]:
            assert excluded not in names

    def test_dataclass_generated_methods_excluded(self, provider):
        assert provider.methods(Shape) == []


class TestElementType:
    """Test enumerable generic detection."""

    def test_generic_collections(self, provider):
        assert provider.element_type(List[Dog]) is Dog
        assert provider.element_type(list[Dog]) is Dog
        assert provider.element_type(set[Animal]) is Animal
        assert provider.element_type(dict[str, Dog]) is str

    def test_not_enumerable(self, provider):
        assert provider.element_type(Dog) is None
        assert provider.element_type(list) is None
        assert provider.element_type(Optional[Dog]) is None


def test_classes_in_module():
    classes = classes_in_module(sample_types)
    assert classes[:4] == [sample_types.Walker, sample_types.Swimmer, sample_types.Color, sample_types.Animal]
    assert List not in classes
