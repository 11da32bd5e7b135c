"""Tests for type_names.py - Display names of member value types."""

import datetime
import pytest
from typing import Any, Dict, List, Optional, Sequence, TypeVar, Union
from yumlgen.type_names import DEFAULT_TYPE_NAMES, yuml_name

from sample_types import Dog

T = TypeVar("T")


@pytest.mark.parametrize(
    "tp,expected",
    [
        (str, "String"),
        (int, "Int"),
        (float, "Float"),
        (bool, "Boolean"),
        (bytes, "Bytes"),
        (None, "None"),
        (type(None), "None"),
        (Any, "Any"),
        (datetime.datetime, "DateTime"),
        (Dog, "Dog"),
        (T, "T"),
        ("Forward", "Forward"),
        (List[Dog], "List<Dog>"),
        (list[str], "List<String>"),
        (Dict[str, int], "Dict<String,Int>"),
        (dict[str, List[Dog]], "Dict<String,List<Dog>>"),
        (Sequence[Dog], "Sequence<Dog>"),
        (tuple[int, ...], "Tuple<Int>"),
        (Optional[Dog], "Dog?"),
        (Dog | None, "Dog?"),
        (Union[int, str], "Union<Int,String>"),
        (List["Dog"], "List<Dog>"),
    ],
)
def test_yuml_name(tp, expected):
    assert yuml_name(tp) == expected


def test_custom_table():
    names = {**DEFAULT_TYPE_NAMES, "str": "string"}
    assert yuml_name(List[str], names) == "List<string>"


def test_unknown_names_pass_through():
    assert yuml_name(Dog, {}) == "Dog"
    assert yuml_name(str, {}) == "str"
