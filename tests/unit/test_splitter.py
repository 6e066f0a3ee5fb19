import pytest

import json_validator as jv
from json_validator import Fragment


def test_array_children_keep_source_order_and_depth():
    children = jv.split_array(' 1, "two" ,[3, 4], {"five": 5} ', 2)
    assert children == [
        Fragment("1", 2),
        Fragment('"two"', 2),
        Fragment("[3, 4]", 2),
        Fragment('{"five": 5}', 2),
    ]


def test_empty_array_has_no_children():
    assert jv.split_array("", 0) == []
    assert jv.split_array("   \n ", 0) == []


def test_commas_inside_strings_are_not_delimiters():
    children = jv.split_array('"a,b", "c]d", "e\\",f"', 0)
    assert [c.text for c in children] == ['"a,b"', '"c]d"', '"e\\",f"']


def test_nested_commas_stay_with_their_child():
    children = jv.split_array('[1,[2,3]],{"a":[4,5]}', 0)
    assert [c.text for c in children] == ['[1,[2,3]]', '{"a":[4,5]}']


@pytest.mark.parametrize("interior", ["1,2,", "1,,2", ",1", ",", "1, ,2"])
def test_array_stray_commas(interior):
    with pytest.raises(jv.ExtraCommaError) as ei:
        jv.split_array(interior, 0)
    assert str(ei.value) == "extra comma"
    assert ei.value.kind == "extra_comma"


def test_object_children_are_values_only():
    children = jv.split_object('"a" : 1, "b":[true, null] ,"c:d":{"e":"f"}', 1)
    assert children == [
        Fragment("1", 1),
        Fragment("[true, null]", 1),
        Fragment('{"e":"f"}', 1),
    ]


def test_escaped_quote_in_key():
    children = jv.split_object('"a\\"b": 1', 0)
    assert children == [Fragment("1", 0)]


def test_empty_object_has_no_children():
    assert jv.split_object(" ", 0) == []


@pytest.mark.parametrize("interior", ['"a":1,', '"a":1,,"b":2', ',"a":1'])
def test_object_stray_commas(interior):
    with pytest.raises(jv.ExtraCommaError):
        jv.split_object(interior, 0)


@pytest.mark.parametrize("interior", [
    '"a" 1',
    'a: 1',
    "'a': 1",
    '"a"',
    '"a":',
    '"a":   ',
    '"unterminated: 1',
    '"bad\\q": 1',
])
def test_object_invalid_pairs(interior):
    with pytest.raises(jv.InvalidKeyValueError) as ei:
        jv.split_object(interior, 0)
    assert str(ei.value).startswith("invalid key-value pair")
    assert ei.value.fragment == interior.strip()


def test_pair_error_reported_before_trailing_comma():
    with pytest.raises(jv.InvalidKeyValueError):
        jv.split_object('"a" 1,', 0)


def test_mismatched_closer_is_ignored_while_scanning():
    # the stray } does not close the array scope, so the comma stays nested
    children = jv.split_array('[1}, 2]', 0)
    assert [c.text for c in children] == ['[1}, 2]']
