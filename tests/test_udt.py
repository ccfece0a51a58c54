from dataclasses import dataclass, field

import pytest

from logixcip.udt import multi_to_dict, udt_to_dict


@dataclass
class SampleUDT:
    Field1: int
    Field2: float


def tagged(name):
    return field(metadata={"tag": name})


@dataclass
class FlatStr:
    TestSint: int = tagged("TestSint")
    TestInt: int = tagged("TestInt")
    TestDint: int = tagged("TestDint")
    TestReal: float = tagged("TestReal")
    TestDintArr0: int = tagged("testdintarr[0]")
    TestDintArr0_0: bool = tagged("testdintarr[0].0")
    TestDintArr0_9: bool = tagged("testdintarr[0].9")
    TestDintArr2: int = tagged("testdintarr[2]")
    TestUDTField1: int = tagged("testudt.field1")
    TestUDTField2: float = tagged("testudt.field2")
    TestUDTArr2Field1: int = tagged("testudtarr[2].field1")
    TestUDTArr2Field2: float = tagged("testudtarr[2].field2")


@dataclass
class NestedStr:
    TestSint: int = tagged("TestSint")
    TestInt: int = tagged("TestInt")
    TestDint: int = tagged("TestDint")
    TestReal: float = tagged("TestReal")
    TestDintArr0: int = tagged("testdintarr[0]")
    TestDintArr0_0: bool = tagged("testdintarr[0].0")
    TestDintArr0_9: bool = tagged("testdintarr[0].9")
    TestDintArr2: int = tagged("testdintarr[2]")
    TestUDT: SampleUDT = tagged("testudt")
    TestUDTArr2Field1: int = tagged("testudtarr[2].field1")
    TestUDTArr2Field2: float = tagged("testudtarr[2].field2")


WANTS = {
    "testsint": 117,
    "testint": 999,
    "testdint": 36,
    "testreal": 93.45,
    "testdintarr[0]": 4351,
    "testdintarr[0].0": True,
    "testdintarr[0].9": False,
    "testdintarr[2]": 4353,
    "testudt.field1": 85456,
    "testudt.field2": 123.456,
    "testudtarr[2].field1": 16,
    "testudtarr[2].field2": 15.0,
}


def test_multi_to_dict_flat():
    read = FlatStr(117, 999, 36, 93.45, 4351, True, False, 4353, 85456, 123.456, 16, 15.0)
    have = multi_to_dict(read)
    assert len(have) == len(WANTS)
    for key, value in have.items():
        assert WANTS[key.lower()] == value


def test_multi_to_dict_nested():
    read = NestedStr(
        117, 999, 36, 93.45, 4351, True, False, 4353, SampleUDT(85456, 123.456), 16, 15.0
    )
    have = multi_to_dict(read)
    assert "testudt.Field1" in have
    assert len(have) == len(WANTS)
    for key, value in have.items():
        assert WANTS[key.lower()] == value


def test_struct_to_dict():
    d = udt_to_dict("prefix", SampleUDT(Field1=15, Field2=5.1))
    assert d == {"prefix.Field1": 15, "prefix.Field2": 5.1}


def test_nested_udt_to_dict():
    @dataclass
    class Outer:
        Inner: SampleUDT
        Count: int

    d = udt_to_dict("tag", Outer(SampleUDT(1, 2.0), 3))
    assert d == {"tag.Inner.Field1": 1, "tag.Inner.Field2": 2.0, "tag.Count": 3}


def test_tuple_fields_are_skipped():
    @dataclass
    class WithArray:
        Values: tuple
        Count: int

    assert udt_to_dict("x", WithArray((1, 2), 5)) == {"x.Count": 5}


def test_untagged_field_uses_empty_name():
    @dataclass
    class Gap:
        Named: int = tagged("Named")
        Plain: int = 0

    assert multi_to_dict(Gap(4, 9)) == {"Named": 4, "": 9}


@pytest.mark.parametrize("bad", [5, {"a": 1}, SampleUDT])
def test_non_dataclass_rejected(bad):
    with pytest.raises(TypeError):
        multi_to_dict(bad)
    with pytest.raises(TypeError):
        udt_to_dict("tag", bad)