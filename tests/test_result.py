import dataclasses

import pytest

from sacheatfinder.result import Result


def test_fields_are_kept():
    result = Result(20810792, "ASNAEB", 0x555FC201, "Clear Wanted Level")
    assert result.index == 20810792
    assert result.code == "ASNAEB"
    assert result.jamcrc == 0x555FC201
    assert result.associated_code == "Clear Wanted Level"


def test_equality_ignores_associated_code():
    first = Result(20810792, "ASNAEB", 0x555FC201, "Clear Wanted Level")
    second = Result(20810792, "ASNAEB", 0x555FC201, "Something else")
    assert first == second
    assert hash(first) == hash(second)


@pytest.mark.parametrize(
    "other",
    [
        Result(75396850, "ASNAEB", 0x555FC201),
        Result(20810792, "FHYSTV", 0x555FC201),
        Result(20810792, "ASNAEB", 0x44B34866),
    ],
)
def test_any_compared_field_breaks_equality(other):
    base = Result(20810792, "ASNAEB", 0x555FC201)
    assert (base == other) is False
    assert base == Result(20810792, "ASNAEB", 0x555FC201)


def test_associated_code_defaults_to_empty():
    assert Result(20810792, "ASNAEB", 0x555FC201).associated_code == ""


def test_result_is_immutable():
    result = Result(20810792, "ASNAEB", 0x555FC201)
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.index = 0  # type: ignore[misc]
    assert result.index == 20810792


def test_results_deduplicate_in_a_set():
    found = {
        Result(20810792, "ASNAEB", 0x555FC201, "a"),
        Result(20810792, "ASNAEB", 0x555FC201, "b"),
        Result(147491485, "LJSPQK", 0xFEDA77F7, "c"),
    }
    assert len(found) == 2