"""Tests for typed argument access."""

import dataclasses

import pytest
from botcmd.core.domain.arguments import (
    ArgumentBag,
    BoolArgument,
    ChannelArgument,
    DoubleArgument,
    LongArgument,
    StringArgument,
    UserArgument,
)
from botcmd.core.domain.parameters import ArgType
from botcmd.core.domain.references import ChannelRef, UserRef


@pytest.fixture
def bag() -> ArgumentBag:
    return ArgumentBag(
        {
            "count": LongArgument("count", 3),
            "ratio": DoubleArgument("ratio", 0.5),
            "flag": BoolArgument("flag", True),
            "text": StringArgument("text", "hello"),
            "who": UserArgument("who", UserRef(id="7", name="Bob")),
            "ghost": UserArgument("ghost", None),
            "where": ChannelArgument("where", ChannelRef(id="9")),
        }
    )


def test_typed_accessors(bag: ArgumentBag) -> None:
    assert bag.get_long("count") == 3
    assert bag.get_double("ratio") == 0.5
    assert bag.get_bool("flag") is True
    assert bag.get_string("text") == "hello"
    assert bag.get_user("who") == UserRef(id="7", name="Bob")
    assert bag.get_channel("where") == ChannelRef(id="9")


def test_unresolved_user_reads_as_none(bag: ArgumentBag) -> None:
    assert "ghost" in bag
    assert bag.get_user("ghost") is None


def test_wrong_kind_reads_as_none(bag: ArgumentBag) -> None:
    assert bag.get_string("count") is None
    assert bag.get_long("text") is None
    assert bag.get_double("count") is None
    assert bag.get_bool("text") is None


def test_missing_name_reads_as_none(bag: ArgumentBag) -> None:
    assert bag.get_long("absent") is None
    assert "absent" not in bag


def test_mapping_protocol(bag: ArgumentBag) -> None:
    assert len(bag) == 7
    assert bag["count"].kind is ArgType.LONG
    assert set(bag) == {"count", "ratio", "flag", "text", "who", "ghost", "where"}
    with pytest.raises(KeyError):
        bag["absent"]


def test_bag_copies_its_input() -> None:
    source = {"n": LongArgument("n", 1)}
    bag = ArgumentBag(source)
    source["m"] = LongArgument("m", 2)
    assert "m" not in bag


def test_argument_values_are_frozen() -> None:
    argument = LongArgument("n", 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        argument.value = 2  # type: ignore[misc]


def test_empty_bag() -> None:
    assert len(ArgumentBag()) == 0
