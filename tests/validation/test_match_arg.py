import pytest

from validation.args import match_arg
from validation.errors import InvalidInput

MODES = ("out", "in", "all", "total")


def test_exact_match_case_insensitive():
    assert match_arg("OUT", MODES) == "out"
    assert match_arg("All", MODES) == "all"


def test_unique_prefix():
    assert match_arg("to", MODES) == "total"
    assert match_arg("o", MODES) == "out"


def test_exact_match_beats_prefix():
    assert match_arg("in", ("in", "inner")) == "in"


def test_none_selects_first_choice():
    assert match_arg(None, MODES) == "out"
    assert match_arg(None, MODES, several_ok=True) == ["out"]


def test_ambiguous_prefix_raises():
    with pytest.raises(InvalidInput, match="ambiguous"):
        match_arg("a", ("all", "any"))


def test_unknown_value_lists_choices():
    with pytest.raises(InvalidInput, match="'out', 'in', 'all', 'total'"):
        match_arg("sideways", MODES)


def test_empty_string_rejected():
    with pytest.raises(InvalidInput):
        match_arg("", MODES)


def test_several_ok():
    assert match_arg(["IN", "tot"], MODES, several_ok=True) == ["in", "total"]
    assert match_arg("in", MODES, several_ok=True) == ["in"]


def test_sequence_requires_several_ok():
    with pytest.raises(InvalidInput):
        match_arg(["in", "out"], MODES)


def test_empty_choices_rejected():
    with pytest.raises(InvalidInput):
        match_arg("x", ())


def test_several_ok_requires_every_entry_to_match():
    with pytest.raises(InvalidInput):
        match_arg(["in", "sideways"], MODES, several_ok=True)
