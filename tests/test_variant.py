from dataclasses import FrozenInstanceError

import pytest

from zalo.variant import Dual, Single, has_decoration


class FakeStyle:
    def __init__(self, decorated):
        self.decorated = decorated

    def has_decorations(self):
        return self.decorated


def test_single_decoration():
    assert has_decoration(Single(FakeStyle(True))) is True
    assert has_decoration(Single(FakeStyle(False))) is False


@pytest.mark.parametrize(
    "light, dark, expected",
    [(False, False, False), (True, False, True), (False, True, True), (True, True, True)],
)
def test_dual_decoration(light, dark, expected):
    assert has_decoration(Dual(FakeStyle(light), FakeStyle(dark))) is expected


def test_rejects_other_values():
    with pytest.raises(TypeError):
        has_decoration(FakeStyle(True))


def test_variants_compare_by_value():
    assert Single("a") == Single("a")
    assert Dual(light="a", dark="b") == Dual("a", "b")
    assert Dual("a", "b") != Dual("b", "a")


def test_variants_are_frozen():
    variant = Single("a")
    with pytest.raises(FrozenInstanceError):
        variant.value = "b"
    assert variant.value == "a"
    assert variant == Single("a")