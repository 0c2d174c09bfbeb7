"""Tests for the Left/Right result type."""
import pytest

from shared.application import Left, Right


def test_left_exposes_left_value():
    result = Left("failure")

    assert result.is_left()
    assert not result.is_right()
    assert result.get_left() == "failure"
    with pytest.raises(ValueError):
        result.get()


def test_right_exposes_right_value():
    result = Right(42)

    assert result.is_right()
    assert not result.is_left()
    assert result.get() == 42
    with pytest.raises(ValueError):
        result.get_left()


def test_fold_picks_the_matching_arm():
    assert Left("e").fold(lambda e: f"left:{e}", lambda v: f"right:{v}") == "left:e"
    assert Right(1).fold(lambda e: f"left:{e}", lambda v: f"right:{v}") == "right:1"
