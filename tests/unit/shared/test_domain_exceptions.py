"""Tests for shared domain exceptions."""
import pytest

from shared.domain import DomainException, EntityNotFoundError, Error, Identifier, ValidationError


def test_domain_exception_defaults_errors_to_message():
    exc = DomainException("broken")

    assert exc.errors == [Error("broken")]
    assert exc.code == "DomainException"
    assert str(exc) == "broken"


def test_with_error_uses_error_message():
    exc = DomainException.with_error(Error("bad name"))

    assert exc.message == "bad name"
    assert exc.errors == [Error("bad name")]


def test_with_errors_uses_first_message():
    exc = DomainException.with_errors([Error("one"), Error("two")])

    assert exc.message == "one"
    assert len(exc.errors) == 2


def test_entity_not_found_message():
    exc = EntityNotFoundError("Category", "abc123")

    assert exc.message == "Category with ID abc123 was not-found"
    assert exc.code == "ENTITY_NOT_FOUND"
    assert isinstance(exc, DomainException)


@pytest.mark.parametrize("value", [None, "", "   "])
def test_identifier_rejects_empty_values(value):
    with pytest.raises(ValidationError):
        Identifier(value)


def test_identifier_equality_by_value():
    assert Identifier("a") == Identifier("a")
    assert hash(Identifier("a")) == hash(Identifier("a"))
    assert Identifier("a") != Identifier("b")
