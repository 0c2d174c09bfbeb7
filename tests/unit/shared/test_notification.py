"""Tests for the error accumulator."""
import pytest

from shared.domain import DomainException, Error, Notification


class TestNotification:

    def test_create_is_empty(self):
        notification = Notification.create()

        assert notification.has_error() is False
        assert notification.errors == []
        assert notification.first_error() is None

    def test_create_with_single_error(self):
        notification = Notification.create(Error("boom"))

        assert notification.has_error() is True
        assert notification.errors == [Error("boom")]

    def test_first_error_is_first_appended(self):
        notification = Notification.create()
        notification.append(Error("first")).append(Error("second")).append(Error("third"))

        assert notification.first_error() == Error("first")
        assert [e.message for e in notification.errors] == ["first", "second", "third"]

    def test_duplicates_are_kept_in_order(self):
        notification = Notification.create()
        notification.append(Error("same")).append(Error("same"))

        assert notification.errors == [Error("same"), Error("same")]

    def test_append_returns_self(self):
        notification = Notification.create()

        assert notification.append(Error("x")) is notification
        assert notification.append_all([Error("y")]) is notification

    def test_errors_returns_a_copy(self):
        notification = Notification.create(Error("kept"))
        notification.errors.clear()

        assert notification.errors == [Error("kept")]

    def test_create_from_exception_uses_message(self):
        notification = Notification.create_from_exception(RuntimeError("Gateway error"))

        assert len(notification.errors) == 1
        assert notification.first_error().message == "Gateway error"

    def test_create_from_exception_without_message_uses_class_name(self):
        notification = Notification.create_from_exception(KeyError())

        assert notification.first_error().message == "KeyError"

    def test_create_from_domain_exception_keeps_all_errors(self):
        exc = DomainException.with_errors([Error("a"), Error("b")])

        notification = Notification.create_from_exception(exc)

        assert notification.errors == [Error("a"), Error("b")]


class TestError:

    def test_equality_by_value(self):
        assert Error("x") == Error("x")
        assert Error("x") != Error("y")

    def test_is_immutable(self):
        error = Error("x")
        with pytest.raises(AttributeError):
            error.message = "y"
