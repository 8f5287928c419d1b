"""Tests for caller resolution"""

import sys

from tagged_logger.core.caller import (
    CALLER_DEPTH,
    UNKNOWN_CALLER,
    method_qualname,
    resolve_caller,
    shorten,
)


def emit():
    """Stands in for Logger._log."""
    return resolve_caller()


def public_call():
    """Stands in for a public logging method."""
    return emit()


def plain_function():
    return public_call()


class Service:
    def start(self):
        return public_call()

    def frame(self):
        return sys._getframe()

    @classmethod
    def create(cls):
        return sys._getframe()


class SubService(Service):
    pass


class TestShorten:
    """Test name shortening."""

    def test_method_name_shortened(self):
        assert shorten("app.server:Service.start") == "Service.start"

    def test_closure_in_method_shortened_to_method(self):
        assert shorten("app:Service.start.<locals>.run") == "Service.start"

    def test_nested_class_method(self):
        assert shorten("app:Outer.Inner.method") == "Outer.Inner.method"

    def test_plain_function_unchanged(self):
        assert shorten("app.server:main") == "app.server:main"

    def test_local_function_unchanged(self):
        assert shorten("app:main.<locals>.inner") == "app:main.<locals>.inner"

    def test_module_level_code_unchanged(self):
        assert shorten("__main__:<module>") == "__main__:<module>"


class TestResolveCaller:
    """Test stack walking at the logger's call depth."""

    def test_depth(self):
        assert CALLER_DEPTH == 3

    def test_plain_function(self):
        assert plain_function().endswith(":plain_function")

    def test_method(self):
        assert Service().start() == "Service.start"

    def test_stack_too_shallow(self):
        assert resolve_caller(depth=100000) == UNKNOWN_CALLER

    def test_never_raises(self):
        assert isinstance(resolve_caller(depth=0), str)

    def test_subclass_reports_defining_class(self):
        assert SubService().start() == "Service.start"


class TestMethodQualname:
    """Rebuilding Class.method from self/cls, for interpreters without co_qualname."""

    def test_instance_method(self):
        frame = Service().frame()
        assert method_qualname(frame, frame.f_code) == "Service.frame"

    def test_inherited_method_uses_defining_class(self):
        frame = SubService().frame()
        assert method_qualname(frame, frame.f_code) == "Service.frame"

    def test_classmethod(self):
        frame = SubService.create()
        assert method_qualname(frame, frame.f_code) == "Service.create"

    def test_calling_test_method(self):
        frame = sys._getframe()
        assert method_qualname(frame, frame.f_code) == "TestMethodQualname.test_calling_test_method"

    def test_module_function_has_no_owner(self):
        def inner():
            return sys._getframe()

        frame = inner()
        assert method_qualname(frame, frame.f_code) is None
