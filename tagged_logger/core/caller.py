"""
Caller resolution

Finds the function that called a public logging method by walking a
fixed number of frames up the stack.
"""

import inspect
import re
import sys
from types import CodeType, FrameType
from typing import Optional

UNKNOWN_CALLER = "unknown caller"

# resolve_caller <- Logger._log <- Logger.<level>() <- caller
CALLER_DEPTH = 3

# "pkg.mod:Class.method.<locals>.run" -> "Class.method"; plain functions do not match
METHOD_PATTERN = re.compile(r":((?:\w+\.)+\w+)")


def method_qualname(frame: FrameType, code: CodeType) -> Optional[str]:
    """
    Rebuild "Class.method" from the frame's self or cls argument.

    Interpreters before 3.11 have no co_qualname, so the owning class is
    found by looking for this code object along the MRO.
    """
    if not code.co_argcount:
        return None
    first = code.co_varnames[0]
    if first not in ("self", "cls"):
        return None

    value = frame.f_locals.get(first)
    if value is None:
        return None
    owner = value if first == "cls" and isinstance(value, type) else type(value)

    for klass in inspect.getmro(owner):
        attr = klass.__dict__.get(code.co_name)
        func = getattr(attr, "__func__", attr)
        if getattr(func, "__code__", None) is code:
            return f"{klass.__qualname__}.{code.co_name}"
    return f"{owner.__qualname__}.{code.co_name}"


def qualified_name(frame: FrameType) -> Optional[str]:
    """
    Build "<module>:<qualname>" for the code running in a frame.

    Args:
        frame: Stack frame

    Returns:
        Qualified name, or None if the frame has no code object
    """
    code = getattr(frame, "f_code", None)
    if code is None:
        return None

    module = frame.f_globals.get("__name__", "__main__")
    qualname = getattr(code, "co_qualname", None)
    if qualname is None:
        qualname = method_qualname(frame, code) or code.co_name
    return f"{module}:{qualname}"


def shorten(name: str) -> str:
    """Reduce a method-style qualified name to Class.method."""
    match = METHOD_PATTERN.search(name)
    if match:
        return match.group(1)
    return name


def resolve_caller(depth: int = CALLER_DEPTH) -> str:
    """
    Identify the function ``depth`` frames above this one.

    Args:
        depth: Number of frames to skip, counting this function as 0

    Returns:
        Display name of the caller, or "unknown caller"
    """
    try:
        frame = sys._getframe(depth)
    except ValueError:
        return UNKNOWN_CALLER

    try:
        name = qualified_name(frame)
    finally:
        del frame

    if not name:
        return UNKNOWN_CALLER
    return shorten(name)
