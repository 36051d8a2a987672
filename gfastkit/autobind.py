"""Automatic binding of router methods named bind_<name>_controller."""

from __future__ import annotations

import inspect
import re
from typing import Any

_BIND_PATTERN = re.compile(r"^bind_(.+)_controller$")


def router_auto_bind(ctx: Any, router: Any, group: Any) -> list[str]:
    """Call every bind_<name>_controller method of router with (ctx, group).

    Methods are called in name order. Returns the names of the methods
    called. Raises TypeError if router is not an instance of a user class.
    """
    if (
        inspect.isclass(router)
        or inspect.isroutine(router)
        or inspect.ismodule(router)
        or type(router).__module__ == "builtins"
    ):
        raise TypeError(f"expect struct but a {type(router).__name__}")
    bound: list[str] = []
    for name in sorted(dir(type(router))):
        if not _BIND_PATTERN.match(name):
            continue
        method = getattr(router, name)
        if not callable(method):
            continue
        method(ctx, group)
        bound.append(name)
    return bound