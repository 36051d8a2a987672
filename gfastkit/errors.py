"""Error helpers that turn failures into raised exceptions."""

from __future__ import annotations

import logging
from typing import Any

_log = logging.getLogger(__name__)


class AppError(Exception):
    """A failure reported to the caller with a user-facing message."""


def err_is_nil(err: BaseException | None, *args: str) -> None:
    """Raise AppError if err is set.

    With a message argument, the original error is logged and the message
    is raised in its place; otherwise the error's own text is raised.
    """
    if err is None:
        return
    if args:
        _log.error("%s", err)
        raise AppError(args[0]) from err
    raise AppError(str(err)) from err


def value_is_nil(value: Any, msg: str) -> None:
    """Raise AppError with msg if value is None."""
    if value is None:
        raise AppError(msg)