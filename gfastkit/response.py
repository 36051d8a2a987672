"""Standard JSON envelopes, template output and redirects for HTTP handlers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import jinja2

SUCCESS_CODE = 0
ERROR_CODE = -1
DEFAULT_REDIRECT_CODE = 302


@dataclass
class Response:
    """The fixed JSON body returned by every API endpoint."""

    code: int
    msg: str
    data: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Return the body with its wire field names."""
        return {"code": self.code, "data": self.data, "message": self.msg}


class ResponseExit(Exception):
    """Raised to stop handler processing once a response has been produced."""

    def __init__(self, response: Response) -> None:
        super().__init__(response.msg)
        self.response = response


@dataclass(frozen=True)
class Redirect:
    """An instruction to redirect the client to another location."""

    location: str
    code: int = DEFAULT_REDIRECT_CODE


def rjson(code: int, msg: str, *args: Any) -> Response:
    """Build a response; the first extra argument, if any, becomes its data."""
    return Response(code=code, msg=msg, data=args[0] if args else None)


def json_exit(code: int, msg: str, *args: Any) -> None:
    """Build a response and raise ResponseExit carrying it."""
    raise ResponseExit(rjson(code, msg, *args))


def success_json(is_exit: bool, msg: str, *args: Any) -> Response:
    """Return a success response, or raise it as ResponseExit when is_exit is set."""
    if is_exit:
        json_exit(SUCCESS_CODE, msg, *args)
    return rjson(SUCCESS_CODE, msg, *args)


def fail_json(is_exit: bool, msg: str, *args: Any) -> Response:
    """Return a failure response, or raise it as ResponseExit when is_exit is set."""
    if is_exit:
        json_exit(ERROR_CODE, msg, *args)
    return rjson(ERROR_CODE, msg, *args)


def sub_str(value: Any, length: int) -> str:
    """Cut the text of value to length characters, marking a cut with "..."."""
    text = "" if value is None else str(value)
    if len(text) > length:
        return text[:length] + "..."
    return text


_env = jinja2.Environment(undefined=jinja2.Undefined)
_env.globals["subStr"] = sub_str
_env.filters["subStr"] = sub_str


def write_tpl(template: str, *args: Mapping[str, Any]) -> str:
    """Render a template string with the given parameter mappings merged in order.

    The helper subStr(value, length) is available both as a function and a filter.
    """
    params: dict[str, Any] = {}
    for mapping in args:
        params.update(mapping)
    return _env.from_string(template).render(params)


def redirect(location: str, *args: int) -> Redirect:
    """Return a redirect to location; an optional first argument sets the status code."""
    code = args[0] if args else DEFAULT_REDIRECT_CODE
    return Redirect(location=location, code=code)