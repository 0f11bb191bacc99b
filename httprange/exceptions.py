"""Errors raised by the header codecs and the HTTP exceptions used when a
range cannot be served.

The strict parsers in :mod:`httprange.http` raise subclasses of
:exc:`MalformedHeader`. The lenient ``parse_*_header`` functions and the typed
header access on :class:`~httprange.datastructures.Headers` turn every one of
them into ``None``, so a malformed header reads exactly like an absent one.
"""
from __future__ import annotations

import typing as t

from markupsafe import escape

from ._internal import RANGE_UNIT

if t.TYPE_CHECKING:
    from .sansio.response import Response


class MalformedHeader(ValueError):
    """A header value does not conform to the supported grammar.

    :param value: The raw header value that failed to parse.
    :param name: The header name, like ``Range``.
    """

    #: Short identifier of the failure, used in log messages.
    tag = "malformed"

    def __init__(self, value: str, name: str | None = None) -> None:
        super().__init__(value, name)
        self.value = value
        self.name = name

    def __str__(self) -> str:
        if self.name is None:
            return f"{self.tag}: {self.value!r}"
        return f"{self.tag} {self.name} header: {self.value!r}"


class MissingPrefix(MalformedHeader):
    """The value does not start with the ``bytes=`` or ``bytes `` unit prefix."""

    tag = "missing prefix"


class WrongSegmentCount(MalformedHeader):
    """Splitting on ``-`` or ``/`` did not produce exactly two segments. A
    comma separated list of ranges ends up here.
    """

    tag = "wrong segment count"


class InvalidInteger(MalformedHeader):
    """A position or length is not ``1*DIGIT`` or does not fit in 64 bits."""

    tag = "invalid integer"


class OrderViolation(MalformedHeader):
    """The last byte position of a ``Range`` is smaller than the first."""

    tag = "order violation"


class UnsatisfiedNeedsLength(MalformedHeader):
    """``bytes */*``: an unsatisfied ``Content-Range`` must carry the length."""

    tag = "unsatisfied needs length"


HTTP_STATUS_CODES = {
    200: "OK",
    206: "Partial Content",
    400: "Bad Request",
    416: "Range Not Satisfiable",
}


class HTTPException(Exception):
    """The base class for all HTTP exceptions. Catch the subclasses
    independently and turn them into a response with :meth:`get_response`,
    or render :meth:`get_body` and :meth:`get_headers` yourself.
    """

    code: int | None = None
    description: str | None = None

    def __init__(
        self,
        description: str | None = None,
        response: Response | None = None,
    ) -> None:
        super().__init__()
        if description is not None:
            self.description = description
        self.response = response

    @property
    def name(self) -> str:
        """The status name."""
        return HTTP_STATUS_CODES.get(self.code, "Unknown Error")  # type: ignore

    def get_description(self) -> str:
        """Get the description."""
        if self.description is None:
            description = ""
        else:
            description = self.description

        return f"<p>{escape(description)}</p>"

    def get_body(self) -> str:
        """Get the HTML body."""
        return (
            "<!doctype html>\n"
            "<html lang=en>\n"
            f"<title>{self.code} {escape(self.name)}</title>\n"
            f"<h1>{escape(self.name)}</h1>\n"
            f"{self.get_description()}\n"
        )

    def get_headers(self) -> list[tuple[str, str]]:
        """Get a list of headers."""
        return [("Content-Type", "text/html; charset=utf-8")]

    def get_response(self) -> Response:
        """Get a sans-IO response carrying the status and headers of this
        exception. The body is available from :meth:`get_body`.
        """
        from .sansio.response import Response

        if self.response is not None:
            return self.response
        return Response(self.code, self.get_headers())

    def __str__(self) -> str:
        code = self.code if self.code is not None else "???"
        return f"{code} {self.name}: {self.description}"

    def __repr__(self) -> str:
        code = self.code if self.code is not None else "???"
        return f"<{type(self).__name__} '{code}: {self.name}'>"


class BadRequest(HTTPException):
    """*400* Bad Request

    Raise if the browser sends something to the application the application
    or server cannot handle.
    """

    code = 400
    description = (
        "The browser (or proxy) sent a request that this server could not understand."
    )


class BadRequestKeyError(BadRequest, KeyError):
    """An exception that is used to signal both a :exc:`KeyError` and a
    :exc:`BadRequest`. Raised by :class:`~httprange.datastructures.Headers`
    for missing keys.
    """

    def __init__(self, arg: object | None = None, *args: t.Any, **kwargs: t.Any):
        super().__init__(*args, **kwargs)

        if arg is None:
            KeyError.__init__(self)
        else:
            KeyError.__init__(self, arg)

    def __str__(self) -> str:
        return KeyError.__str__(self)


class RequestedRangeNotSatisfiable(HTTPException):
    """*416* Range Not Satisfiable

    客户端请求的范围无法被满足时抛出。若给出了资源的总长度，响应头中会带上
    ``Content-Range: bytes */<length>``。

    :param length: 资源的总长度(字节)
    :param units: range的单位，只支持``bytes``
    :param description: 错误描述
    """

    code = 416
    description = "The server cannot provide the requested range."

    def __init__(
        self,
        length: int | None = None,
        units: str = "bytes",
        description: str | None = None,
        response: Response | None = None,
    ) -> None:
        if units != RANGE_UNIT:
            raise ValueError(f"unsupported range unit {units!r}")
        super().__init__(description=description, response=response)
        self.length = length
        self.units = units

    def get_headers(self) -> list[tuple[str, str]]:
        headers = super().get_headers()
        if self.length is not None:
            spec = ds.Unsatisfied(self.length)
            headers.append(("Content-Range", spec.to_header()))
        return headers


# 循环依赖
from . import datastructures as ds  # noqa: E402
