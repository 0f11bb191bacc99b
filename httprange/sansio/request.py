from __future__ import annotations

import typing as t

from ..datastructures import ByteRange
from ..datastructures import EnvironHeaders
from ..datastructures import Headers

if t.TYPE_CHECKING:
    from _typeshed.wsgi import WSGIEnvironment


class Request:
    """Represents the non-IO parts of a HTTP request, the method, the path
    and the headers.

    :param method: The method the request was made with, such as ``GET``.
    :param path: The path part of the URL.
    :param headers: The headers received with the request.
    """

    def __init__(
        self,
        method: str,
        path: str,
        headers: Headers | None = None,
    ) -> None:
        # Request method, such as (GET).
        self.method = method.upper()
        self.path = "/" + path.lstrip("/")
        # The headers received with the request
        self.headers = headers if headers is not None else Headers()

    @classmethod
    def from_environ(cls, environ: WSGIEnvironment) -> Request:
        """从WSGI环境变量中创建请求，headers是environ的只读视图"""
        return cls(
            environ.get("REQUEST_METHOD", "GET"),
            environ.get("PATH_INFO") or "/",
            EnvironHeaders(environ),
        )

    @property
    def range(self) -> ByteRange | None:
        """The parsed ``Range`` header, or ``None`` if it is missing,
        malformed or sent more than once.
        """
        return self.headers.get_typed("Range")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.method} {self.path!r}>"
