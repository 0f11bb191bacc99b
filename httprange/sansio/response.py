from __future__ import annotations

import typing as t
from http import HTTPStatus

from ..datastructures import ContentRangeSpec
from ..datastructures import Headers
from ..exceptions import HTTP_STATUS_CODES


class Response:
    """Represents the non-IO parts of an HTTP response, specifically the
    status and headers but not the body.

    :param status: The status code for the response. Either an int, in
        which case the default status message is added, or a string in
        the form ``{code} {message}``, like ``206 Partial Content``.
        Defaults to 200.
    :param headers: A :class:`~httprange.datastructures.Headers` object,
        or a list of ``(key, value)`` tuples that will be converted to a
        ``Headers`` object.
    """

    default_status = 200

    headers: Headers

    def __init__(
        self,
        status: int | str | HTTPStatus | None = None,
        headers: t.Mapping[str, str | t.Iterable[str]]
        | t.Iterable[tuple[str, str]]
        | None = None,
    ) -> None:
        if isinstance(headers, Headers):
            self.headers = headers
        elif not headers:
            self.headers = Headers()
        else:
            self.headers = Headers(headers)

        if status is None:
            status = self.default_status
        self.status = status

    @property
    def status_code(self) -> int:
        """The HTTP status code as a number."""
        return self._status_code

    @status_code.setter
    def status_code(self, code: int) -> None:
        self.status = code

    @property
    def status(self) -> str:
        """The HTTP status code as a string."""
        return self._status

    @status.setter
    def status(self, value: str | int | HTTPStatus) -> None:
        self._status, self._status_code = self._clean_status(value)

    def _clean_status(self, value: str | int | HTTPStatus) -> tuple[str, int]:
        if isinstance(value, (int, HTTPStatus)):
            status_code = int(value)
        else:
            value = value.strip()
            if not value:
                raise ValueError("Empty status argument")
            code_str, sep, _ = value.partition(" ")
            try:
                status_code = int(code_str)
            except ValueError:
                # only message
                return f"0 {value}", 0
            if sep:
                # code and message
                return value, status_code

        # only code, look up message
        try:
            phrase = HTTP_STATUS_CODES[status_code]
        except KeyError:
            try:
                phrase = HTTPStatus(status_code).phrase
            except ValueError:
                phrase = "unknown"

        status = f"{status_code} {phrase.upper()}"

        return status, status_code

    @property
    def content_range(self) -> ContentRangeSpec | None:
        """The ``Content-Range`` header as a
        :class:`~httprange.datastructures.Satisfied` or
        :class:`~httprange.datastructures.Unsatisfied` spec. ``None`` if the
        header is missing or malformed. Assign ``None`` to remove it.
        """
        return self.headers.get_typed("Content-Range")

    @content_range.setter
    def content_range(self, value: ContentRangeSpec | None) -> None:
        if value is None:
            self.headers.remove("Content-Range")
        else:
            self.headers.set_typed(value)

    @property
    def accept_ranges(self) -> str | None:
        """``Accept-Ranges``头，表示服务器支持的range单位，如``bytes``或``none``"""
        return self.headers.get("Accept-Ranges")

    @accept_ranges.setter
    def accept_ranges(self, value: str | None) -> None:
        if value is None:
            self.headers.remove("Accept-Ranges")
        else:
            self.headers["Accept-Ranges"] = value

    def __repr__(self) -> str:
        return f"<{type(self).__name__} [{self.status}]>"
