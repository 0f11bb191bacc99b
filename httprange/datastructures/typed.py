from __future__ import annotations

import collections.abc as cabc
import typing as t

from .._internal import _log
from .._internal import _to_str
from ..exceptions import MalformedHeader
from .range import ByteRange
from .range import ContentRangeSpec

T = t.TypeVar("T")

_registry: dict[str, TypedHeader[t.Any]] = {}


class TypedHeader(t.Generic[T]):
    """Binds a header name to the functions converting its value to and from
    a Python object. Subclasses set :attr:`name` and :attr:`value_type` and
    implement :meth:`parse_strict` and :meth:`format`.

    Instances are registered with :func:`register_typed_header` and used by
    :meth:`~httprange.datastructures.Headers.get_typed` and
    :meth:`~httprange.datastructures.Headers.set_typed`.
    """

    #: The canonical header name, like ``Content-Range``.
    name: str
    #: The type :meth:`parse` returns and :meth:`format` accepts.
    value_type: type[T]

    def parse_strict(self, raw: str) -> T:
        raise NotImplementedError

    def parse(self, raw: str | bytes) -> T | None:
        """Parse one raw header value. A malformed value gives ``None`` and is
        logged at debug level.
        """
        raw = _to_str(raw)
        try:
            return self.parse_strict(raw)
        except MalformedHeader as e:
            _log("debug", "Ignoring %s header %r: %s", self.name, raw, e.tag)
            return None

    def format(self, value: T) -> str:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


class RangeHeader(TypedHeader[ByteRange]):
    """``Range`` request header, RFC 7233 section 3.1."""

    name = "Range"
    value_type = ByteRange

    def parse_strict(self, raw: str) -> ByteRange:
        return http.parse_byte_range(raw)

    def format(self, value: ByteRange) -> str:
        return http.dump_range_header(value)


class ContentRangeHeader(TypedHeader[ContentRangeSpec]):
    """``Content-Range`` response header, RFC 7233 section 4.2."""

    name = "Content-Range"
    value_type = ContentRangeSpec

    def parse_strict(self, raw: str) -> ContentRangeSpec:
        return http.parse_content_range_spec(raw)

    def format(self, value: ContentRangeSpec) -> str:
        return http.dump_content_range_header(value)


def register_typed_header(header: TypedHeader[t.Any]) -> None:
    """注册一个typed header，已存在的同名header会被替换。header名不区分大小写。"""
    _registry[header.name.lower()] = header


def get_typed_header(name: str) -> TypedHeader[t.Any]:
    """Return the typed header registered for ``name``.

    :raise KeyError: No typed header is registered under that name.
    """
    return _registry[name.lower()]


def get_typed_header_for(value: object) -> TypedHeader[t.Any]:
    """Return the typed header whose :attr:`~TypedHeader.value_type` the
    value is an instance of.

    :raise TypeError: No registered header accepts the value.
    """
    for header in _registry.values():
        if isinstance(value, header.value_type):
            return header
    raise TypeError(f"no typed header for {type(value).__name__!r} values")


def iter_typed_headers() -> cabc.Iterator[TypedHeader[t.Any]]:
    """Iterate over the registered typed headers in registration order."""
    return iter(list(_registry.values()))


register_typed_header(RangeHeader())
register_typed_header(ContentRangeHeader())

# 循环依赖
from .. import http  # noqa: E402
