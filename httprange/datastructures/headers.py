from __future__ import annotations

import collections.abc as cabc
import re
import typing as t

from .._internal import _log
from ..exceptions import BadRequestKeyError
from .mixins import ImmutableHeadersMixin
from .typed import get_typed_header
from .typed import get_typed_header_for

if t.TYPE_CHECKING:
    from _typeshed.wsgi import WSGIEnvironment

_HeaderItems = t.Union[
    "Headers",
    cabc.Mapping[str, t.Any],
    cabc.Iterable[tuple[str, t.Any]],
]


def iter_header_items(
    mapping: _HeaderItems,
) -> cabc.Iterable[tuple[str, t.Any]]:
    """Iterates over the items of a mapping yielding keys and values
    without dropping any from list, tuple or set values."""
    if isinstance(mapping, cabc.Mapping):
        for key, value in mapping.items():
            if isinstance(value, (list, tuple, set)):
                for v in value:
                    yield key, v
            else:
                yield key, value
    else:
        yield from mapping


class Headers:
    """An object that stores some headers. It has a dict-like interface,
    but is ordered, can store the same key multiple times, and iterating
    yields ``(key, value)`` pairs instead of only keys.

    Keys are compared case-insensitively. :meth:`__getitem__` raises
    :exc:`~httprange.exceptions.BadRequestKeyError` for a missing key, which
    is both a :exc:`KeyError` and a *400* :exc:`~httprange.exceptions.BadRequest`.

    Headers with a registered typed header, ``Range`` and ``Content-Range``
    out of the box, can be read and written as objects with :meth:`get_typed`
    and :meth:`set_typed`.

    :param defaults: The list of default values for the :class:`Headers`.
    """

    def __init__(self, defaults: _HeaderItems | None = None) -> None:
        self._list: list[tuple[str, str]] = []

        if defaults is not None:
            self.extend(defaults)

    def extend(self, arg: _HeaderItems | None = None, /, **kwargs: str) -> None:
        """Extend headers in this object with items from another object
        containing header items as well as keyword arguments.

        To replace existing keys instead of extending, use :meth:`set`.
        """
        if arg is not None:
            for key, value in iter_header_items(arg):
                self.add(key, value)

        for key, value in iter_header_items(kwargs):
            self.add(key, value)

    def add(self, key: str, value: t.Any, /) -> None:
        """Add a new header tuple to the list.

        >>> d = Headers()
        >>> d.add('Content-Range', 'bytes 0-499/500')
        """
        self._list.append((key, _str_header_value(value)))

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the first value for ``key`` or ``default``."""
        try:
            return self[key]
        except KeyError:
            return default

    def getlist(self, key: str) -> list[str]:
        """Return all values for ``key``, in order. Empty if the key is missing."""
        ikey = key.lower()
        return [v for k, v in self._list if k.lower() == ikey]

    def __getitem__(self, key: str) -> str:
        ikey = key.lower()

        for k, v in self._list:
            if k.lower() == ikey:
                return v
        raise BadRequestKeyError(key)

    def __contains__(self, key: str) -> bool:
        """Check if a key is present."""
        try:
            self[key]
        except KeyError:
            return False

        return True

    def __iter__(self) -> cabc.Iterator[tuple[str, str]]:
        """Yield ``(key, value)`` tuples."""
        return iter(self._list)

    def __len__(self) -> int:
        return len(self._list)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Headers):
            return NotImplemented
        return list(self) == list(other)

    def remove(self, key: str) -> None:
        """Remove all values for ``key``. Missing keys are ignored."""
        ikey = key.lower()
        self._list[:] = [(k, v) for k, v in self._list if k.lower() != ikey]

    def __delitem__(self, key: str) -> None:
        self.remove(key)

    def set(self, key: str, value: t.Any, /) -> None:
        """Remove all header tuples for ``key`` and add a new one. The newly
        added key either appears at the end of the list if there was no
        entry or replaces the first one.

        :param key: The key to be inserted.
        :param value: The value to be inserted.
        """
        value_str = _str_header_value(value)
        ikey = key.lower()

        for idx, (old_key, _) in enumerate(self._list):
            if old_key.lower() == ikey:
                # replace first occurrence
                self._list[idx] = (key, value_str)
                break
        else:
            # no existing occurrences
            self._list.append((key, value_str))
            return

        # remove remaining occurrences
        self._list[idx + 1 :] = [
            item for item in self._list[idx + 1 :] if item[0].lower() != ikey
        ]

    def __setitem__(self, key: str, value: t.Any) -> None:
        """Like :meth:`set`."""
        self.set(key, value)

    def get_typed(self, key: str) -> t.Any | None:
        """Parse the value of a header with a registered typed header.

        A missing header, a malformed value and a header sent more than once
        all give ``None``.

        >>> Headers([("Range", "bytes=0-499")]).get_typed("range")
        ByteRange(start=0, end=499)

        :param key: The header name.
        :raise KeyError: No typed header is registered for ``key``.
        """
        typed = get_typed_header(key)
        values = self.getlist(key)

        if not values:
            return None

        if len(values) > 1:
            _log("debug", "Ignoring %s header sent %d times", typed.name, len(values))
            return None

        return typed.parse(values[0])

    def set_typed(self, value: t.Any) -> None:
        """Serialize ``value`` with the typed header registered for its type
        and store it under that header's name, replacing existing values.

        :raise TypeError: No typed header accepts the value.
        """
        typed = get_typed_header_for(value)
        self.set(typed.name, typed.format(value))

    def to_wsgi_list(self) -> list[tuple[str, str]]:
        """将headers转换为合适的WSGI格式"""
        return list(self)

    def copy(self) -> Headers:
        return self.__class__(self._list)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class EnvironHeaders(ImmutableHeadersMixin, Headers):
    """Read only version of the headers from a WSGI environment. This
    provides the same interface as :class:`Headers` and is constructed from
    a WSGI environment.

    ``HTTP_RANGE`` is exposed as ``Range``, ``CONTENT_TYPE`` and
    ``CONTENT_LENGTH`` are included when they are set.
    """

    def __init__(self, environ: WSGIEnvironment) -> None:
        super().__init__()
        self.environ = environ

    def __getitem__(self, key: str) -> str:
        ikey = key.upper().replace("-", "_")

        if ikey in {"CONTENT_TYPE", "CONTENT_LENGTH"}:
            value = self.environ.get(ikey)
        else:
            value = self.environ.get(f"HTTP_{ikey}")

        if value is None:
            raise BadRequestKeyError(key)
        return _str_header_value(value)

    def getlist(self, key: str) -> list[str]:
        try:
            return [self[key]]
        except KeyError:
            return []

    def __iter__(self) -> cabc.Iterator[tuple[str, str]]:
        for key, value in self.environ.items():
            if key.startswith("HTTP_") and key not in {
                "HTTP_CONTENT_TYPE",
                "HTTP_CONTENT_LENGTH",
            }:
                yield _unmangle_environ_key(key[5:]), _str_header_value(value)
            elif key in {"CONTENT_TYPE", "CONTENT_LENGTH"} and value:
                yield _unmangle_environ_key(key), _str_header_value(value)

    def __len__(self) -> int:
        return len(list(iter(self)))

    def copy(self) -> Headers:
        return Headers(list(self))


def _unmangle_environ_key(key: str) -> str:
    return "-".join(part.capitalize() for part in key.split("_"))


_newline_re = re.compile(r"[\r\n]")


def _str_header_value(value: t.Any) -> str:
    if not isinstance(value, str):
        value = str(value)

    if _newline_re.search(value) is not None:
        raise ValueError("Header values must not contain newline characters.")
    return value
