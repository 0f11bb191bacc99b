from __future__ import annotations

import typing as t


def _immutable_error(self: t.Any) -> t.NoReturn:
    raise TypeError(f"{type(self).__name__!r} objects are immutable")


class ImmutableHeadersMixin:
    """Makes a class (Headers) immutable. We do not mark them as hashable
    though since the only usecase for this datastructure is a view on a
    mutable structure, the WSGI environ.
    """

    def __delitem__(self, key: t.Any) -> None:
        _immutable_error(self)

    def __setitem__(self, key: t.Any, value: t.Any) -> None:
        _immutable_error(self)

    def set(self, key: t.Any, value: t.Any, /) -> None:
        _immutable_error(self)

    def add(self, key: t.Any, value: t.Any, /) -> None:
        _immutable_error(self)

    def extend(self, arg: t.Any = None, /, **kwargs: t.Any) -> None:
        _immutable_error(self)

    def remove(self, key: t.Any) -> None:
        _immutable_error(self)

    def set_typed(self, value: t.Any) -> None:
        _immutable_error(self)
