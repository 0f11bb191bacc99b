from __future__ import annotations

import typing as t


class _Immutable:
    __slots__ = ()

    def __setattr__(self, name: str, value: t.Any) -> None:
        raise AttributeError(f"{type(self).__name__!r} objects are immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__!r} objects are immutable")


class ByteRange(_Immutable):
    """表示``Range``头中的单个byte-range-spec。

    - ``start``和``end``都存在: 闭区间``[start, end]``
    - 只有``start``: 从``start``到资源末尾
    - 只有``end``: suffix range，即资源最后``end+1``个字节，这里只保存数值不做解释

    构造时不做任何校验，``end >= start``只在解析时检查。需要从请求中获取
    该对象时，请使用 :func:`~httprange.http.parse_range_header`。

    :param start: 第一个字节的位置(可选)
    :param end: 最后一个字节的位置(可选)
    """

    __slots__ = ("start", "end")

    start: int | None
    end: int | None

    def __init__(self, start: int | None = None, end: int | None = None) -> None:
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)

    @property
    def is_suffix(self) -> bool:
        """``True`` for a ``bytes=-N`` range."""
        return self.start is None and self.end is not None

    def to_header(self) -> str:
        """Converts the object back into an HTTP header."""
        return http.dump_range_header(self)

    def __str__(self) -> str:
        return self.to_header()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ByteRange):
            return NotImplemented
        return (self.start, self.end) == (other.start, other.end)

    def __hash__(self) -> int:
        return hash((ByteRange, self.start, self.end))

    def __reduce__(self) -> tuple[t.Any, ...]:
        return type(self), (self.start, self.end)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(start={self.start!r}, end={self.end!r})"


class ContentRangeSpec(_Immutable):
    """Base class of the two forms of a ``Content-Range`` value, see
    :class:`Satisfied` and :class:`Unsatisfied`. Not instantiated directly.
    """

    __slots__ = ()

    instance_length: int | None

    def to_header(self) -> str:
        """Converts the object back into an HTTP header."""
        return http.dump_content_range_header(self)

    def __str__(self) -> str:
        return self.to_header()


class Satisfied(ContentRangeSpec):
    """The range that is actually sent, ``bytes 0-499/500``.

    ``first_byte <= last_byte`` is not enforced, here or when parsing.

    :param first_byte: Position of the first byte sent.
    :param last_byte: Position of the last byte sent, inclusive.
    :param instance_length: Total length of the resource, or ``None`` if it
        is unknown (``bytes 0-499/*``).
    """

    __slots__ = ("first_byte", "last_byte", "instance_length")

    first_byte: int
    last_byte: int

    def __init__(
        self, first_byte: int, last_byte: int, instance_length: int | None = None
    ) -> None:
        object.__setattr__(self, "first_byte", first_byte)
        object.__setattr__(self, "last_byte", last_byte)
        object.__setattr__(self, "instance_length", instance_length)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContentRangeSpec):
            return NotImplemented
        if not isinstance(other, Satisfied):
            return False
        return (self.first_byte, self.last_byte, self.instance_length) == (
            other.first_byte,
            other.last_byte,
            other.instance_length,
        )

    def __hash__(self) -> int:
        return hash((Satisfied, self.first_byte, self.last_byte, self.instance_length))

    def __reduce__(self) -> tuple[t.Any, ...]:
        return type(self), (self.first_byte, self.last_byte, self.instance_length)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(first_byte={self.first_byte!r},"
            f" last_byte={self.last_byte!r},"
            f" instance_length={self.instance_length!r})"
        )


class Unsatisfied(ContentRangeSpec):
    """The requested range could not be served, ``bytes */500``. Sent with a
    *416* response, see
    :exc:`~httprange.exceptions.RequestedRangeNotSatisfiable`.

    :param instance_length: Total length of the resource. Required, there is
        no wire form without it.
    """

    __slots__ = ("instance_length",)

    instance_length: int

    def __init__(self, instance_length: int) -> None:
        object.__setattr__(self, "instance_length", instance_length)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContentRangeSpec):
            return NotImplemented
        if not isinstance(other, Unsatisfied):
            return False
        return self.instance_length == other.instance_length

    def __hash__(self) -> int:
        return hash((Unsatisfied, self.instance_length))

    def __reduce__(self) -> tuple[t.Any, ...]:
        return type(self), (self.instance_length,)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(instance_length={self.instance_length!r})"


# 循环依赖
from .. import http  # noqa: E402
