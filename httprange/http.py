"""Parsing and dumping of the RFC 7233 ``Range`` and ``Content-Range`` header
values.

Only the ``bytes`` unit and a single byte range are supported. The
``parse_*_header`` functions follow the usual convention for header parsing:
a missing or malformed value gives ``None``. The ``parse_byte_range`` and
``parse_content_range_spec`` functions raise a
:exc:`~httprange.exceptions.MalformedHeader` subclass naming what is wrong.
"""
from __future__ import annotations

from ._internal import RANGE_UNIT
from ._internal import U64_MAX
from ._internal import _parse_u64
from ._internal import _to_str
from .exceptions import InvalidInteger
from .exceptions import MalformedHeader
from .exceptions import MissingPrefix
from .exceptions import OrderViolation
from .exceptions import UnsatisfiedNeedsLength
from .exceptions import WrongSegmentCount

__all__ = [
    "RANGE_UNIT",
    "U64_MAX",
    "dump_content_range_header",
    "dump_range_header",
    "parse_byte_range",
    "parse_content_range_header",
    "parse_content_range_spec",
    "parse_range_header",
]

_range_prefix = f"{RANGE_UNIT}="
_content_range_prefix = f"{RANGE_UNIT} "


def _optional_position(segment: str, value: str) -> int | None:
    if not segment:
        return None
    number = _parse_u64(segment)
    if number is None:
        raise InvalidInteger(value, "Range")
    return number


def _required_number(segment: str, value: str) -> int:
    number = _parse_u64(segment)
    if number is None:
        raise InvalidInteger(value, "Content-Range")
    return number


def parse_byte_range(value: str | bytes) -> ds.ByteRange:
    """Parse a ``Range`` header value into a
    :class:`~httprange.datastructures.ByteRange`.

    .. code-block:: python

        parse_byte_range("bytes=0-499")
        ByteRange(start=0, end=499)
        parse_byte_range("bytes=-99")
        ByteRange(start=None, end=99)

    Either bound may be left out. ``bytes=-`` is accepted and gives a range
    with neither bound. A list of ranges like ``bytes=0-1,5-6`` is rejected
    rather than reduced to one of its members.

    This is the reverse of :func:`dump_range_header`.

    :param value: The header value. Bytes are decoded as latin1.
    :raise MalformedHeader: One of its subclasses if the value does not match
        ``"bytes=" [ 1*DIGIT ] "-" [ 1*DIGIT ]`` or the last position is
        before the first one.
    """
    value = _to_str(value)

    if not value.startswith(_range_prefix):
        raise MissingPrefix(value, "Range")

    parts = value[len(_range_prefix) :].split("-")

    if len(parts) != 2:
        raise WrongSegmentCount(value, "Range")

    start = _optional_position(parts[0], value)
    end = _optional_position(parts[1], value)

    if start is not None and end is not None and end < start:
        raise OrderViolation(value, "Range")

    return ds.ByteRange(start, end)


def parse_range_header(value: str | bytes | None) -> ds.ByteRange | None:
    """解析``Range``头，返回:class:`~httprange.datastructures.ByteRange`对象。
    值缺失或格式错误时返回``None``，与请求中没有该头的处理方式相同。

    :param value: 需要解析的``Range``头
    """
    if value is None:
        return None

    try:
        return parse_byte_range(value)
    except MalformedHeader:
        return None


def dump_range_header(byte_range: ds.ByteRange) -> str:
    """Produce a ``Range`` header value from a
    :class:`~httprange.datastructures.ByteRange`. Absent bounds are left out,
    no validation is done.

    This is the reverse of :func:`parse_byte_range`.
    """
    start = "" if byte_range.start is None else str(byte_range.start)
    end = "" if byte_range.end is None else str(byte_range.end)
    return f"{_range_prefix}{start}-{end}"


def parse_content_range_spec(value: str | bytes) -> ds.ContentRangeSpec:
    """Parse a ``Content-Range`` header value into a
    :class:`~httprange.datastructures.Satisfied` or
    :class:`~httprange.datastructures.Unsatisfied` spec.

    .. code-block:: python

        parse_content_range_spec("bytes 0-499/500")
        Satisfied(first_byte=0, last_byte=499, instance_length=500)
        parse_content_range_spec("bytes 0-499/*")
        Satisfied(first_byte=0, last_byte=499, instance_length=None)
        parse_content_range_spec("bytes */500")
        Unsatisfied(instance_length=500)

    The order of ``first_byte`` and ``last_byte`` is not checked. Values are
    normally produced by the server itself and are taken as they are.

    This is the reverse of :func:`dump_content_range_header`.

    :param value: The header value. Bytes are decoded as latin1.
    :raise MalformedHeader: One of its subclasses if the value does not match
        ``"bytes " ( 1*DIGIT "-" 1*DIGIT / "*" ) "/" ( 1*DIGIT / "*" )`` or is
        ``bytes */*``.
    """
    value = _to_str(value)

    if not value.startswith(_content_range_prefix):
        raise MissingPrefix(value, "Content-Range")

    parts = value[len(_content_range_prefix) :].split("/")

    if len(parts) != 2:
        raise WrongSegmentCount(value, "Content-Range")

    resp_range, length_str = parts

    if length_str == "*":
        length = None
    else:
        length = _required_number(length_str, value)

    if resp_range == "*":
        if length is None:
            raise UnsatisfiedNeedsLength(value, "Content-Range")
        return ds.Unsatisfied(length)

    positions = resp_range.split("-")

    if len(positions) != 2:
        raise WrongSegmentCount(value, "Content-Range")

    first_byte = _required_number(positions[0], value)
    last_byte = _required_number(positions[1], value)
    return ds.Satisfied(first_byte, last_byte, length)


def parse_content_range_header(
    value: str | bytes | None,
) -> ds.ContentRangeSpec | None:
    """解析``Content-Range``头。值缺失或格式错误时返回``None``。

    :param value: 需要解析的``Content-Range``头
    """
    if value is None:
        return None

    try:
        return parse_content_range_spec(value)
    except MalformedHeader:
        return None


def dump_content_range_header(spec: ds.ContentRangeSpec) -> str:
    """Produce a ``Content-Range`` header value. An unknown instance length
    of a satisfied range is written as ``*``.

    This is the reverse of :func:`parse_content_range_spec`.
    """
    if isinstance(spec, ds.Unsatisfied):
        return f"{_content_range_prefix}*/{spec.instance_length}"

    if isinstance(spec, ds.Satisfied):
        length = "*" if spec.instance_length is None else spec.instance_length
        return (
            f"{_content_range_prefix}{spec.first_byte}-{spec.last_byte}/{length}"
        )

    raise TypeError(f"not a content range spec: {spec!r}")


# 循环依赖
from . import datastructures as ds  # noqa: E402
