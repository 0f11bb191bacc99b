import pytest

from httprange import http
from httprange import exceptions
from httprange.datastructures import ByteRange
from httprange.datastructures import Satisfied
from httprange.datastructures import Unsatisfied

U64_MAX = 18446744073709551615


class TestRange:
    @pytest.mark.parametrize(
        ("value", "expect"),
        [
            ("bytes=0-499", ByteRange(0, 499)),
            ("bytes=0-0", ByteRange(0, 0)),
            ("bytes=99-", ByteRange(99, None)),
            ("bytes=-99", ByteRange(None, 99)),
            ("bytes=-", ByteRange(None, None)),
            ("bytes=007-010", ByteRange(7, 10)),
            (f"bytes=0-{U64_MAX}", ByteRange(0, U64_MAX)),
            (f"bytes={U64_MAX}-", ByteRange(U64_MAX, None)),
            (b"bytes=0-499", ByteRange(0, 499)),
        ],
    )
    def test_parse(self, value, expect):
        assert http.parse_range_header(value) == expect
        assert http.parse_byte_range(value) == expect

    @pytest.mark.parametrize(
        ("value", "error"),
        [
            ("bytes=", exceptions.WrongSegmentCount),
            ("x=0-499", exceptions.MissingPrefix),
            ("", exceptions.MissingPrefix),
            ("bytes=5-4", exceptions.OrderViolation),
            ("bytes=0-499,510-520", exceptions.WrongSegmentCount),
            ("bytes=0-499,510", exceptions.InvalidInteger),
            ("bytes=0--1", exceptions.WrongSegmentCount),
            ("bytes 0-499", exceptions.MissingPrefix),
            ("Bytes=0-499", exceptions.MissingPrefix),
            ("items=0-499", exceptions.MissingPrefix),
            ("bytes=a-1", exceptions.InvalidInteger),
            ("bytes= 0-499", exceptions.InvalidInteger),
            ("bytes=0-499 ", exceptions.InvalidInteger),
            ("bytes=+1-2", exceptions.InvalidInteger),
            ("bytes=1_0-20", exceptions.InvalidInteger),
            ("bytes=١-2", exceptions.InvalidInteger),
            (f"bytes=0-{U64_MAX + 1}", exceptions.InvalidInteger),
        ],
    )
    def test_malformed(self, value, error):
        assert http.parse_range_header(value) is None

        with pytest.raises(error) as exc_info:
            http.parse_byte_range(value)

        assert exc_info.value.name == "Range"
        assert exc_info.value.value == value

    def test_missing(self):
        assert http.parse_range_header(None) is None

    def test_malformed_is_value_error(self):
        with pytest.raises(ValueError):
            http.parse_byte_range("bytes=5-4")

    @pytest.mark.parametrize(
        ("byte_range", "expect"),
        [
            (ByteRange(0, 499), "bytes=0-499"),
            (ByteRange(99, None), "bytes=99-"),
            (ByteRange(None, 99), "bytes=-99"),
            (ByteRange(None, None), "bytes=-"),
        ],
    )
    def test_dump(self, byte_range, expect):
        assert http.dump_range_header(byte_range) == expect
        assert http.parse_byte_range(expect) == byte_range

    def test_dump_does_not_validate(self):
        assert http.dump_range_header(ByteRange(5, 4)) == "bytes=5-4"


class TestContentRange:
    @pytest.mark.parametrize(
        ("value", "expect"),
        [
            ("bytes 0-499/500", Satisfied(0, 499, 500)),
            ("bytes 0-499/*", Satisfied(0, 499, None)),
            ("bytes */500", Unsatisfied(500)),
            ("bytes */0", Unsatisfied(0)),
            (f"bytes 0-{U64_MAX}/{U64_MAX}", Satisfied(0, U64_MAX, U64_MAX)),
            (b"bytes 0-499/500", Satisfied(0, 499, 500)),
        ],
    )
    def test_parse(self, value, expect):
        assert http.parse_content_range_header(value) == expect
        assert http.parse_content_range_spec(value) == expect

    def test_inverted_positions_are_accepted(self):
        # Range rejects end < start, Content-Range takes the server's word
        assert http.parse_content_range_header("bytes 5-4/10") == Satisfied(5, 4, 10)
        assert http.parse_range_header("bytes=5-4") is None

    @pytest.mark.parametrize(
        ("value", "error"),
        [
            ("bytes 0-499", exceptions.WrongSegmentCount),
            ("bytes", exceptions.MissingPrefix),
            ("", exceptions.MissingPrefix),
            ("bytes */*", exceptions.UnsatisfiedNeedsLength),
            ("bytes=0-499/500", exceptions.MissingPrefix),
            ("bytes  0-499/500", exceptions.InvalidInteger),
            ("bytes 0-499/500/600", exceptions.WrongSegmentCount),
            ("bytes 0-1-2/5", exceptions.WrongSegmentCount),
            ("bytes 499/500", exceptions.WrongSegmentCount),
            ("bytes 0-499/", exceptions.InvalidInteger),
            ("bytes -499/500", exceptions.InvalidInteger),
            ("bytes 0-/500", exceptions.InvalidInteger),
            ("bytes */abc", exceptions.InvalidInteger),
            ("bytes 0-499/+500", exceptions.InvalidInteger),
            (f"bytes 0-1/{U64_MAX + 1}", exceptions.InvalidInteger),
        ],
    )
    def test_malformed(self, value, error):
        assert http.parse_content_range_header(value) is None

        with pytest.raises(error) as exc_info:
            http.parse_content_range_spec(value)

        assert exc_info.value.name == "Content-Range"

    def test_missing(self):
        assert http.parse_content_range_header(None) is None

    @pytest.mark.parametrize(
        ("spec", "expect"),
        [
            (Satisfied(0, 499, 500), "bytes 0-499/500"),
            (Satisfied(0, 499), "bytes 0-499/*"),
            (Satisfied(10, 2, 5), "bytes 10-2/5"),
            (Unsatisfied(500), "bytes */500"),
        ],
    )
    def test_dump(self, spec, expect):
        assert http.dump_content_range_header(spec) == expect
        assert http.parse_content_range_spec(expect) == spec

    def test_dump_rejects_other_types(self):
        with pytest.raises(TypeError):
            http.dump_content_range_header(ByteRange(0, 1))
