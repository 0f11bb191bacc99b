from http import HTTPStatus

import pytest

from httprange.datastructures import ByteRange
from httprange.datastructures import Headers
from httprange.datastructures import Satisfied
from httprange.datastructures import Unsatisfied
from httprange.sansio.request import Request
from httprange.sansio.response import Response


class TestRequest:
    def test_range(self):
        request = Request("get", "files/a.bin", Headers([("Range", "bytes=100-")]))
        assert request.method == "GET"
        assert request.path == "/files/a.bin"
        assert request.range == ByteRange(100, None)

    def test_range_missing_or_malformed(self):
        assert Request("GET", "/").range is None
        headers = Headers([("Range", "bytes=0-499,510-520")])
        assert Request("GET", "/", headers).range is None

    def test_from_environ(self):
        request = Request.from_environ(
            {"REQUEST_METHOD": "HEAD", "PATH_INFO": "/v", "HTTP_RANGE": "bytes=-99"}
        )
        assert request.method == "HEAD"
        assert request.path == "/v"
        assert request.range == ByteRange(None, 99)
        assert repr(request) == "<Request HEAD '/v'>"

    def test_from_empty_environ(self):
        request = Request.from_environ({})
        assert request.method == "GET"
        assert request.path == "/"
        assert request.range is None


class TestResponse:
    @pytest.mark.parametrize(
        ("value", "expect"),
        [
            (206, ("206 PARTIAL CONTENT", 206)),
            (HTTPStatus.PARTIAL_CONTENT, ("206 PARTIAL CONTENT", 206)),
            ("206 Partial Content", ("206 Partial Content", 206)),
            ("416", ("416 RANGE NOT SATISFIABLE", 416)),
            ("404", ("404 NOT FOUND", 404)),
            (404, ("404 NOT FOUND", 404)),
            ("999", ("999 UNKNOWN", 999)),
            ("teapot", ("0 teapot", 0)),
        ],
    )
    def test_status(self, value, expect):
        response = Response(value)
        assert (response.status, response.status_code) == expect

    def test_default_status(self):
        assert Response().status == "200 OK"

    def test_empty_status(self):
        with pytest.raises(ValueError):
            Response(" ")

    def test_content_range(self):
        response = Response(206)
        assert response.content_range is None

        response.content_range = Satisfied(0, 499, 1234)
        assert response.headers["Content-Range"] == "bytes 0-499/1234"
        assert response.content_range == Satisfied(0, 499, 1234)

        response.content_range = Unsatisfied(1234)
        assert response.headers.getlist("Content-Range") == ["bytes */1234"]

        response.content_range = None
        assert "Content-Range" not in response.headers

    def test_content_range_malformed(self):
        response = Response(206, [("Content-Range", "bytes */*")])
        assert response.content_range is None

    def test_accept_ranges(self):
        response = Response(headers={"Accept-Ranges": "bytes"})
        assert response.accept_ranges == "bytes"
        response.accept_ranges = "none"
        assert response.headers.getlist("accept-ranges") == ["none"]
        response.accept_ranges = None
        assert response.accept_ranges is None

    def test_headers_object_is_kept(self):
        headers = Headers()
        response = Response(headers=headers)
        response.content_range = Satisfied(1, 2)
        assert headers["Content-Range"] == "bytes 1-2/*"
