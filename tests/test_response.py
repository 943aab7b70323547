"""Tests for response construction."""

import pytest

from pagewire import build_response, parse_response


class TestBuildResponse:
    """Test the wire format."""

    def test_exact_bytes(self):
        data = build_response(200, "text/plain", "hi")
        assert data == b"HTTP/1.1 200 OK\r\nContent-Type: text/plain\r\nContent-Length: 2\r\n\r\nhi"

    def test_reason_defaults_to_ok_for_any_status(self):
        assert build_response(404, "text/plain", "").startswith(b"HTTP/1.1 404 OK\r\n")

    def test_explicit_reason(self):
        data = build_response(404, "text/plain", "", reason="Not Found")
        assert data.startswith(b"HTTP/1.1 404 Not Found\r\n")

    def test_no_trailing_terminator(self):
        assert build_response(200, "text/plain", "body").endswith(b"\r\n\r\nbody")

    def test_empty_body(self):
        data = build_response(200, "application/javascript", b"")
        assert data.endswith(b"Content-Length: 0\r\n\r\n")

    @pytest.mark.parametrize("body", ["", "plain", "héllo wörld", "日本語", "<p>\r\n</p>"])
    def test_content_length_counts_bytes(self, body):
        parsed = parse_response(build_response(200, "text/html", body))
        assert int(parsed.headers["content-length"]) == len(parsed.body)
        assert parsed.body == body.encode("utf-8")


class TestParseResponse:
    def test_parses_status_and_headers(self):
        parsed = parse_response(build_response(200, "text/html", "<p>x</p>"))
        assert parsed.status == 200
        assert parsed.reason == "OK"
        assert parsed.headers == {"content-type": "text/html", "content-length": "8"}

    def test_empty_input_is_rejected(self):
        with pytest.raises(ValueError):
            parse_response(b"")

    def test_bad_status_line(self):
        with pytest.raises(ValueError, match="invalid status line"):
            parse_response(b"nonsense\r\n\r\n")
