"""Tests for request contexts."""

from __future__ import annotations

import httpx
import pytest

from imgixify.request import HttpxRequestContext, RequestContext, StaticRequestContext


class TestStaticRequestContext:
    def test_default_insecure(self):
        assert StaticRequestContext().is_secure_request() is False

    def test_secure(self):
        assert StaticRequestContext(True).is_secure_request() is True

    def test_protocol(self):
        assert isinstance(StaticRequestContext(), RequestContext)


class TestHttpxRequestContext:
    def test_https_url(self):
        request = httpx.Request("GET", "https://example.com/gallery")
        assert HttpxRequestContext(request).is_secure_request() is True

    def test_http_url(self):
        request = httpx.Request("GET", "http://example.com/gallery")
        assert HttpxRequestContext(request).is_secure_request() is False

    @pytest.mark.parametrize("header", ["https", "HTTPS", "https, http"])
    def test_forwarded_proto(self, header):
        request = httpx.Request(
            "GET", "http://internal/gallery", headers={"X-Forwarded-Proto": header}
        )
        assert HttpxRequestContext(request).is_secure_request() is True

    def test_forwarded_http(self):
        request = httpx.Request(
            "GET", "http://internal/gallery", headers={"X-Forwarded-Proto": "http"}
        )
        assert HttpxRequestContext(request).is_secure_request() is False

    def test_forwarded_proto_untrusted(self):
        request = httpx.Request(
            "GET", "http://internal/gallery", headers={"X-Forwarded-Proto": "https"}
        )
        context = HttpxRequestContext(request, trust_forwarded_proto=False)
        assert context.is_secure_request() is False

    def test_protocol(self):
        request = httpx.Request("GET", "http://example.com/")
        assert isinstance(HttpxRequestContext(request), RequestContext)
