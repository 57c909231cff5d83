"""
Tests for short code resolution and click counting.
"""
import logging

import pytest

from shortlinks_app.services.errors import BadRequestError, InternalError, NotFoundError
from shortlinks_app.storage.exceptions import StorageError


class TestResolve:

    def test_resolves_and_counts(self, redirect_service, link_store):
        """Each resolution adds exactly one click"""
        link_store.insert("https://example.com", "abc123", is_custom=True)

        assert redirect_service.resolve("abc123") == "https://example.com"
        assert link_store.find_by_code("abc123").click_count == 1

        assert redirect_service.resolve("abc123") == "https://example.com"
        assert link_store.find_by_code("abc123").click_count == 2

    def test_unknown_code(self, redirect_service):
        with pytest.raises(NotFoundError):
            redirect_service.resolve("nope")

    @pytest.mark.parametrize("code", ["", "   ", None])
    def test_blank_code(self, redirect_service, code):
        with pytest.raises(BadRequestError):
            redirect_service.resolve(code)

    def test_unknown_code_counts_nothing(self, redirect_service, link_store):
        link_store.insert("https://example.com", "abc123", is_custom=True)

        with pytest.raises(NotFoundError):
            redirect_service.resolve("other")

        assert link_store.find_by_code("abc123").click_count == 0


class TestClickFailures:

    def test_click_failure_still_redirects(self, redirect_service, link_store, monkeypatch, caplog):
        link_store.insert("https://example.com", "abc123", is_custom=True)

        def unavailable(link_id):
            raise StorageError("down")

        monkeypatch.setattr(link_store, "increment_clicks", unavailable)

        with caplog.at_level(logging.WARNING, logger="shortlinks_app"):
            assert redirect_service.resolve("abc123") == "https://example.com"

        assert "abc123" in caplog.text

    def test_lookup_failure_is_internal(self, redirect_service, link_store, monkeypatch):
        def unavailable(code):
            raise StorageError("down")

        monkeypatch.setattr(link_store, "find_by_code", unavailable)

        with pytest.raises(InternalError):
            redirect_service.resolve("abc123")
