"""Tests for the URL field model and browse helpers."""

from pathlib import Path

from model import UrlField
from ui.widgets import browse_start_path


class TestUrlField:
    """Test UrlField text-change stream."""

    def test_initial_text(self):
        assert UrlField("abc").text == "abc"

    def test_handlers_receive_new_text(self):
        field = UrlField()
        seen = []
        field.on_text_change(seen.append)
        field.set_text("h")
        field.set_text("ht")
        assert seen == ["h", "ht"]

    def test_unchanged_text_does_not_notify(self):
        field = UrlField("same")
        seen = []
        field.on_text_change(seen.append)
        field.set_text("same")
        assert seen == []

    def test_multiple_handlers_in_order(self):
        field = UrlField()
        seen = []
        field.on_text_change(lambda t: seen.append(("a", t)))
        field.on_text_change(lambda t: seen.append(("b", t)))
        field.set_text("x")
        assert seen == [("a", "x"), ("b", "x")]

    def test_focus_request(self):
        field = UrlField()
        assert field.focus_requested is False
        field.request_focus()
        assert field.focus_requested is True


class TestBrowseStartPath:
    """Test browse_start_path() function."""

    def test_existing_directory(self, tmp_path):
        assert browse_start_path(str(tmp_path)) == tmp_path.resolve()

    def test_url_falls_back_to_home(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert browse_start_path("https://example.com/repo") == Path.home()

    def test_blank_falls_back_to_home(self):
        assert browse_start_path("   ") == Path.home()
