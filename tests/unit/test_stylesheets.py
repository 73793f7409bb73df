#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_stylesheets.py
"""Unit tests for stylesheet placement."""

import pytest

from rstdoclet.constants import STYLESHEET_FILENAME
from rstdoclet.options import DocletOptions
from rstdoclet.stylesheets import Stylesheets


def make_stylesheets(reporter, *options: list[str]) -> Stylesheets:
    return Stylesheets(DocletOptions.from_options(list(options)), reporter)


@pytest.mark.unit
class TestStylesheets:
    """Tests for copying the bundled stylesheet."""

    def test_bundled_stylesheet_exists(self, reporter):
        """Test that the stylesheet resource ships with the package."""
        source = make_stylesheets(reporter).source

        assert source.is_file()
        assert source.name == STYLESHEET_FILENAME

    def test_copies_into_destination(self, tmp_path, reporter):
        """Test that the default stylesheet is written to the output directory."""
        stylesheets = make_stylesheets(reporter, ["-d", str(tmp_path)])

        assert stylesheets.copy() is True
        target = tmp_path / STYLESHEET_FILENAME
        assert target.read_bytes() == stylesheets.source.read_bytes()
        assert reporter.errors == []

    def test_creates_missing_destination(self, tmp_path, reporter):
        """Test that a missing output directory is created."""
        destination = tmp_path / "api" / "docs"

        assert make_stylesheets(reporter, ["-d", str(destination)]).copy() is True
        assert (destination / STYLESHEET_FILENAME).is_file()

    def test_overwrites_existing_file(self, tmp_path, reporter):
        """Test that an existing stylesheet is replaced."""
        target = tmp_path / STYLESHEET_FILENAME
        target.write_text("/* old */", encoding="utf-8")
        stylesheets = make_stylesheets(reporter, ["-d", str(tmp_path)])

        assert stylesheets.copy() is True
        assert target.read_bytes() == stylesheets.source.read_bytes()

    def test_defaults_to_current_directory(self, tmp_path, reporter, monkeypatch):
        """Test that the current directory is used without ``-d``."""
        monkeypatch.chdir(tmp_path)

        assert make_stylesheets(reporter).copy() is True
        assert (tmp_path / STYLESHEET_FILENAME).is_file()

    def test_user_stylesheet_skips_copy(self, tmp_path, reporter):
        """Test that a user stylesheet means nothing is written."""
        stylesheets = make_stylesheets(reporter, ["-d", str(tmp_path)], ["-stylesheetfile", "custom.css"])

        assert stylesheets.copy() is True
        assert list(tmp_path.iterdir()) == []

    def test_write_failure_reported(self, tmp_path, reporter):
        """Test that an I/O error returns False and is reported."""
        blocker = tmp_path / "not-a-directory"
        blocker.write_text("", encoding="utf-8")

        assert make_stylesheets(reporter, ["-d", str(blocker)]).copy() is False
        assert len(reporter.errors) == 1
        assert "Failed to write output file" in reporter.errors[0]
