#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_doclet_iterator.py
"""Unit tests for the comment tree walk."""

import pytest
from fakes import FakeClass, FakeDoc, FakePackage, FakeRoot, RecordingRenderer

from rstdoclet.iterator import DocletIterator
from rstdoclet.options import DocletOptions


def make_iterator(*options: list[str]) -> DocletIterator:
    return DocletIterator(DocletOptions.from_options(list(options)))


@pytest.mark.unit
class TestTreeWalk:
    """Tests for visiting classes, members and packages."""

    def test_visits_every_comment_once(self, sample_tree):
        """Test that classes, members and distinct packages are each rendered once."""
        renderer = RecordingRenderer()

        assert make_iterator().render(sample_tree, renderer) is True
        assert renderer.rendered == [
            "Widget",
            "Widget.size",
            "Widget.resize",
            "Gadget",
            "Helper",
            "app",
            "util",
        ]

    def test_rendered_text_written_back(self, sample_tree):
        """Test that bodies and tags carry the rendered output."""
        make_iterator().render(sample_tree, RecordingRenderer())
        widget = sample_tree.class_docs[0]

        assert widget.rendered_text == "<p>A widget.</p>"
        assert widget.tags[0].rendered_text == "1.0"
        assert widget.member_docs[1].tags[0].rendered_text == "width new width"
        assert widget.containing_package.rendered_text == "<p>The *app* package.</p>"

    def test_empty_tree(self):
        """Test that a tree without classes succeeds."""
        renderer = RecordingRenderer()

        assert make_iterator().render(FakeRoot(name="root"), renderer) is True
        assert renderer.rendered == []

    def test_failure_stops_traversal(self):
        """Test that the first failing comment aborts the walk and is reported."""
        package = FakePackage(name="pkg", raw_text="Package.")
        first = FakeClass(name="First", raw_text="Fine.", containing_package=package)
        broken = FakeClass(
            name="Broken",
            raw_text="Fine.",
            containing_package=package,
            member_docs=[FakeDoc(name="Broken.method", raw_text="FAIL here")],
        )
        last = FakeClass(name="Last", raw_text="Never reached.", containing_package=package)
        root = FakeRoot(name="root", class_docs=[first, broken, last])
        renderer = RecordingRenderer()

        assert make_iterator().render(root, renderer) is False
        assert renderer.rendered == ["First", "Broken"]
        assert first.rendered_text == "<p>Fine.</p>"
        assert broken.member_docs[0].rendered_text is None
        assert last.rendered_text is None
        assert package.rendered_text is None
        assert len(root.errors) == 1
        assert root.errors[0].startswith("Broken.method:")

    def test_package_failure_reported(self):
        """Test that a failing package comment fails the walk."""
        package = FakePackage(name="pkg", raw_text="FAIL")
        root = FakeRoot(name="root", class_docs=[FakeClass(name="A", raw_text="A.", containing_package=package)])

        assert make_iterator().render(root, RecordingRenderer()) is False
        assert root.errors == ["pkg: boom"]


@pytest.mark.unit
class TestOverview:
    """Tests for the overview document."""

    def test_rst_overview_rendered(self, tmp_path):
        """Test that a reStructuredText overview becomes the root comment."""
        overview = tmp_path / "overview.rst"
        overview.write_text("Project overview.", encoding="utf-8")
        root = FakeRoot(name="root")

        assert make_iterator(["-overview", str(overview)]).render(root, RecordingRenderer()) is True
        assert root.rendered_text == "<p>Project overview.</p>"

    def test_overview_read_with_encoding(self, tmp_path):
        """Test that the overview is decoded with the configured charset."""
        overview = tmp_path / "overview.txt"
        overview.write_bytes("Café".encode("utf-16"))
        root = FakeRoot(name="root")

        iterator = make_iterator(["-overview", str(overview)], ["-encoding", "UTF-16"])

        assert iterator.render(root, RecordingRenderer()) is True
        assert root.rendered_text == "<p>Café</p>"

    def test_non_rst_overview_skipped(self, tmp_path):
        """Test that other overview files are left to the standard doclet."""
        overview = tmp_path / "overview.html"
        overview.write_text("<html></html>", encoding="utf-8")
        root = FakeRoot(name="root")

        assert make_iterator(["-overview", str(overview)]).render(root, RecordingRenderer()) is True
        assert root.rendered_text is None
        assert len(root.notices) == 1
        assert "overview.html" in root.notices[0]

    def test_missing_overview_fails(self, tmp_path, sample_tree):
        """Test that an unreadable overview is reported and stops the walk."""
        renderer = RecordingRenderer()

        iterator = make_iterator(["-overview", str(tmp_path / "missing.rst")])

        assert iterator.render(sample_tree, renderer) is False
        assert len(sample_tree.errors) == 1
        assert sample_tree.errors[0].startswith("Error reading overview file")
        assert renderer.rendered == []

    def test_overview_render_failure(self, tmp_path):
        """Test that an overview that fails to render is reported."""
        overview = tmp_path / "overview.rst"
        overview.write_text("FAIL", encoding="utf-8")
        root = FakeRoot(name="root")

        assert make_iterator(["-overview", str(overview)]).render(root, RecordingRenderer()) is False
        assert root.errors == ["boom"]
