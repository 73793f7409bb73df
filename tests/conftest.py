"""Pytest configuration and shared fixtures for the rstdoclet test suite."""

from pathlib import Path
from typing import Generator

import pytest
from fakes import FakeClass, FakeDoc, FakePackage, FakeReporter, FakeRoot, FakeStandardDoclet, FakeTag

import rstdoclet.doclet


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


@pytest.fixture
def reporter() -> FakeReporter:
    """Provide a reporter that records diagnostics."""
    return FakeReporter()


@pytest.fixture
def standard() -> FakeStandardDoclet:
    """Provide a standard doclet that accepts everything."""
    return FakeStandardDoclet(lengths={"-d": 2, "-encoding": 2, "-overview": 2, "-stylesheetfile": 2, "-author": 1})


@pytest.fixture
def registered_standard(standard: FakeStandardDoclet) -> Generator[FakeStandardDoclet, None, None]:
    """Register the standard doclet for the module-level entry points."""
    rstdoclet.doclet.set_standard_doclet(standard)
    try:
        yield standard
    finally:
        rstdoclet.doclet.set_standard_doclet(None)


@pytest.fixture
def sample_tree() -> FakeRoot:
    """Provide a small tree: two classes in one package, one in another.

    Returns
    -------
    FakeRoot
        Root whose classes are ``Widget``, ``Gadget`` (package ``app``) and
        ``Helper`` (package ``util``).

    """
    app = FakePackage(name="app", raw_text="The *app* package.")
    util = FakePackage(name="util", raw_text="Utilities.")
    widget = FakeClass(
        name="Widget",
        raw_text="A widget.",
        containing_package=app,
        tags=[FakeTag(name="@since", raw_text="1.0")],
        member_docs=[
            FakeDoc(name="Widget.size", raw_text="Size in pixels."),
            FakeDoc(
                name="Widget.resize",
                raw_text="Resize the widget.",
                tags=[FakeTag(name="@param", raw_text="width new width")],
            ),
        ],
    )
    gadget = FakeClass(name="Gadget", raw_text="A gadget.", containing_package=app)
    helper = FakeClass(name="Helper", raw_text="A helper.", containing_package=util)
    return FakeRoot(name="root", class_docs=[widget, gadget, helper])


@pytest.fixture
def include_dir(tmp_path: Path) -> Path:
    """Provide a base directory holding an include file."""
    (tmp_path / "snippet.rst").write_text("Included *text*.\n", encoding="utf-8")
    return tmp_path
