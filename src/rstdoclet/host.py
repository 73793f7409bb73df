#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rstdoclet/host.py
"""Interfaces of the host documentation tool.

The doclet never owns the comment tree. The host parses sources, builds the
tree, hands its root to :func:`rstdoclet.doclet.start`, and afterwards runs
its own standard doclet over the same tree to generate pages. These protocols
describe the small part of the host model the doclet touches.

"""

from __future__ import annotations

from typing import Iterable, Protocol, Sequence, runtime_checkable

OptionArray = Sequence[Sequence[str]]


@runtime_checkable
class Tag(Protocol):
    """A structured tag of a comment, such as ``@param`` or ``@see``."""

    name: str
    raw_text: str

    def set_rendered_text(self, html: str) -> None: ...


@runtime_checkable
class Doc(Protocol):
    """A documented element carrying a raw comment and its tags."""

    name: str
    raw_text: str

    @property
    def tags(self) -> Sequence[Tag]: ...

    def set_rendered_text(self, html: str) -> None: ...


class PackageDoc(Doc, Protocol):
    """A package-level comment."""


class ClassDoc(Doc, Protocol):
    """A class comment together with its documented members."""

    @property
    def containing_package(self) -> PackageDoc: ...

    def members(self) -> Iterable[Doc]: ...


@runtime_checkable
class DocErrorReporter(Protocol):
    """Host sink for user-facing diagnostics."""

    def print_error(self, message: str) -> None: ...

    def print_warning(self, message: str) -> None: ...

    def print_notice(self, message: str) -> None: ...


class RootDoc(Doc, DocErrorReporter, Protocol):
    """Root of the comment tree, also the host's reporter."""

    @property
    def options(self) -> OptionArray: ...

    def classes(self) -> Iterable[ClassDoc]: ...


@runtime_checkable
class StandardDoclet(Protocol):
    """The host's own doclet, which generates the pages."""

    def option_length(self, option: str) -> int: ...

    def valid_options(self, options: OptionArray, reporter: DocErrorReporter) -> bool: ...

    def start(self, root: RootDoc) -> bool: ...
