#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rstdoclet/iterator.py
"""Walk the host comment tree and render every comment.

The walk covers the overview document, every class and its members, and then
every package that contains at least one of those classes. It stops at the
first comment that fails to render.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Protocol

from rstdoclet.constants import OVERVIEW_EXTENSIONS
from rstdoclet.exceptions import FileError, RenderingError
from rstdoclet.host import ClassDoc, Doc, PackageDoc, RootDoc
from rstdoclet.options import DocletOptions

logger = logging.getLogger(__name__)


class DocletRenderer(Protocol):
    """What the iterator needs from a renderer."""

    def render(self, raw_text: str, inline: bool = False) -> str: ...

    def render_doc(self, doc: Doc) -> None: ...


class DocletIterator:
    """Apply a renderer to every comment reachable from a root.

    Parameters
    ----------
    options : DocletOptions
        Parsed options; ``overview`` and ``encoding`` are used here

    """

    def __init__(self, options: DocletOptions):
        self.options = options

    def render(self, root: RootDoc, renderer: DocletRenderer) -> bool:
        """Render the whole tree.

        Returns
        -------
        bool
            False if the overview could not be read or any comment failed to
            render; the failure has been reported to ``root``.

        """
        if not self._render_overview(root, renderer):
            return False

        packages: dict[str, PackageDoc] = {}
        try:
            for class_doc in root.classes():
                package = class_doc.containing_package
                packages.setdefault(package.name, package)
                self._render_class(class_doc, renderer)
            for package in packages.values():
                self._render_doc(package, renderer)
        except RenderingError as e:
            root.print_error(e.message)
            return False
        return True

    def _render_class(self, class_doc: ClassDoc, renderer: DocletRenderer) -> None:
        self._render_doc(class_doc, renderer)
        self._render_all(class_doc.members(), renderer)

    def _render_all(self, docs: Iterable[Doc], renderer: DocletRenderer) -> None:
        for doc in docs:
            self._render_doc(doc, renderer)

    def _render_doc(self, doc: Doc, renderer: DocletRenderer) -> None:
        try:
            renderer.render_doc(doc)
        except RenderingError as e:
            raise RenderingError(f"{doc.name}: {e.message}", e.rendering_stage, e.original_error) from e

    def _render_overview(self, root: RootDoc, renderer: DocletRenderer) -> bool:
        overview = self.options.overview
        if overview is None:
            return True

        if overview.suffix.lower() not in OVERVIEW_EXTENSIONS:
            root.print_notice(
                f"Skipping non-reStructuredText overview {overview}, will be processed by the standard doclet."
            )
            return True

        try:
            text = self._read_overview(overview)
            root.set_rendered_text(renderer.render(text))
        except (FileError, RenderingError) as e:
            root.print_error(e.message)
            return False
        logger.debug(f"Rendered overview {overview}")
        return True

    def _read_overview(self, overview: Path) -> str:
        try:
            return overview.read_text(encoding=self.options.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise FileError(f"Error reading overview file: {e}", file_path=str(overview), original_error=e) from e
