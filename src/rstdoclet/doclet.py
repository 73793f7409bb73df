#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rstdoclet/doclet.py
"""Doclet entry points.

The host documentation tool drives a doclet through four module-level
functions: :func:`language_version`, :func:`option_length`,
:func:`valid_options` and :func:`start`. They are thin shims; the work is
done by :class:`RstDoclet` and :mod:`rstdoclet.options`, which take the host's
standard doclet as an explicit argument.

The host registers its standard doclet once before calling the entry points::

    import rstdoclet.doclet

    rstdoclet.doclet.set_standard_doclet(host.standard_doclet())
    if rstdoclet.doclet.valid_options(options, reporter):
        ok = rstdoclet.doclet.start(root)

"""

from __future__ import annotations

import logging
from typing import Callable

from rstdoclet import options as doclet_options
from rstdoclet.constants import LANGUAGE_VERSION
from rstdoclet.exceptions import RstDocletError
from rstdoclet.host import DocErrorReporter, OptionArray, RootDoc, StandardDoclet
from rstdoclet.iterator import DocletIterator
from rstdoclet.options import DocletOptions
from rstdoclet.renderer import DocutilsRenderer
from rstdoclet.stylesheets import Stylesheets
from rstdoclet.utils.decorators import debug_timer

logger = logging.getLogger(__name__)

_standard_doclet: StandardDoclet | None = None


class RstDoclet:
    """Render reStructuredText comments, then let the standard doclet write pages.

    Parameters
    ----------
    root : RootDoc
        Root of the host comment tree; its options configure the doclet
    iterator : DocletIterator or None, default None
        Tree walker; built from the options when omitted
    stylesheets : Stylesheets or None, default None
        Stylesheet placer; built from the options when omitted
    renderer_factory : callable, default DocutilsRenderer
        Builds the renderer for a run from the options

    """

    def __init__(
        self,
        root: RootDoc,
        iterator: DocletIterator | None = None,
        stylesheets: Stylesheets | None = None,
        renderer_factory: Callable[[DocletOptions], DocutilsRenderer] = DocutilsRenderer,
    ):
        self.root = root
        self.options = DocletOptions.from_options(root.options)
        self.iterator = iterator if iterator is not None else DocletIterator(self.options)
        self.stylesheets = stylesheets if stylesheets is not None else Stylesheets(self.options, root)
        self.renderer_factory = renderer_factory
        logger.debug(f"Doclet options: {self.options.option_values()}")

    def start(self, standard: StandardDoclet) -> bool:
        """Render all comments, run the standard doclet, then place the stylesheet.

        Returns
        -------
        bool
            False if rendering failed, the standard doclet failed, or the
            stylesheet could not be written.

        """
        return self._run(standard) and self._post_process()

    def _run(self, standard: StandardDoclet) -> bool:
        with self.renderer_factory(self.options) as renderer:
            with debug_timer(logger, "Rendering comments"):
                if not self.iterator.render(self.root, renderer):
                    return False
            return standard.start(self.root)

    def _post_process(self) -> bool:
        if self.options.stylesheet_file is not None:
            return True
        return self.stylesheets.copy()


def set_standard_doclet(standard: StandardDoclet | None) -> None:
    """Register the host's standard doclet used by the module-level entry points."""
    global _standard_doclet
    _standard_doclet = standard


def standard_doclet() -> StandardDoclet:
    """Return the registered standard doclet.

    Raises
    ------
    RstDocletError
        If the host has not registered one.

    """
    if _standard_doclet is None:
        raise RstDocletError("No standard doclet registered; call set_standard_doclet() first")
    return _standard_doclet


def language_version() -> str:
    """Return the host language level the doclet supports."""
    return LANGUAGE_VERSION


def option_length(option: str) -> int:
    """Return the number of tokens ``option`` occupies on the host command line."""
    return doclet_options.option_length(option, standard_doclet())


def valid_options(options: OptionArray, reporter: DocErrorReporter) -> bool:
    """Validate the host options; the standard doclet has the final say."""
    return doclet_options.valid_options(options, reporter, standard_doclet())


def start(root: RootDoc) -> bool:
    """Run the doclet over a comment tree."""
    return RstDoclet(root).start(standard_doclet())
