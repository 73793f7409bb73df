#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rstdoclet/stylesheets.py
"""Place the bundled stylesheet in the output directory."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from rstdoclet.constants import STYLESHEET_FILENAME, STYLESHEET_RESOURCE_DIR
from rstdoclet.exceptions import OutputWriteError
from rstdoclet.host import DocErrorReporter
from rstdoclet.options import DocletOptions

logger = logging.getLogger(__name__)


class Stylesheets:
    """Copy the default stylesheet unless the user supplied one.

    The bundled stylesheet styles the generated pages as well as the HTML
    docutils produces inside comments (admonitions, tables, literal blocks).

    Parameters
    ----------
    options : DocletOptions
        ``stylesheet_file`` and ``destination_dir`` are used
    reporter : DocErrorReporter
        Sink for write failures

    """

    def __init__(self, options: DocletOptions, reporter: DocErrorReporter):
        self.options = options
        self.reporter = reporter

    @property
    def source(self) -> Path:
        """Path of the bundled stylesheet."""
        return Path(__file__).parent / STYLESHEET_RESOURCE_DIR / STYLESHEET_FILENAME

    @property
    def target(self) -> Path:
        """Where the stylesheet is written."""
        output_dir = self.options.destination_dir if self.options.destination_dir is not None else Path.cwd()
        return output_dir / STYLESHEET_FILENAME

    def copy(self) -> bool:
        """Copy the bundled stylesheet, overwriting any existing file.

        Returns
        -------
        bool
            True when copied or when a user stylesheet makes copying unnecessary;
            False on an I/O error, which is reported.

        """
        if self.options.stylesheet_file is not None:
            logger.debug(f"Using user stylesheet {self.options.stylesheet_file}")
            return True

        target = self.target
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(self.source, target)
        except OSError as e:
            self.reporter.print_error(OutputWriteError(str(target), original_error=e).message)
            return False
        logger.debug(f"Copied stylesheet to {target}")
        return True
