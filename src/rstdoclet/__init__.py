"""rstdoclet - reStructuredText rendering for documentation comments.

rstdoclet is a doclet: a plugin driven by a documentation-generation host
tool. Before the host writes its pages, the doclet renders the
reStructuredText found in documentation comments to HTML with docutils and
substitutes the HTML back into the host's comment tree.

Doclet Options
--------------
- ``-include-basedir <dir>``: base directory for ``include`` directives
- ``-attributes "<name>=<value>;..."``: substitutions available to comments
- ``-overview <file>``: overview document, rendered when it is reStructuredText
- ``-encoding <charset>``: charset of source and overview files

Examples
--------
Rendering a comment directly:

    >>> from rstdoclet import DocletOptions, DocutilsRenderer
    >>> options = DocletOptions.from_options([["-attributes", "project_version=2.1"]])
    >>> with DocutilsRenderer(options) as renderer:
    ...     html = renderer.render("Since |project_version|.", inline=True)
    >>> html
    'Since 2.1.'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "1.0.0"

from rstdoclet.doclet import (
    RstDoclet,
    language_version,
    option_length,
    set_standard_doclet,
    start,
    valid_options,
)
from rstdoclet.exceptions import (
    DependencyError,
    FileError,
    InvalidEncodingError,
    OutputWriteError,
    RenderingError,
    RstDocletError,
    ValidationError,
)
from rstdoclet.iterator import DocletIterator
from rstdoclet.options import DocletOptions, OptionKind
from rstdoclet.renderer import DocutilsRenderer, ProjectMetadata
from rstdoclet.stylesheets import Stylesheets

__all__ = [
    "__version__",
    "DependencyError",
    "DocletIterator",
    "DocletOptions",
    "DocutilsRenderer",
    "FileError",
    "InvalidEncodingError",
    "OptionKind",
    "OutputWriteError",
    "ProjectMetadata",
    "RenderingError",
    "RstDoclet",
    "RstDocletError",
    "Stylesheets",
    "ValidationError",
    "language_version",
    "option_length",
    "set_standard_doclet",
    "start",
    "valid_options",
]
