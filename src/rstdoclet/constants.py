#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for rstdoclet.

This module centralizes the option names, defaults and docutils settings used
across the doclet. Constants are organized by category:

1. Type Definitions - Literal types and type aliases
2. Doclet Options - Option names recognized on the host command line
3. Rendering - docutils writer and reporting settings
4. Tags and Overview - Comment tag handling and overview detection
5. Stylesheets - Bundled stylesheet placement
6. Dependencies - Package requirements checked at render time
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

DocutilsWriterName = Literal["html5", "html4css1"]

# =============================================================================
# Doclet Options
# =============================================================================

OPTION_ENCODING = "-encoding"
OPTION_OVERVIEW = "-overview"
OPTION_INCLUDE_BASEDIR = "-include-basedir"
OPTION_ATTRIBUTES = "-attributes"

# Standard host options the doclet reads but does not own
OPTION_STYLESHEET_FILE = "-stylesheetfile"
OPTION_DESTINATION_DIR = "-d"
OPTION_DOC_TITLE = "-doctitle"

# Total tokens (name plus value) of the options owned by the doclet
DOCLET_OPTION_LENGTH = 2

ATTRIBUTE_SEPARATOR = ";"
ATTRIBUTE_ASSIGNMENT = "="
ATTRIBUTE_UNSET_SUFFIX = "!"

MISSING_BASEDIR_WARNING = f"{OPTION_INCLUDE_BASEDIR} must be present for includes or file reference features."

# Highest host language level understood by the doclet
LANGUAGE_VERSION = "1.5"

# =============================================================================
# Rendering
# =============================================================================

DEFAULT_DOCUTILS_WRITER: DocutilsWriterName = "html5"

# docutils message levels: 1 info, 2 warning, 3 error, 4 severe, 5 none
DEFAULT_REPORT_LEVEL = 2
DEFAULT_HALT_LEVEL = 3
DEFAULT_INITIAL_HEADER_LEVEL = 2

# Name given to comment sources so relative includes resolve against the basedir
COMMENT_SOURCE_NAME = "<comment>.rst"

PROJECT_NAME_ATTRIBUTE = "project_name"
PROJECT_DESC_ATTRIBUTE = "project_desc"
PROJECT_VERSION_ATTRIBUTE = "project_version"

# =============================================================================
# Tags and Overview
# =============================================================================

# Tags whose first word is a name (parameter, exception) rather than markup
NAMED_TAGS = frozenset({"@param", "@throws", "@exception", "@raises", "@serialField"})

OVERVIEW_EXTENSIONS = frozenset({".rst", ".rest", ".txt"})

# =============================================================================
# Stylesheets
# =============================================================================

STYLESHEET_FILENAME = "stylesheet.css"
STYLESHEET_RESOURCE_DIR = "resources"

# =============================================================================
# Dependencies
# =============================================================================

DEPS_DOCUTILS = [("docutils", "docutils", ">=0.18")]
DOCUTILS_INSTALL_COMMAND = "pip install 'rstdoclet[rst]'"
