#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rstdoclet/options.py
"""Doclet option parsing and validation.

The host passes its command line to the doclet as an array of entries, each
entry being an option name followed by its values::

    [["-include-basedir", "/docs"], ["-attributes", "name=Foo;version=1.0"]]

This module turns that array into an immutable :class:`DocletOptions` and
implements the two option hooks of the plugin contract: the option length
query the host uses to tokenize its command line, and option validation.

Only ``-include-basedir`` and ``-attributes`` belong to the doclet. The other
recognized names are standard host options the doclet also reads; the host
still owns their length and validation.

"""

from __future__ import annotations

import codecs
import locale
import logging
from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path
from typing import Any, Callable, ClassVar

from rstdoclet.constants import (
    ATTRIBUTE_SEPARATOR,
    DOCLET_OPTION_LENGTH,
    MISSING_BASEDIR_WARNING,
    OPTION_ATTRIBUTES,
    OPTION_DESTINATION_DIR,
    OPTION_DOC_TITLE,
    OPTION_ENCODING,
    OPTION_INCLUDE_BASEDIR,
    OPTION_OVERVIEW,
    OPTION_STYLESHEET_FILE,
)
from rstdoclet.exceptions import InvalidEncodingError
from rstdoclet.host import DocErrorReporter, OptionArray, StandardDoclet

logger = logging.getLogger(__name__)


class OptionKind(Enum):
    """Closed set of option names the doclet understands."""

    INCLUDE_BASEDIR = OPTION_INCLUDE_BASEDIR
    OVERVIEW = OPTION_OVERVIEW
    ENCODING = OPTION_ENCODING
    ATTRIBUTES = OPTION_ATTRIBUTES
    STYLESHEET_FILE = OPTION_STYLESHEET_FILE
    DESTINATION_DIR = OPTION_DESTINATION_DIR
    DOC_TITLE = OPTION_DOC_TITLE
    UNRECOGNIZED = ""

    @classmethod
    def of(cls, name: str) -> OptionKind:
        """Classify an option name, falling back to ``UNRECOGNIZED``."""
        if not name:
            return cls.UNRECOGNIZED
        try:
            return cls(name)
        except ValueError:
            return cls.UNRECOGNIZED

    @property
    def owned_by_doclet(self) -> bool:
        """Whether the doclet, not the host, defines this option."""
        return self in (OptionKind.INCLUDE_BASEDIR, OptionKind.ATTRIBUTES)


def default_encoding() -> str:
    """Return the canonical name of the platform's preferred encoding."""
    return codecs.lookup(locale.getpreferredencoding(False)).name


def resolve_encoding(name: str) -> str:
    """Look up a charset name and return its canonical codec name.

    Raises
    ------
    InvalidEncodingError
        If the codec registry does not know ``name``.

    """
    try:
        return codecs.lookup(name).name
    except LookupError as e:
        raise InvalidEncodingError(name, original_error=e) from e


def split_attributes(value: str) -> tuple[str, ...]:
    """Split a ``;`` separated attribute list, trimming and dropping empty segments.

    >>> split_attributes(" a ; b;;c ")
    ('a', 'b', 'c')
    """
    return tuple(segment.strip() for segment in value.split(ATTRIBUTE_SEPARATOR) if segment.strip())


@dataclass(frozen=True)
class DocletOptions:
    """Configuration parsed from the host option array.

    Parameters
    ----------
    include_basedir : Path or None, default None
        Root used to resolve relative ``include`` directives in comments.
    overview : Path or None, default None
        Overview document rendered as the root comment.
    encoding : str, default platform encoding
        Charset of source and overview files, stored as the canonical codec name.
    attributes : tuple of str, default ()
        Rendering attributes, each ``name``, ``name=value`` or ``name!``.
    stylesheet_file : Path or None, default None
        User stylesheet; when present the bundled stylesheet is not copied.
    destination_dir : Path or None, default None
        Output directory of the host; the current directory when absent.
    doc_title : str or None, default None
        Title of the documentation set, exposed as ``project_name``.

    """

    NONE: ClassVar[DocletOptions]

    include_basedir: Path | None = field(
        default=None,
        metadata={"help": "Base directory for resolving include directives", "option": OPTION_INCLUDE_BASEDIR},
    )
    overview: Path | None = field(
        default=None,
        metadata={"help": "Overview document to render as the root comment", "option": OPTION_OVERVIEW},
    )
    encoding: str = field(
        default_factory=default_encoding,
        metadata={"help": "Charset of source and overview files", "option": OPTION_ENCODING},
    )
    attributes: tuple[str, ...] = field(
        default=(),
        metadata={"help": "Semicolon separated rendering attributes", "option": OPTION_ATTRIBUTES},
    )
    stylesheet_file: Path | None = field(
        default=None,
        metadata={"help": "User stylesheet replacing the bundled one", "option": OPTION_STYLESHEET_FILE},
    )
    destination_dir: Path | None = field(
        default=None,
        metadata={"help": "Output directory for generated files", "option": OPTION_DESTINATION_DIR},
    )
    doc_title: str | None = field(
        default=None,
        metadata={"help": "Documentation title, exposed as project_name", "option": OPTION_DOC_TITLE},
    )

    def __post_init__(self) -> None:
        """Canonicalize the encoding and freeze the attribute sequence.

        Raises
        ------
        InvalidEncodingError
            If ``encoding`` is not a known charset.

        """
        object.__setattr__(self, "encoding", resolve_encoding(self.encoding))
        object.__setattr__(self, "attributes", tuple(self.attributes))

    @classmethod
    def from_options(cls, options: OptionArray) -> DocletOptions:
        """Parse a host option array.

        The array is scanned once, left to right. Each recognized entry takes
        its single value and overwrites the field, so the last occurrence of a
        name wins. Unrecognized entries, empty entries and entries missing
        their value are left to the host.

        Parameters
        ----------
        options : sequence of sequence of str
            Host option array

        Returns
        -------
        DocletOptions
            Parsed configuration

        Raises
        ------
        InvalidEncodingError
            If ``-encoding`` names an unknown charset.

        """
        values: dict[str, Any] = {}
        for option in options:
            if not option:
                continue
            kind = OptionKind.of(option[0])
            if kind is OptionKind.UNRECOGNIZED:
                continue
            if len(option) < 2:
                logger.debug(f"Ignoring {option[0]} without a value")
                continue
            field_name, convert = _FIELDS[kind]
            values[field_name] = convert(option[1])
        return cls(**values)

    def option_values(self) -> dict[str, Any]:
        """Return the set fields keyed by their option name."""
        return {
            f.metadata["option"]: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) not in (None, ())
        }


_FIELDS: dict[OptionKind, tuple[str, Callable[[str], Any]]] = {
    OptionKind.INCLUDE_BASEDIR: ("include_basedir", Path),
    OptionKind.OVERVIEW: ("overview", Path),
    OptionKind.ENCODING: ("encoding", resolve_encoding),
    OptionKind.ATTRIBUTES: ("attributes", split_attributes),
    OptionKind.STYLESHEET_FILE: ("stylesheet_file", Path),
    OptionKind.DESTINATION_DIR: ("destination_dir", Path),
    OptionKind.DOC_TITLE: ("doc_title", str),
}

DocletOptions.NONE = DocletOptions()


def option_length(option: str, standard: StandardDoclet) -> int:
    """Return the number of tokens an option occupies, name included.

    Parameters
    ----------
    option : str
        Option name as typed on the command line
    standard : StandardDoclet
        Host doclet consulted for every option the doclet does not own

    Returns
    -------
    int
        2 for ``-include-basedir`` and ``-attributes``, otherwise the host's answer

    """
    if OptionKind.of(option).owned_by_doclet:
        return DOCLET_OPTION_LENGTH
    return standard.option_length(option)


def valid_options(options: OptionArray, reporter: DocErrorReporter, standard: StandardDoclet) -> bool:
    """Validate the option array and delegate the verdict to the host.

    A missing ``-include-basedir`` only produces a warning. Otherwise the
    host's own validation result is returned unchanged.

    Parameters
    ----------
    options : sequence of sequence of str
        Host option array
    reporter : DocErrorReporter
        Sink for warnings and errors
    standard : StandardDoclet
        Host doclet performing the actual validation

    Returns
    -------
    bool
        Validation result

    Raises
    ------
    InvalidEncodingError
        If ``-encoding`` names an unknown charset; the error is also reported
        through ``reporter`` before it propagates.

    """
    try:
        doclet_options = DocletOptions.from_options(options)
    except InvalidEncodingError as e:
        reporter.print_error(e.message)
        raise

    if doclet_options.include_basedir is None:
        reporter.print_warning(MISSING_BASEDIR_WARNING)

    return standard.valid_options(options, reporter)
