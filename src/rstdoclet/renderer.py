#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/rstdoclet/renderer.py
"""reStructuredText comment renderer backed by docutils.

This module adapts docutils to the doclet: it turns the raw markup of a
comment into an HTML fragment and writes the result back into the host's
comment tree. docutils does all of the parsing and HTML generation; the
renderer only prepares the source (indentation cleanup, substitution
definitions for the rendering attributes), anchors ``include`` directives in
the configured base directory, and routes docutils diagnostics to logging.

Rendering attributes become reStructuredText substitutions, so an attribute
``version=1.0`` can be referenced as ``|version|`` inside any comment. The
project attributes ``project_name``, ``project_desc`` and ``project_version``
are always offered when their value is known.

"""

from __future__ import annotations

import inspect
import io
import logging
import re
from dataclasses import dataclass
from types import TracebackType
from typing import Any, Callable, Optional

from rstdoclet.constants import (
    ATTRIBUTE_ASSIGNMENT,
    ATTRIBUTE_UNSET_SUFFIX,
    COMMENT_SOURCE_NAME,
    DEFAULT_DOCUTILS_WRITER,
    DEFAULT_HALT_LEVEL,
    DEFAULT_INITIAL_HEADER_LEVEL,
    DEFAULT_REPORT_LEVEL,
    DEPS_DOCUTILS,
    DOCUTILS_INSTALL_COMMAND,
    NAMED_TAGS,
    PROJECT_DESC_ATTRIBUTE,
    PROJECT_NAME_ATTRIBUTE,
    PROJECT_VERSION_ATTRIBUTE,
)
from rstdoclet.exceptions import RenderingError
from rstdoclet.host import Doc, Tag
from rstdoclet.options import DocletOptions
from rstdoclet.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)

_SINGLE_PARAGRAPH = re.compile(r"\s*<p>(?P<body>.*?)</p>\s*", re.DOTALL)
_SUBSTITUTION_DEFINITION = re.compile(r"^\.\.\s+\|(?P<name>[^|]+)\|", re.MULTILINE)


@dataclass(frozen=True)
class ProjectMetadata:
    """Project information exposed to comments as substitutions.

    Parameters
    ----------
    name : str or None
        Project name, available as ``|project_name|``
    description : str or None
        Short project description, available as ``|project_desc|``
    version : str or None
        Project version, available as ``|project_version|``

    """

    name: Optional[str] = None
    description: Optional[str] = None
    version: Optional[str] = None

    @classmethod
    def from_options(cls, options: DocletOptions) -> ProjectMetadata:
        """Derive metadata from the host options (``-doctitle`` names the project)."""
        return cls(name=options.doc_title)

    def as_attributes(self) -> dict[str, str]:
        """Return the known values keyed by attribute name."""
        values = {
            PROJECT_NAME_ATTRIBUTE: self.name,
            PROJECT_DESC_ATTRIBUTE: self.description,
            PROJECT_VERSION_ATTRIBUTE: self.version,
        }
        return {name: value for name, value in values.items() if value}


def merge_attributes(base: dict[str, str], entries: tuple[str, ...]) -> dict[str, str]:
    """Apply user attribute entries on top of ``base``.

    ``name=value`` sets a value, a bare ``name`` sets a flag with an empty
    value, and ``name!`` removes the attribute. Later entries win.

    >>> merge_attributes({"project_name": "x"}, ("a=1", "flag", "project_name!"))
    {'a': '1', 'flag': ''}
    """
    attributes = dict(base)
    for entry in entries:
        if entry.endswith(ATTRIBUTE_UNSET_SUFFIX) and ATTRIBUTE_ASSIGNMENT not in entry:
            attributes.pop(entry[: -len(ATTRIBUTE_UNSET_SUFFIX)].strip(), None)
            continue
        name, _, value = entry.partition(ATTRIBUTE_ASSIGNMENT)
        name = name.strip()
        if name:
            attributes[name] = value.strip()
    return attributes


def substitution_definitions(attributes: dict[str, str]) -> dict[str, str]:
    """Build reStructuredText substitution definitions for attributes with a value.

    Flags have no value; docutils cannot define an empty substitution, so they
    produce no definition.

    >>> substitution_definitions({"version": "1.0", "beta": ""})
    {'version': '.. |version| replace:: 1.0'}
    """
    definitions = {}
    for name, value in attributes.items():
        if not value:
            continue
        if "|" in name or name != name.strip():
            logger.warning(f"Skipping attribute with invalid substitution name: {name!r}")
            continue
        definitions[name] = f".. |{name}| replace:: {value}"
    return definitions


def defined_substitutions(text: str) -> set[str]:
    """Return the substitution names a comment defines itself."""
    return {" ".join(match.group("name").split()) for match in _SUBSTITUTION_DEFINITION.finditer(text)}


class DocutilsRenderer:
    """Render comment markup to HTML with docutils.

    One renderer serves a whole doclet run. It keeps a docutils message stream
    open for the run; :meth:`cleanup` releases it and must be called once all
    rendering is done. The renderer is a context manager that does so on exit.

    Parameters
    ----------
    options : DocletOptions
        Parsed doclet options (base directory, encoding, attributes)
    metadata : ProjectMetadata or None, default None
        Project information; derived from ``options`` when omitted

    Examples
    --------
        >>> options = DocletOptions.from_options([["-attributes", "version=1.0"]])
        >>> with DocutilsRenderer(options) as renderer:
        ...     html = renderer.render("Released in |version|.", inline=True)
        >>> html
        'Released in 1.0.'

    """

    def __init__(self, options: DocletOptions, metadata: ProjectMetadata | None = None):
        """Initialize the renderer and compute the rendering attributes."""
        self.options = options
        self.metadata = metadata if metadata is not None else ProjectMetadata.from_options(options)
        self.attributes = merge_attributes(self.metadata.as_attributes(), options.attributes)
        self.rendered_count = 0
        self._substitutions = substitution_definitions(self.attributes)
        self._messages = io.StringIO()
        self._engine_parts: tuple[Callable[..., dict[str, str]], type] | None = None
        self._closed = False

    def __enter__(self) -> DocutilsRenderer:
        """Return the renderer for use in a ``with`` block."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Release the session regardless of how the block ended."""
        self.cleanup()

    @property
    def closed(self) -> bool:
        """Whether :meth:`cleanup` has run."""
        return self._closed

    def render_doc(self, doc: Doc) -> None:
        """Render a comment and all of its tags in place.

        The rendered text is written back only after the comment and every tag
        rendered successfully, so a failure leaves the node untouched.

        Raises
        ------
        RenderingError
            If docutils fails on the comment or one of its tags.

        """
        html = self.render(doc.raw_text)
        tags = [(tag, self.render_tag(tag)) for tag in doc.tags]
        doc.set_rendered_text(html)
        for tag, text in tags:
            tag.set_rendered_text(text)

    def render_tag(self, tag: Tag) -> str:
        """Render the text of a tag inline.

        For tags such as ``@param`` whose first word is a name, the name is kept
        verbatim and only the description is rendered.
        """
        if tag.name in NAMED_TAGS:
            parts = tag.raw_text.split(None, 1)
            if len(parts) < 2:
                return tag.raw_text.strip()
            return f"{parts[0]} {self.render(parts[1], inline=True)}"
        return self.render(tag.raw_text, inline=True)

    def render(self, raw_text: str, inline: bool = False) -> str:
        """Render markup to an HTML fragment.

        Parameters
        ----------
        raw_text : str
            reStructuredText source, possibly indented as in a source comment
        inline : bool, default False
            Unwrap the enclosing ``<p>`` when the result is a single paragraph

        Returns
        -------
        str
            HTML fragment

        Raises
        ------
        RenderingError
            If the renderer was cleaned up or docutils fails.
        DependencyError
            If docutils is not installed

        """
        if self._closed:
            raise RenderingError("Renderer used after cleanup", rendering_stage="session")

        text = inspect.cleandoc(raw_text)
        if not text.strip():
            return ""

        publish_parts, writer_class = self._engine()
        source = self._source(text)
        try:
            parts = publish_parts(
                source=source,
                source_path=self._source_path(),
                writer=writer_class(),
                settings_overrides=self._settings(),
            )
        except Exception as e:
            raise RenderingError(f"Failed to render markup: {e}", rendering_stage="docutils", original_error=e) from e
        finally:
            self._drain_messages()

        self.rendered_count += 1
        fragment = parts["fragment"]
        if inline:
            return _unwrap_paragraph(fragment)
        return fragment.strip()

    def cleanup(self) -> None:
        """Release the rendering session. Safe to call more than once."""
        if self._closed:
            return
        self._drain_messages()
        self._messages.close()
        self._closed = True
        logger.debug(f"Renderer released after {self.rendered_count} render(s)")

    @requires_dependencies("rst", DEPS_DOCUTILS, install_command=DOCUTILS_INSTALL_COMMAND)
    def _load_engine(self) -> tuple[Callable[..., dict[str, str]], type]:
        from docutils.core import publish_parts
        from docutils.writers import get_writer_class

        return publish_parts, get_writer_class(DEFAULT_DOCUTILS_WRITER)

    def _engine(self) -> tuple[Callable[..., dict[str, str]], type]:
        if self._engine_parts is None:
            self._engine_parts = self._load_engine()
        return self._engine_parts

    def _source(self, text: str) -> str:
        # a definition in the comment itself wins over an attribute of the same name
        defined = defined_substitutions(text)
        suffix = "\n".join(line for name, line in self._substitutions.items() if name not in defined)
        return f"{text}\n\n{suffix}\n" if suffix else f"{text}\n"

    def _source_path(self) -> str | None:
        # include directives resolve relative to the directory of the source path
        if self.options.include_basedir is None:
            return None
        return str(self.options.include_basedir / COMMENT_SOURCE_NAME)

    def _settings(self) -> dict[str, Any]:
        return {
            "report_level": DEFAULT_REPORT_LEVEL,
            "halt_level": DEFAULT_HALT_LEVEL,
            "warning_stream": self._messages,
            # propagate failures instead of letting the publisher call sys.exit()
            "traceback": True,
            "input_encoding": self.options.encoding,
            "file_insertion_enabled": self.options.include_basedir is not None,
            "doctitle_xform": False,
            "initial_header_level": DEFAULT_INITIAL_HEADER_LEVEL,
            "_disable_config": True,
        }

    def _drain_messages(self) -> None:
        messages = self._messages.getvalue()
        if not messages:
            return
        self._messages.seek(0)
        self._messages.truncate()
        for line in messages.splitlines():
            if line.strip():
                logger.warning(line)


def _unwrap_paragraph(fragment: str) -> str:
    match = _SINGLE_PARAGRAPH.fullmatch(fragment)
    if match is None or "<p>" in match.group("body") or "</p>" in match.group("body"):
        return fragment.strip()
    return match.group("body").strip()
