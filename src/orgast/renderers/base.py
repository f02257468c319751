#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class that renderers inherit from.
A renderer turns an org :class:`~orgast.ast.nodes.Document` back into text
and writes it to a path or stream.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Optional, Union

from orgast.ast.nodes import Document
from orgast.exceptions import InvalidOptionsError
from orgast.options.base import BaseRendererOptions
from orgast.utils.io_utils import write_text

RenderOutput = Union[str, Path, IO[bytes], IO[str]]


class BaseRenderer(ABC):
    """Abstract base class for AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Renderer options

    Examples
    --------
    Creating a custom renderer:

        >>> class TitleRenderer(BaseRenderer):
        ...     def render(self, doc, output):
        ...         self.write_text_output(self.render_to_string(doc), output)
        ...
        ...     def render_to_string(self, doc):
        ...         return doc.keywords.get("TITLE", "")

    """

    def __init__(self, options: Optional[BaseRendererOptions] = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render(self, doc: Document, output: RenderOutput) -> None:
        """Render ``doc`` and write the result to ``output``.

        Parameters
        ----------
        doc : Document
            Document to render
        output : str, Path, IO[bytes] or IO[str]
            File path or writable stream

        Raises
        ------
        OutputWriteError
            If the output cannot be written

        """
        pass

    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string.

        Raises
        ------
        NotImplementedError
            If the renderer does not support string output

        """
        raise NotImplementedError(f"{self.__class__.__name__} does not support rendering to a string.")

    @staticmethod
    def _validate_options_type(
        options: Optional[BaseRendererOptions], expected_type: type, renderer_name: str
    ) -> None:
        """Validate that options are of the expected type.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: RenderOutput) -> None:
        """Write rendered text to a file path or stream.

        Binary streams receive UTF-8 bytes, text streams receive ``text``.

        Examples
        --------
            >>> from io import StringIO
            >>> buffer = StringIO()
            >>> BaseRenderer.write_text_output("* Heading\\n", buffer)
            >>> buffer.getvalue()
            '* Heading\\n'

        """
        write_text(text, output)
