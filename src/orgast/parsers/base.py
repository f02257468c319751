#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/parsers/base.py
"""Base class for document parsers.

The base class owns the input handling shared by every parser: options type
checking and loading text from strings, paths, bytes and streams.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from orgast.ast.nodes import Document
from orgast.exceptions import FileAccessError, InvalidOptionsError, OrgFileNotFoundError, ValidationError
from orgast.options.base import BaseParserOptions
from orgast.utils.encoding import decode_bytes, normalize_newlines, read_stream_text

logger = logging.getLogger(__name__)

ParserInput = Union[str, Path, IO[bytes], IO[str], bytes]

# Strings longer than this, or containing a newline, are never treated as paths
_MAX_PATH_LENGTH = 260


class BaseParser(ABC):
    """Abstract base class for parsers producing a :class:`Document`.

    Parameters
    ----------
    options : BaseParserOptions or None, default None
        Format-specific parsing options

    Notes
    -----
    :meth:`parse` accepts:

    - ``str``: document text, or a path to an existing file
    - ``Path``: file path to read
    - ``bytes``: raw document bytes
    - binary or text stream

    """

    def __init__(self, options: BaseParserOptions | None = None):
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Raise ``InvalidOptionsError`` when ``options`` is not an ``expected_type``."""
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: ParserInput) -> Document:
        """Parse the input document into an AST.

        Parameters
        ----------
        input_data : str, Path, bytes or stream
            The document to parse

        Returns
        -------
        Document
            Root of the parsed tree

        """
        raise NotImplementedError

    @staticmethod
    def _read_path(path: Path) -> str:
        try:
            return decode_bytes(path.read_bytes())
        except FileNotFoundError as e:
            raise OrgFileNotFoundError(str(path), original_error=e) from e
        except (IsADirectoryError, PermissionError) as e:
            raise FileAccessError(str(path), original_error=e) from e
        except OSError as e:
            raise FileAccessError(str(path), message=f"Cannot read file {path}: {e}", original_error=e) from e

    @classmethod
    def _load_text_content(cls, input_data: ParserInput) -> str:
        """Load text from any supported input type with newlines normalized.

        Raises
        ------
        OrgFileNotFoundError
            If a ``Path`` input does not exist
        FileAccessError
            If a file exists but cannot be read
        ValidationError
            If the input type is not supported

        """
        if isinstance(input_data, bytes):
            text = decode_bytes(input_data)
        elif isinstance(input_data, Path):
            text = cls._read_path(input_data)
        elif isinstance(input_data, str):
            text = input_data
            if len(input_data) <= _MAX_PATH_LENGTH and "\n" not in input_data:
                try:
                    candidate = Path(input_data)
                    is_file = candidate.is_file()
                except (OSError, ValueError):
                    is_file = False
                if is_file:
                    logger.debug(f"Reading org document from {input_data}")
                    text = cls._read_path(candidate)
        elif hasattr(input_data, "read"):
            if hasattr(input_data, "seek") and getattr(input_data, "seekable", lambda: False)():
                input_data.seek(0)
            text = read_stream_text(input_data)
        else:
            raise ValidationError(
                f"Unsupported input type: {type(input_data).__name__}",
                parameter_name="input_data",
                parameter_value=input_data,
            )
        return normalize_newlines(text)
