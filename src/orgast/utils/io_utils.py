#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/utils/io_utils.py
"""Output helpers for serialized org text."""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast


def _is_binary_stream(output: object) -> bool:
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, StringIO):
        return False
    if isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    # Fall back to the mode attribute of file objects
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_text(text: str, output: Union[str, Path, IO[bytes], IO[str]], encoding: str = "utf-8") -> None:
    """Write ``text`` to a path or an open stream.

    Parameters
    ----------
    text : str
        Text to write
    output : str, Path, IO[bytes] or IO[str]
        Destination. Paths are written (and replaced) as ``encoding``; binary
        streams receive encoded bytes and text streams receive ``text``.
    encoding : str, default "utf-8"
        Encoding used for paths and binary streams

    Raises
    ------
    TypeError
        If ``output`` is neither a path nor a writable stream
    OSError
        If the destination cannot be written

    Examples
    --------
        >>> buffer = BytesIO()
        >>> write_text("* Heading\\n", buffer)
        >>> buffer.getvalue()
        b'* Heading\\n'

    """
    if isinstance(output, (str, Path)):
        Path(output).write_text(text, encoding=encoding)
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output).__name__}")

    if _is_binary_stream(output):
        cast(IO[bytes], output).write(text.encode(encoding))
    else:
        cast(IO[str], output).write(text)
