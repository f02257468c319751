#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/utils/__init__.py
"""Helpers shared by the parser, the serializer and the command line interface."""

from orgast.utils.encoding import decode_bytes, detect_encoding, normalize_newlines, read_stream_text
from orgast.utils.io_utils import write_text

__all__ = ["decode_bytes", "detect_encoding", "normalize_newlines", "read_stream_text", "write_text"]
