#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/utils/encoding.py
"""Decoding of org documents supplied as bytes, files or streams.

Byte input is decoded with chardet-based detection first and a fixed list of
fallback encodings after that. Line terminators are normalized to ``\\n``
before the text reaches the line indexer.
"""

from __future__ import annotations

import logging
from typing import IO

import chardet

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_ENCODINGS = ("utf-8", "utf-8-sig", "latin-1")


def detect_encoding(data: bytes, sample_size: int = 8192, confidence_threshold: float = 0.7) -> str | None:
    """Detect the encoding of ``data`` with chardet.

    Parameters
    ----------
    data : bytes
        Raw document bytes
    sample_size : int, default 8192
        Number of leading bytes handed to the detector
    confidence_threshold : float, default 0.7
        Minimum detector confidence to trust the result

    Returns
    -------
    str or None
        Encoding name, or None when nothing was detected with enough confidence

    """
    result = chardet.detect(data[:sample_size])
    encoding = result.get("encoding") if result else None
    if not encoding:
        logger.debug("chardet: no encoding detected")
        return None

    confidence = result.get("confidence") or 0.0
    logger.debug(f"chardet detected encoding: {encoding} (confidence: {confidence:.2f})")
    if confidence < confidence_threshold:
        logger.debug(f"chardet confidence {confidence:.2f} below threshold {confidence_threshold}")
        return None
    return encoding


def decode_bytes(data: bytes, fallback_encodings: tuple[str, ...] = DEFAULT_FALLBACK_ENCODINGS) -> str:
    """Decode ``data`` with the detected encoding or the first fallback that works.

    ``latin-1`` accepts every byte sequence, so with the default fallbacks
    decoding always succeeds. A leading UTF-8 byte order mark is dropped.
    """
    if data.startswith(b"\xef\xbb\xbf"):
        return data[3:].decode("utf-8", errors="replace")

    detected = detect_encoding(data)
    if detected:
        try:
            return data.decode(detected)
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug(f"Failed to decode with detected encoding {detected}: {e}")

    for encoding in fallback_encodings:
        try:
            text = data.decode(encoding)
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug(f"Failed to decode with {encoding}: {e}")
            continue
        logger.debug(f"Decoded with encoding: {encoding}")
        return text

    logger.debug("All encodings failed, decoding as utf-8 with replacement")
    return data.decode("utf-8", errors="replace")


def read_stream_text(stream: IO[bytes] | IO[str]) -> str:
    """Read a binary or text stream to a string.

    Raises
    ------
    TypeError
        If ``read()`` returns neither bytes nor str

    """
    content = stream.read()
    if isinstance(content, bytes):
        return decode_bytes(content)
    if isinstance(content, str):
        return content
    raise TypeError(f"Stream read() returned unexpected type {type(content).__name__}. Expected bytes or str.")


def normalize_newlines(text: str) -> str:
    """Convert ``\\r\\n`` and lone ``\\r`` terminators to ``\\n``."""
    if "\r" not in text:
        return text
    return text.replace("\r\n", "\n").replace("\r", "\n")
