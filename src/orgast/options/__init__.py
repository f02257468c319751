#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/options/__init__.py
"""Configuration options for the orgast parser and serializer."""

from __future__ import annotations

from orgast.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from orgast.options.org import OrgParserOptions, OrgSerializerOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "OrgParserOptions",
    "OrgSerializerOptions",
]
