#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/renderers/__init__.py
"""Renderers that turn an org AST back into text."""

from orgast.renderers.base import BaseRenderer
from orgast.renderers.org import OrgSerializer, serialize, serialize_element, serialize_object

__all__ = ["BaseRenderer", "OrgSerializer", "serialize", "serialize_element", "serialize_object"]
