#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/ast/serialization.py
"""Conversion of AST nodes to plain dictionaries and JSON.

The output mirrors the dataclass fields of each node with an added
``"type"`` key holding the node's type tag, so it can be consumed by tools
that know nothing about the Python classes.
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any

from orgast.ast.nodes import Node

AST_SCHEMA_VERSION = 1


def _to_plain(value: Any, include_positions: bool) -> Any:
    if isinstance(value, Node):
        return node_to_dict(value, include_positions=include_positions)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: _to_plain(getattr(value, f.name), include_positions) for f in dataclasses.fields(value)}
    if isinstance(value, dict):
        return {key: _to_plain(item, include_positions) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(item, include_positions) for item in value]
    return value


def node_to_dict(node: Node, include_positions: bool = True) -> dict[str, Any]:
    """Convert a node and its descendants to a JSON-compatible dictionary.

    Parameters
    ----------
    node : Node
        Node to convert
    include_positions : bool, default True
        Include the ``position`` field when it has been annotated

    Returns
    -------
    dict
        ``{"type": ..., <field>: ...}`` with nested nodes converted recursively.
        ``None`` values and an absent position are omitted.

    """
    result: dict[str, Any] = {"type": node.type}
    for f in dataclasses.fields(node):
        value = getattr(node, f.name)
        if value is None:
            continue
        if f.name == "position" and not include_positions:
            continue
        result[f.name] = _to_plain(value, include_positions)
    return result


def ast_to_json(node: Node, indent: int | None = None, include_positions: bool = True) -> str:
    """Serialize an AST node to a JSON string with a schema version.

    Parameters
    ----------
    node : Node
        The AST node to serialize
    indent : int or None, default None
        Number of spaces for indentation (None for compact output)
    include_positions : bool, default True
        Include line/column positions

    Returns
    -------
    str
        ``{"schema_version": 1, "type": ..., ...}``

    """
    payload = {"schema_version": AST_SCHEMA_VERSION, **node_to_dict(node, include_positions=include_positions)}
    return json.dumps(payload, indent=indent, ensure_ascii=False)
