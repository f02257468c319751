#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/cli/builder.py
"""Generate argparse arguments from options dataclass fields.

Every field of an options dataclass becomes one flag. The field metadata
controls the flag:

- ``help``: help text. Negated boolean flags get ``"Do not ..."`` text.
- ``cli_name``: flag name without the leading dashes. When absent the
  field name is converted to kebab-case, with a ``no-`` prefix for
  booleans that default to True.
- ``type``: argparse ``type`` callable, overriding the annotation.
- ``importance``: ``"core"`` or ``"advanced"``; advanced flags are listed
  in their own argument group.
- ``exclude_from_cli``: skip the field.

All generated flags default to None so that values from configuration files
survive unless a flag is given explicitly.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import MISSING, Field, fields
from typing import Any, get_origin, get_type_hints

logger = logging.getLogger(__name__)

__all__ = ["add_options_arguments", "get_argument_kwargs", "infer_cli_name", "keyword_list", "snake_to_kebab"]


def keyword_list(value: str) -> tuple[str, ...]:
    """Split a keyword argument such as ``--todo "TODO, NEXT"`` on whitespace and commas."""
    return tuple(word for word in value.replace(",", " ").split() if word)


def snake_to_kebab(name: str) -> str:
    """Convert ``snake_case`` to ``kebab-case``."""
    return name.replace("_", "-")


def infer_cli_name(field: Field) -> str:
    """Return the flag for ``field``, including the leading dashes."""
    cli_name = field.metadata.get("cli_name")
    if cli_name:
        return f"--{cli_name}"
    name = snake_to_kebab(field.name)
    if field.default is True and not name.startswith("no-"):
        name = f"no-{name}"
    return f"--{name}"


def _negated_help(text: str) -> str:
    return f"Do not {text[:1].lower()}{text[1:]}"


def get_argument_kwargs(field: Field, field_type: Any) -> dict[str, Any]:
    """Build the ``add_argument`` keyword arguments for one dataclass field.

    Parameters
    ----------
    field : Field
        Dataclass field carrying the CLI metadata
    field_type : Any
        Resolved annotation of the field

    Returns
    -------
    dict
        Keyword arguments for ``ArgumentParser.add_argument``

    """
    metadata = field.metadata
    help_text = metadata.get("help", f"Configure {field.name}")
    kwargs: dict[str, Any] = {"dest": field.name, "default": None}

    if field_type is bool:
        # Only the value that differs from the default is ever stored
        negate = field.default is True
        kwargs["action"] = "store_const"
        kwargs["const"] = not negate
        kwargs["help"] = _negated_help(help_text) if negate else help_text
        return kwargs

    if get_origin(field_type) is tuple:
        kwargs["type"] = keyword_list
        kwargs["metavar"] = "WORDS"
        kwargs["help"] = f"{help_text}, separated by spaces or commas"
        return kwargs

    kwargs["type"] = metadata.get("type", field_type if callable(field_type) else str)
    if field.default is not MISSING:
        help_text = f"{help_text} (default: {field.default})"
    kwargs["help"] = help_text
    return kwargs


def add_options_arguments(parser: argparse.ArgumentParser, options_class: type, group_name: str) -> list[str]:
    """Add one flag per field of ``options_class`` to ``parser``.

    Core options go into a group titled ``group_name``; advanced options go
    into ``"advanced " + group_name``. Empty groups are not shown in help.

    Parameters
    ----------
    parser : argparse.ArgumentParser
        Parser (or subparser) to extend
    options_class : type
        Options dataclass whose fields describe the flags
    group_name : str
        Title of the core argument group

    Returns
    -------
    list of str
        The flags that were added, in field order

    """
    type_hints = get_type_hints(options_class)
    core = parser.add_argument_group(group_name)
    advanced = parser.add_argument_group(f"advanced {group_name}")
    added: list[str] = []

    for field in fields(options_class):
        if field.metadata.get("exclude_from_cli", False):
            continue
        flag = infer_cli_name(field)
        kwargs = get_argument_kwargs(field, type_hints.get(field.name, field.type))
        group = advanced if field.metadata.get("importance") == "advanced" else core
        group.add_argument(flag, **kwargs)
        logger.debug(f"Added CLI flag {flag} for {options_class.__name__}.{field.name}")
        added.append(flag)

    return added
