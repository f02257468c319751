#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/options/base.py
"""Base classes for parser and serializer options.

Options are frozen dataclasses so that a single configuration value can be
shared between parses without risk of mutation.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from orgast.constants import DEFAULT_EXTRACT_METADATA


def _check_bool_fields(options: Any) -> None:
    """Raise ValueError when a field annotated ``bool`` holds anything else."""
    for f in fields(options):
        value = getattr(options, f.name)
        if f.type in ("bool", bool) and not isinstance(value, bool):
            raise ValueError(f"{f.name} must be true or false, got {value!r}")


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for serializer options.

    Notes
    -----
    Subclasses define format-specific rendering options as frozen dataclass fields.

    """

    def __post_init__(self) -> None:
        """Reject non-boolean values for boolean options."""
        _check_bool_fields(self)


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for parser options.

    Parameters
    ----------
    extract_metadata : bool
        Whether to collect well-known document keywords into ``Document.metadata``

    """

    extract_metadata: bool = field(
        default=DEFAULT_EXTRACT_METADATA,
        metadata={
            "help": "Collect TITLE, AUTHOR, DATE and similar keywords into document metadata",
            "cli_name": "no-extract-metadata",
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Validate base parser options.

        Raises
        ------
        ValueError
            If a boolean option holds a non-boolean value, such as the string
            ``"false"`` from a configuration file.

        """
        _check_bool_fields(self)
