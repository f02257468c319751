#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgast/parsers/__init__.py
"""Org-mode parsing package.

The parser is split by construct:

- ``lines``: line splitting and offset bookkeeping
- ``timestamps`` and ``planning``: timestamps and planning lines
- ``tables`` and ``lists``: table and plain list sub-parsers
- ``blocks``: delimited blocks, drawers and LaTeX environments
- ``affiliated`` and ``todo``: affiliated keywords and TODO workflows
- ``elements``: the per-line element classifier
- ``inline`` and ``entities``: the inline object parser
- ``org``: the headline tree builder and :class:`~orgast.parsers.org.OrgParser`

Import :class:`OrgParser` and :func:`parse_org` from :mod:`orgast` or
:mod:`orgast.parsers.org`.
"""
