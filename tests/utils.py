"""Test utilities for the orgast test suite.

This module provides sample documents, temporary directory helpers and
small assertions shared by the unit, integration and end-to-end tests.
"""

import tempfile
from pathlib import Path

from orgast.ast.nodes import Node
from orgast.ast.visitors import walk

SAMPLE_ORG = """#+TITLE: Project Notes
#+AUTHOR: Jane Doe
#+FILETAGS: :work:notes:

Introductory paragraph with *bold* text.

* TODO [#A] Write the report :work:urgent:
  SCHEDULED: <2024-01-15 Mon 09:00> DEADLINE: <2024-01-20 Sat>
  :PROPERTIES:
  :CUSTOM_ID: report
  :EFFORT: 2:00
  :END:
Draft the summary and send it to the team.

** DONE Collect data
   CLOSED: [2024-01-10 Wed 17:30]
- [X] Survey results
- [ ] Interview notes

** Analysis
#+NAME: results
| Metric | Value |
|--------+-------|
| Users  | 42    |

#+BEGIN_SRC python :results output
print("hello")
#+END_SRC

* Reference
See [[https://orgmode.org][the manual]] and footnote[fn:1].

[fn:1] The footnote text.
"""


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    import shutil

    if temp_dir.exists():
        shutil.rmtree(temp_dir)


def nodes_of_type(root: Node, node_type: str) -> list[Node]:
    """Return every node below ``root`` (inclusive) whose type tag is ``node_type``."""
    return [node for node in walk(root) if node.type == node_type]


def source_slice(text: str, node: Node) -> str:
    """Return the text covered by ``node.range``."""
    return text[node.range.start : node.range.end]
