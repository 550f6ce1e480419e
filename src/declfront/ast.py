"""
Declaration Abstract Syntax Tree (AST) Definitions
==================================================

This module defines the AST node types produced by the declaration parser.

Node Set
--------
ASTNode (closed union)
├── DeclarationNode - 'int' name '=' value ';'
└── Value nodes
    ├── NumberNode - integer constant
    └── IdentifierNode - name reference

Design Notes
------------
- The node set is closed: render() matches on the three node types and
  rejects anything else
- Nodes are frozen dataclasses and immutable after construction
- A DeclarationNode exclusively owns its single value child

Rendering
---------
render(node, indent) produces an indented tree dump. Each line is
padded with `indent` spaces and children are rendered at indent + 2:

>>> from declfront.ast import DeclarationNode, NumberNode
>>> print(DeclarationNode("int", "x", NumberNode(42)).render())
Declaration: int x
  Number: 42
"""

import sys
from dataclasses import dataclass
from typing import Optional, TextIO, Union

CHILD_INDENT = 2


# =============================================================================
# Node Types
# =============================================================================

@dataclass(frozen=True)
class NumberNode:
    """
    Integer constant.

    Attributes:
        value: The integer value
    """
    value: int

    def render(self, indent: int = 0) -> str:
        return render(self, indent)

    def print(self, indent: int = 0, file: Optional[TextIO] = None) -> None:
        print_node(self, indent, file)


@dataclass(frozen=True)
class IdentifierNode:
    """
    Reference to a name.

    Attributes:
        name: The identifier text
    """
    name: str

    def render(self, indent: int = 0) -> str:
        return render(self, indent)

    def print(self, indent: int = 0, file: Optional[TextIO] = None) -> None:
        print_node(self, indent, file)


ValueNode = Union[NumberNode, IdentifierNode]


@dataclass(frozen=True)
class DeclarationNode:
    """
    Variable declaration with initial value.

    Represents declarations like:
        int x = 42;

    Attributes:
        type_name: Declared type ("int")
        name: Declared variable name
        value: The owned initial value node
    """
    type_name: str
    name: str
    value: ValueNode

    def render(self, indent: int = 0) -> str:
        return render(self, indent)

    def print(self, indent: int = 0, file: Optional[TextIO] = None) -> None:
        print_node(self, indent, file)


ASTNode = Union[NumberNode, IdentifierNode, DeclarationNode]


# =============================================================================
# Tree Dump
# =============================================================================

def render(node: ASTNode, indent: int = 0) -> str:
    """
    Render a node and its children as an indented tree dump.

    Args:
        node: The node to render
        indent: Number of spaces before this node's line

    Returns:
        The dump, one line per node, without a trailing newline

    Raises:
        TypeError: If node is not one of the AST node types
    """
    pad = " " * indent

    if isinstance(node, NumberNode):
        return f"{pad}Number: {node.value}"
    if isinstance(node, IdentifierNode):
        return f"{pad}Identifier: {node.name}"
    if isinstance(node, DeclarationNode):
        header = f"{pad}Declaration: {node.type_name} {node.name}"
        return f"{header}\n{render(node.value, indent + CHILD_INDENT)}"

    raise TypeError(f"cannot render {type(node).__name__}")


def print_node(node: ASTNode, indent: int = 0, file: Optional[TextIO] = None) -> None:
    """Write the dump of node to file (stdout by default)."""
    stream = file if file is not None else sys.stdout
    stream.write(render(node, indent) + "\n")
