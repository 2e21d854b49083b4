"""
The traversal engine is the one tree walk every later stage is built on. It visits the input AST depth first, calling
the callback registered for each node's kind with the node and its syntactic parent (None for the root). The children
are visited in a fixed order per kind:

    Program          -> body, in order
    CallExpression   -> params, in order
    BinaryExpression -> left, then right

A callback may mutate the node it is given, or return a new node, in which case the new node takes the old node's slot
in its parent and the walk continues with it. This is how a pass replaces a call with a folded literal or an inlined
body without knowing which field of the parent holds the call.
"""
from __future__ import annotations

import enum
from typing import Any, Callable, Mapping, Optional

from inflection import camelize

from sexpc.SyntacticAnalysis import Ast

Callback = Callable[[Any, Optional[Any]], Optional[Any]]


class Order(enum.Enum):
    Pre = "pre"
    Post = "post"


def traverse(root, visitor: Mapping[str, Callback], order: Order = Order.Pre):
    return _traverse_node(root, None, visitor, order)


def _traverse_node(node, parent, visitor: Mapping[str, Callback], order: Order):
    callback = visitor.get(Ast.kind_of(node))

    if callback and order is Order.Pre:
        node = _replace(node, callback(node, parent))

    match node:
        case Ast.ProgramAst():
            _traverse_list(node.body, node, visitor, order)
        case Ast.CallExpressionAst():
            _traverse_list(node.params, node, visitor, order)
        case Ast.BinaryExpressionAst():
            node.left = _traverse_node(node.left, node, visitor, order)
            node.right = _traverse_node(node.right, node, visitor, order)

    if callback and order is Order.Post:
        node = _replace(node, callback(node, parent))

    return node


def _traverse_list(nodes: list, parent, visitor: Mapping[str, Callback], order: Order) -> None:
    for i, child in enumerate(nodes):
        replacement = _traverse_node(child, parent, visitor, order)
        if replacement is not child:
            nodes[i] = replacement


def _replace(node, replacement):
    return node if replacement is None else replacement


class Visitor:
    """
    A pass over the input AST. Every "visit_<kind>" method is registered as the callback for that kind, so
    "visit_call_expression" is called for each CallExpression. Subclasses that need their children rewritten before
    they are visited themselves set ORDER to Order.Post.
    """
    ORDER: Order = Order.Pre

    def table(self) -> dict[str, Callback]:
        return {
            camelize(name.removeprefix("visit_")): getattr(self, name)
            for name in dir(self) if name.startswith("visit_")}

    def run(self, ast):
        return traverse(ast, self.table(), self.ORDER)
