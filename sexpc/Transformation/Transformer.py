"""
The Transformer builds the output AST from the (optimized) input AST. It is a pre-order pass, so a node is emitted
before its children are visited. Each emitted node that has children of its own opens a context, the place its
children are appended to when they are visited:

- a Program appends to the output program's body,
- a CallExpression appends to its output call's arguments,
- a BinaryExpression fills its output expression's left, then right operand.

Contexts are kept in a table keyed by the input node that opened them, and looked up through the parent each callback
is given. Neither tree holds any construction state.
"""
from __future__ import annotations

import logging

from sexpc.Compiler.Exceptions import InternalError
from sexpc.SyntacticAnalysis import Ast
from sexpc.Transformation import OutputAst
from sexpc.Traversal.Traverser import Visitor

logger = logging.getLogger(__name__)


class ListContext:
    def __init__(self, target: list):
        self._target = target

    def append(self, ast) -> None:
        self._target.append(ast)


class OperandContext:
    def __init__(self, expression: OutputAst.BinaryExpressionAst):
        self._expression = expression

    def append(self, ast) -> None:
        if self._expression.left is None:
            self._expression.left = ast
        elif self._expression.right is None:
            self._expression.right = ast
        else:
            raise InternalError(Ast.kind_of(ast))


class Transformer(Visitor):
    _contexts: dict[int, ListContext | OperandContext]

    def __init__(self):
        self._contexts = {}

    def transform(self, ast: Ast.ProgramAst) -> OutputAst.ProgramAst:
        output = OutputAst.ProgramAst([])
        self._contexts = {id(ast): ListContext(output.body)}
        self.run(ast)
        self._contexts.clear()
        logger.debug("Transformed %d statements", len(output.body))
        return output

    def _context(self, parent) -> ListContext | OperandContext:
        return self._contexts[id(parent)]

    def visit_number_literal(self, ast: Ast.NumberLiteralAst, parent) -> None:
        self._context(parent).append(OutputAst.NumberLiteralAst(ast.value))

    def visit_string_literal(self, ast: Ast.StringLiteralAst, parent) -> None:
        self._context(parent).append(OutputAst.StringLiteralAst(ast.value))

    def visit_boolean_literal(self, ast: Ast.BooleanLiteralAst, parent) -> None:
        self._context(parent).append(OutputAst.BooleanLiteralAst(ast.value))

    def visit_binary_expression(self, ast: Ast.BinaryExpressionAst, parent) -> None:
        expression = OutputAst.BinaryExpressionAst(ast.operator, None, None)
        self._contexts[id(ast)] = OperandContext(expression)
        self._context(parent).append(expression)

    def visit_call_expression(self, ast: Ast.CallExpressionAst, parent) -> None:
        expression = OutputAst.CallExpressionAst(OutputAst.IdentifierAst(ast.name), [])
        self._contexts[id(ast)] = ListContext(expression.arguments)

        # Top level calls become statements, terminated when rendered. Calls inside an expression stay bare.
        if isinstance(parent, Ast.ProgramAst):
            self._context(parent).append(OutputAst.ExpressionStatementAst(expression))
        else:
            self._context(parent).append(expression)
