"""
Naive inlining of zero argument functions. A definition is a call of the form

    (define "name" (params) body)

with exactly three params. The name is the first param's literal text, and the second param is ignored, so every
defined function is a constant macro: each call "(name ...)" anywhere in the program is replaced by the body.

Every call site gets its own deep copy of the body, so rewriting one inlined occurrence never changes another one or
the definition. The copy is expanded before it is spliced in, and a name that is reached again while it is still being
expanded, such as (define "f" (x) (f)), raises InlineRecursionError instead of expanding forever. The depth of nested
expansions is capped as well.
"""
from __future__ import annotations

import copy
import logging

from sexpc.Compiler.Exceptions import InlineRecursionError
from sexpc.SyntacticAnalysis import Ast
from sexpc.Traversal.Traverser import Visitor

logger = logging.getLogger(__name__)


class DefinitionCollector(Visitor):
    definitions: dict[str, Ast.ExpressionAst]

    def __init__(self):
        self.definitions = {}

    def visit_call_expression(self, ast: Ast.CallExpressionAst, parent) -> None:
        if ast.name != "define" or len(ast.params) != 3:
            return

        name, _, body = ast.params
        if not isinstance(name, (Ast.NumberLiteralAst, Ast.StringLiteralAst, Ast.BooleanLiteralAst)):
            logger.debug("Skipping definition named by a %s", Ast.kind_of(name))
            return
        self.definitions[name.value] = body


class FunctionInlining(Visitor):
    _definitions: dict[str, Ast.ExpressionAst]
    _chain: tuple[str, ...]
    _max_depth: int

    def __init__(self, max_depth: int = 32, definitions: dict[str, Ast.ExpressionAst] = None, chain: tuple[str, ...] = ()):
        self._definitions = definitions
        self._chain = chain
        self._max_depth = max_depth

    def run(self, ast):
        if self._definitions is None:
            collector = DefinitionCollector()
            collector.run(ast)
            self._definitions = collector.definitions
            logger.debug("Collected definitions: %s", ", ".join(self._definitions) or "none")
        return super().run(ast)

    def visit_call_expression(self, ast: Ast.CallExpressionAst, parent) -> Ast.ExpressionAst | None:
        if ast.name not in self._definitions:
            return None
        if ast.name in self._chain or len(self._chain) >= self._max_depth:
            raise InlineRecursionError(ast.name, self._chain)

        # Expand the copy with this name on the chain, so the walk that continues into the returned node has nothing
        # left to inline.
        body = copy.deepcopy(self._definitions[ast.name])
        expansion = FunctionInlining(self._max_depth, self._definitions, (*self._chain, ast.name))
        logger.debug("Inlining '%s'", ast.name)
        return expansion.run(body)
