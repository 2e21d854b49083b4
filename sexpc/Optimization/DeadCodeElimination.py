import logging

from sexpc.SyntacticAnalysis import Ast
from sexpc.Traversal.Traverser import Visitor

logger = logging.getLogger(__name__)


class DeadCodeElimination(Visitor):
    """
    Remove the top level statements that are a bare number, as they have no effect. Only the program body is pruned:
    a number passed as an argument is kept.
    """

    def visit_program(self, ast: Ast.ProgramAst, parent) -> None:
        kept = [statement for statement in ast.body if not isinstance(statement, Ast.NumberLiteralAst)]
        if len(kept) != len(ast.body):
            logger.debug("Removed %d dead statements", len(ast.body) - len(kept))
        ast.body[:] = kept
