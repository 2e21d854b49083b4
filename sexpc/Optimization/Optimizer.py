import logging

from sexpc.Compiler.Options import CompilerOptions
from sexpc.Optimization.ConstantFolding import ConstantFolding
from sexpc.Optimization.DeadCodeElimination import DeadCodeElimination
from sexpc.Optimization.FunctionInlining import FunctionInlining
from sexpc.SyntacticAnalysis import Ast

logger = logging.getLogger(__name__)


class Optimizer:
    _options: CompilerOptions

    def __init__(self, options: CompilerOptions = None):
        self._options = options or CompilerOptions()

    def optimize(self, ast: Ast.ProgramAst) -> Ast.ProgramAst:
        # Each pass sees the tree the previous one left: folding first, so that dead code elimination can remove
        # statements that folded down to a bare number.
        passes = [ConstantFolding(), DeadCodeElimination(), FunctionInlining(self._options.max_inline_depth)]
        for optimization in passes:
            ast = optimization.run(ast)
            logger.debug("%s done, %d statements left", type(optimization).__name__, len(ast.body))
        return ast
