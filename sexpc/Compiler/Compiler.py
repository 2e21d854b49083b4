import logging
from typing import Optional

from sexpc.CodeGen.CodeGen import generate
from sexpc.Compiler.Exceptions import NestingDepthError
from sexpc.Compiler.Options import CompilerOptions
from sexpc.LexicalAnalysis.Lexer import Lexer
from sexpc.LexicalAnalysis.Tokens import Token
from sexpc.Optimization.Optimizer import Optimizer
from sexpc.SyntacticAnalysis import Ast
from sexpc.SyntacticAnalysis.Parser import Parser
from sexpc.Transformation import OutputAst
from sexpc.Transformation.Transformer import Transformer

logger = logging.getLogger(__name__)


class Compiler:
    _options: CompilerOptions
    _tokens: list[Token]
    _ast: Optional[Ast.ProgramAst]
    _output_ast: Optional[OutputAst.ProgramAst]

    def __init__(self, options: CompilerOptions = None):
        self._options = options or CompilerOptions()
        self._tokens = []
        self._ast = None
        self._output_ast = None

    def compile(self, code: str) -> str:
        # Every stage after the lexer recurses once per level of nesting. The parser rejects deep source itself, but
        # inlining can nest bodies further, or the limit may be raised past what the interpreter's stack allows.
        try:
            return self._compile(code)
        except RecursionError:
            logger.debug("Ran out of stack compiling %d characters", len(code))
            raise NestingDepthError(self._options.max_nesting_depth) from None

    def _compile(self, code: str) -> str:
        # Lex the code into a stream of tokens.
        self._tokens = Lexer(code).lex()

        # Parse the tokens into an AST, and optimize it in place when asked to.
        self._ast = Parser(self._tokens, self._options.max_nesting_depth).parse()
        if self._options.optimize:
            self._ast = Optimizer(self._options).optimize(self._ast)

        # Reshape the AST into the output AST, and render it.
        self._output_ast = Transformer().transform(self._ast)
        output = generate(self._output_ast)
        logger.debug("Compiled %d characters into %d characters", len(code), len(output))
        return output

    @property
    def tokens(self) -> list[Token]:
        return self._tokens

    @property
    def ast(self) -> Optional[Ast.ProgramAst]:
        return self._ast

    @property
    def output_ast(self) -> Optional[OutputAst.ProgramAst]:
        return self._output_ast


def compile(source: str, options: CompilerOptions = None) -> str:
    return Compiler(options).compile(source)
