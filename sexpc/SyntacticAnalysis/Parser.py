from __future__ import annotations

import logging

from typing import Callable, Generic, Optional, TypeVar
from sexpc.Compiler.Exceptions import NestingDepthError, ParseError
from sexpc.LexicalAnalysis.Tokens import Token, TokenType
from sexpc.SyntacticAnalysis import Ast

logger = logging.getLogger(__name__)


class ParseSyntaxError(Exception):
    ...


T = TypeVar("T")


class BoundParser(Generic[T]):
    _rule: Callable[[], T]
    _parser: Parser

    def __init__(self, parser: Parser, rule: Callable[[], T]):
        self._rule = rule
        self._parser = parser

    def parse_once(self) -> T:
        # Parse the rule exactly once. A ParseSyntaxError is left to propagate to the caller, which either stops a
        # repetition with it or lets it reach Parser.parse().
        return self._rule()

    def parse_zero_or_more(self) -> list[T]:
        results = []

        # Keep parsing until the rule fails. The failed attempt may have consumed tokens (a partially parsed call), so
        # restore the index to where it started before returning the results collected so far.
        while True:
            restore_index = self._parser.current
            try:
                results.append(self.parse_once())
            except ParseSyntaxError:
                self._parser.current = restore_index
                return results


class Parser:
    _tokens: list[Token]
    _current: int
    _furthest: int
    _depth: int
    _max_depth: int

    def __init__(self, tokens: list[Token], max_depth: int = 100):
        # The cursor, the token buffer and the error position all belong to this instance, so separate parses never
        # share state.
        self._tokens = [*tokens, Token(TokenType.EOF, "", tokens[-1].offset + len(tokens[-1].value) if tokens else 0)]
        self._current = 0
        self._furthest = 0
        self._depth = 0
        self._max_depth = max_depth

    @property
    def current(self) -> int:
        return self._current

    @current.setter
    def current(self, index: int) -> None:
        self._current = index

    def parse(self) -> Ast.ProgramAst:
        try:
            program = self._parse_program().parse_once()
            logger.debug("Parsed %d top level expressions", len(program.body))
            return program

        # Every failed rule records how far it got. The error reported is the one at the furthest token, as any failure
        # before it is only the enclosing rule giving up because an inner rule failed.
        except ParseSyntaxError:
            token = self._tokens[self._furthest]
            raise ParseError(token.kind.value, token.offset) from None

    def _parse_program(self) -> BoundParser[Ast.ProgramAst]:
        """
        [Program] => [Expression]* [EOF]

        The top level is any number of expressions. The [EOF] check stops the parse succeeding on a prefix of the
        tokens, when the repetition stops at a token no expression can start with.
        """
        def inner():
            p1 = self._parse_expression().parse_zero_or_more()
            self._parse_token(TokenType.EOF).parse_once()
            return Ast.ProgramAst(p1)
        return BoundParser(self, inner)

    def _parse_expression(self) -> BoundParser[Ast.ExpressionAst]:
        """
        [Expression] => [NumberLiteral] | [StringLiteral] | [BooleanLiteral] | [BinaryExpression] | [CallExpression]

        One token of lookahead decides the alternative, so no alternative is ever retried. Binary and call expressions
        count towards the nesting depth, which is checked before descending into them.
        """
        def inner():
            token = self._peek()
            match token.kind:
                case TokenType.Number: return self._parse_literal_number().parse_once()
                case TokenType.String: return self._parse_literal_string().parse_once()
                case TokenType.Boolean: return self._parse_literal_boolean().parse_once()
                case TokenType.Operator: return self._parse_nested(token, self._parse_binary_expression())
                case TokenType.Paren if token.value == "(": return self._parse_nested(token, self._parse_call_expression())
                case _: self._fail()
        return BoundParser(self, inner)

    def _parse_nested(self, token: Token, rule: BoundParser[T]) -> T:
        if self._depth >= self._max_depth:
            raise NestingDepthError(self._max_depth, token.offset)

        self._depth += 1
        try:
            return rule.parse_once()
        finally:
            self._depth -= 1

    def _parse_literal_number(self) -> BoundParser[Ast.NumberLiteralAst]:
        def inner():
            p1 = self._parse_token(TokenType.Number).parse_once()
            return Ast.NumberLiteralAst(p1.value)
        return BoundParser(self, inner)

    def _parse_literal_string(self) -> BoundParser[Ast.StringLiteralAst]:
        def inner():
            p1 = self._parse_token(TokenType.String).parse_once()
            return Ast.StringLiteralAst(p1.value)
        return BoundParser(self, inner)

    def _parse_literal_boolean(self) -> BoundParser[Ast.BooleanLiteralAst]:
        def inner():
            p1 = self._parse_token(TokenType.Boolean).parse_once()
            return Ast.BooleanLiteralAst(p1.value)
        return BoundParser(self, inner)

    def _parse_binary_expression(self) -> BoundParser[Ast.BinaryExpressionAst]:
        """
        [BinaryExpression] => [Token(Operator)] [Expression] [Expression]

        Operators are prefix and strictly binary: "+ 1 2" has exactly a left and a right operand.
        """
        def inner():
            p1 = self._parse_token(TokenType.Operator).parse_once()
            p2 = self._parse_expression().parse_once()
            p3 = self._parse_expression().parse_once()
            return Ast.BinaryExpressionAst(p1.value, p2, p3)
        return BoundParser(self, inner)

    def _parse_call_expression(self) -> BoundParser[Ast.CallExpressionAst]:
        """
        [CallExpression] => [Token("(")] [CallName] [Expression]* [Token(")")]
        """
        def inner():
            self._parse_token(TokenType.Paren, "(").parse_once()
            p1 = self._parse_call_name().parse_once()
            p2 = self._parse_expression().parse_zero_or_more()
            self._parse_token(TokenType.Paren, ")").parse_once()
            return Ast.CallExpressionAst(p1, p2)
        return BoundParser(self, inner)

    def _parse_call_name(self) -> BoundParser[str]:
        """
        [CallName] => any token except a paren

        The token after "(" names the call whatever its kind, so "(+ 1 2)" is a call named "+". An empty call "()" or
        a call named by another call "((f))" is rejected here rather than given a paren as its name.
        """
        def inner():
            token = self._peek()
            if token.kind in (TokenType.Paren, TokenType.EOF):
                self._fail()
            self._current += 1
            return token.value
        return BoundParser(self, inner)

    def _parse_token(self, token_type: TokenType, value: Optional[str] = None) -> BoundParser[Token]:
        def inner():
            token = self._peek()
            if token.kind != token_type or (value is not None and token.value != value):
                self._fail()
            self._current += 1
            return token
        return BoundParser(self, inner)

    def _peek(self) -> Token:
        # Only [Program] consumes the EOF token, as its last step, so every peek lands inside the buffer.
        return self._tokens[self._current]

    def _fail(self) -> None:
        self._furthest = max(self._furthest, self._current)
        token = self._peek()
        raise ParseSyntaxError(f"Unexpected '{token.kind.value}' at token {self._current}")


def parse(tokens: list[Token], max_depth: int = 100) -> Ast.ProgramAst:
    return Parser(tokens, max_depth).parse()
