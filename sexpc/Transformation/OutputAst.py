from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class ProgramAst:
    body: list[StatementAst]


@dataclass
class ExpressionStatementAst:
    expression: CallExpressionAst


@dataclass
class IdentifierAst:
    name: str


@dataclass
class CallExpressionAst:
    callee: IdentifierAst
    arguments: list[ExpressionAst]


@dataclass
class BinaryExpressionAst:
    operator: str
    left: Optional[ExpressionAst]
    right: Optional[ExpressionAst]


@dataclass
class NumberLiteralAst:
    value: str


@dataclass
class StringLiteralAst:
    value: str


@dataclass
class BooleanLiteralAst:
    value: str


ExpressionAst = NumberLiteralAst | StringLiteralAst | BooleanLiteralAst | BinaryExpressionAst | CallExpressionAst
StatementAst = ExpressionStatementAst | ExpressionAst
