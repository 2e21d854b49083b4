from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ProgramAst:
    body: list[ExpressionAst]


@dataclass
class NumberLiteralAst:
    value: str


@dataclass
class StringLiteralAst:
    value: str


@dataclass
class BooleanLiteralAst:
    value: str


@dataclass
class BinaryExpressionAst:
    operator: str
    left: ExpressionAst
    right: ExpressionAst


@dataclass
class CallExpressionAst:
    name: str
    params: list[ExpressionAst]


LiteralAst = NumberLiteralAst | StringLiteralAst | BooleanLiteralAst
ExpressionAst = LiteralAst | BinaryExpressionAst | CallExpressionAst


def kind_of(ast) -> str:
    # "CallExpressionAst" -> "CallExpression". Shared by the input and output trees.
    return type(ast).__name__.removesuffix("Ast")
