from multimethod import multimethod

from sexpc.Compiler.Exceptions import InternalError
from sexpc.SyntacticAnalysis.Ast import kind_of
from sexpc.Transformation import OutputAst


@multimethod
def generate(ast: object) -> str:
    # Reached only by a node the Transformer should never have produced.
    raise InternalError(kind_of(ast))


@generate.register
def _(ast: OutputAst.ProgramAst) -> str:
    return "\n".join([generate(statement) for statement in ast.body])


@generate.register
def _(ast: OutputAst.ExpressionStatementAst) -> str:
    return generate(ast.expression) + ";"


@generate.register
def _(ast: OutputAst.CallExpressionAst) -> str:
    return generate(ast.callee) + "(" + ", ".join([generate(argument) for argument in ast.arguments]) + ")"


@generate.register
def _(ast: OutputAst.BinaryExpressionAst) -> str:
    return f"{generate(ast.left)} {ast.operator} {generate(ast.right)}"


@generate.register
def _(ast: OutputAst.IdentifierAst) -> str:
    return ast.name


@generate.register
def _(ast: OutputAst.NumberLiteralAst) -> str:
    return ast.value


@generate.register
def _(ast: OutputAst.BooleanLiteralAst) -> str:
    return ast.value


# Embedded quotes are not escaped: the source language has no way to write one.
@generate.register
def _(ast: OutputAst.StringLiteralAst) -> str:
    return '"' + ast.value + '"'
