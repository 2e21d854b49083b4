import copy
import unittest

from sexpc.LexicalAnalysis.Lexer import tokenize
from sexpc.SyntacticAnalysis import Ast
from sexpc.SyntacticAnalysis.Parser import parse
from sexpc.Transformation import OutputAst
from sexpc.Transformation.Transformer import OperandContext, Transformer
from sexpc.Compiler.Exceptions import InternalError


def transform(code: str) -> OutputAst.ProgramAst:
    return Transformer().transform(parse(tokenize(code)))


class TestTransformer(unittest.TestCase):
    def test_top_level_calls_become_statements(self):
        self.assertEqual(transform("(add 10 (subtract 10 6))"), OutputAst.ProgramAst([
            OutputAst.ExpressionStatementAst(OutputAst.CallExpressionAst(OutputAst.IdentifierAst("add"), [
                OutputAst.NumberLiteralAst("10"),
                OutputAst.CallExpressionAst(OutputAst.IdentifierAst("subtract"), [
                    OutputAst.NumberLiteralAst("10"), OutputAst.NumberLiteralAst("6")]),
            ])),
        ]))

    def test_literals_are_copied(self):
        self.assertEqual(transform('(print "Hello" true 1)').body[0].expression.arguments, [
            OutputAst.StringLiteralAst("Hello"), OutputAst.BooleanLiteralAst("true"), OutputAst.NumberLiteralAst("1")])

    def test_arguments_go_to_the_innermost_call(self):
        program = transform("(a (b (c 1) 2) 3)")
        a = program.body[0].expression
        b = a.arguments[0]
        c = b.arguments[0]
        self.assertEqual([kind_name(n) for n in a.arguments], ["b", "3"])
        self.assertEqual([kind_name(n) for n in b.arguments], ["c", "2"])
        self.assertEqual([kind_name(n) for n in c.arguments], ["1"])

    def test_binary_expressions_keep_their_shape(self):
        self.assertEqual(transform("(f + 1 (g 2))").body[0].expression.arguments, [
            OutputAst.BinaryExpressionAst(
                "+", OutputAst.NumberLiteralAst("1"),
                OutputAst.CallExpressionAst(OutputAst.IdentifierAst("g"), [OutputAst.NumberLiteralAst("2")])),
        ])

    def test_top_level_expressions_that_are_not_calls_stay_bare(self):
        self.assertEqual(transform('1 "s" * 2 3').body, [
            OutputAst.NumberLiteralAst("1"),
            OutputAst.StringLiteralAst("s"),
            OutputAst.BinaryExpressionAst("*", OutputAst.NumberLiteralAst("2"), OutputAst.NumberLiteralAst("3")),
        ])

    def test_input_is_not_mutated(self):
        ast = parse(tokenize("(a (b 1) + 2 (c) \"s\")"))
        before = copy.deepcopy(ast)
        Transformer().transform(ast)
        self.assertEqual(ast, before)

    def test_transformer_can_be_reused(self):
        transformer = Transformer()
        first = transformer.transform(parse(tokenize("(a 1)")))
        second = transformer.transform(parse(tokenize("(b 2)")))
        self.assertEqual(first.body[0].expression.callee, OutputAst.IdentifierAst("a"))
        self.assertEqual(second.body[0].expression.callee, OutputAst.IdentifierAst("b"))

    def test_binary_expression_takes_two_operands(self):
        context = OperandContext(OutputAst.BinaryExpressionAst("+", None, None))
        context.append(OutputAst.NumberLiteralAst("1"))
        context.append(OutputAst.NumberLiteralAst("2"))
        with self.assertRaises(InternalError):
            context.append(OutputAst.NumberLiteralAst("3"))


def kind_name(ast) -> str:
    if isinstance(ast, OutputAst.CallExpressionAst):
        return ast.callee.name
    return ast.value


if __name__ == "__main__":
    unittest.main()
