import unittest
from concurrent.futures import ThreadPoolExecutor

from sexpc.Compiler.Compiler import Compiler, compile
from sexpc.Compiler.Exceptions import CompileError, InlineRecursionError, LexError, NestingDepthError, ParseError
from sexpc.Compiler.Options import CompilerOptions
from sexpc.LexicalAnalysis.Tokens import TokenType
from sexpc.SyntacticAnalysis import Ast


class TestCompiler(unittest.TestCase):
    def setUp(self):
        self._optimized = CompilerOptions(optimize=True)

    def test_basic_arithmetic(self):
        self.assertEqual(compile("(add 10 (subtract 10 6))"), "add(10, subtract(10, 6));")
        self.assertEqual(compile("(add 2 (subtract 4 2))"), "add(2, subtract(4, 2));")

    def test_string_and_boolean(self):
        self.assertEqual(compile('(print "Hello" true)'), 'print("Hello", true);')

    def test_operators_render_as_calls(self):
        self.assertEqual(compile("(+ 5 (* 3 2))"), "+(5, *(3, 2));")

    def test_several_statements(self):
        self.assertEqual(compile("(a 1)\n(b (c))"), "a(1);\nb(c());")

    def test_binary_expression(self):
        self.assertEqual(compile("(print + 1 (f 2))"), "print(1 + f(2));")

    def test_empty_source(self):
        self.assertEqual(compile(""), "")

    def test_invalid_character(self):
        with self.assertRaises(LexError) as context:
            compile("(add 2 @)")
        self.assertEqual(context.exception.char, "@")

    def test_unterminated_string(self):
        with self.assertRaises(LexError):
            compile('(print "Hello)')

    def test_parse_errors(self):
        for source in ["(add 2 3", "(2 add)", "()", "+ 1", ")"]:
            with self.subTest(source=source):
                with self.assertRaises(ParseError):
                    compile(source)

    def test_errors_share_a_base_class(self):
        for source in ["@", "(", '(define "f" (x) (f))']:
            with self.subTest(source=source):
                with self.assertRaises(CompileError):
                    compile(source, self._optimized)

    def test_deep_nesting_is_an_error(self):
        with self.assertRaises(NestingDepthError) as context:
            compile("(f " * 500 + "1" + ")" * 500)
        self.assertEqual(context.exception.offset, 300)
        self.assertIn("[0005]", str(context.exception))

    def test_nesting_below_the_limit_compiles(self):
        self.assertEqual(compile("(f " * 99 + "1" + ")" * 99), "f(" * 99 + "1" + ")" * 99 + ";")

    def test_running_out_of_stack_is_an_error(self):
        options = CompilerOptions(max_nesting_depth=100000)
        with self.assertRaises(NestingDepthError) as context:
            compile("(f " * 5000 + "1" + ")" * 5000, options)
        self.assertEqual(context.exception.offset, -1)
        self.assertEqual(compile("(g 1)", options), "g(1);")

    def test_optimized_number_text(self):
        self.assertEqual(compile("(print (* 0 (- 0 1)) (* 1000 1000))", self._optimized), "print(-0, 1e+06);")

    def test_optimized_folding_and_dead_code(self):
        self.assertEqual(compile("(+ 5 (* 3 2)) (print (/ 7 2))", self._optimized), "print(3.5);")

    def test_optimized_inlining(self):
        self.assertEqual(
            compile('(define "greeting" (x) "hi") (print (greeting))', self._optimized),
            'define("greeting", x(), "hi");\nprint("hi");')

    def test_optimized_recursive_definition(self):
        with self.assertRaises(InlineRecursionError):
            compile('(define "loop" (x) (loop)) (loop)', self._optimized)

    def test_unoptimized_keeps_definitions_uninlined(self):
        self.assertEqual(compile('(define "f" (x) (f)) (f)'), 'define("f", x(), f());\nf();')

    def test_compiler_keeps_its_last_run(self):
        compiler = Compiler(self._optimized)
        compiler.compile("(f (+ 1 2))")
        self.assertEqual([t.kind for t in compiler.tokens][:2], [TokenType.Paren, TokenType.Name])
        self.assertEqual(compiler.ast.body, [Ast.CallExpressionAst("f", [Ast.NumberLiteralAst("3")])])
        self.assertEqual(len(compiler.output_ast.body), 1)

    def test_compilations_are_independent(self):
        sources = [f"(f {i} (g {i} \"{i}\"))" for i in range(100)]
        with ThreadPoolExecutor(max_workers=8) as executor:
            outputs = list(executor.map(compile, sources))
        self.assertEqual(outputs, [f'f({i}, g({i}, "{i}"));' for i in range(100)])


if __name__ == "__main__":
    unittest.main()
