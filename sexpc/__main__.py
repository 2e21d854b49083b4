import argparse
import logging
import sys
from typing import TextIO

import colorama

from sexpc.Compiler.Compiler import Compiler
from sexpc.Compiler.Exceptions import CompileError, InternalError
from sexpc.Compiler.Options import CompilerOptions
from sexpc.Compiler.Printer import ErrFmt, format_ast

__version__ = "1.0.0"

logger = logging.getLogger("sexpc")


class Repl:
    _compiler: Compiler
    _show_ast: bool

    def __init__(self, options: CompilerOptions, show_ast: bool = False):
        self._compiler = Compiler(options)
        self._show_ast = show_ast

    def run(self, stdin: TextIO, stdout: TextIO) -> None:
        print("Welcome to the Minimal Compiler REPL!", file=stdout)
        print("Type 'exit' to quit.", file=stdout)

        while True:
            print("> ", end="", file=stdout, flush=True)
            line = stdin.readline()
            if not line:
                break

            line = line.strip()
            if line == "exit":
                break
            if not line:
                continue

            self.compile_and_print(line, stdout)

        print("Goodbye!", file=stdout)

    def compile_and_print(self, code: str, stdout: TextIO, prefix: str = "Output: ") -> bool:
        try:
            output = self._compiler.compile(code)
        except InternalError as e:
            logger.error("Internal compiler error: %s", e)
            print(f"{colorama.Fore.RED}Internal error:{colorama.Style.RESET_ALL} {e}", file=stdout)
            return False
        except CompileError as e:
            print(f"{colorama.Fore.RED}Error:{colorama.Style.RESET_ALL} {e}", file=stdout)
            if e.offset >= 0:
                print(ErrFmt.err(code, e.offset), file=stdout)
            return False

        if self._show_ast:
            print(format_ast(self._compiler.ast), file=stdout)
        print(f"{prefix}{output}", file=stdout)
        return True


def main(argv: list[str] = None) -> int:
    parser = argparse.ArgumentParser(prog="sexpc", description="Compile S-expressions into call expressions.")
    parser.add_argument("file", nargs="?", help="compile this file instead of starting the REPL")
    parser.add_argument("-c", "--command", help="compile this source text instead of starting the REPL")
    parser.add_argument("-O", "--optimize", action="store_true", help="fold constants, remove dead code and inline definitions")
    parser.add_argument("--max-inline-depth", type=int, default=CompilerOptions.max_inline_depth)
    parser.add_argument("--max-nesting-depth", type=int, default=CompilerOptions.max_nesting_depth)
    parser.add_argument("--show-ast", action="store_true", help="print the parsed AST before the output")
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(name)s: %(message)s")
    colorama.init()

    options = CompilerOptions(
        optimize=args.optimize, max_inline_depth=args.max_inline_depth, max_nesting_depth=args.max_nesting_depth)
    repl = Repl(options, args.show_ast)

    if args.command is not None or args.file is not None:
        if args.command is not None:
            code = args.command
        else:
            with open(args.file) as file:
                code = file.read()
        return 0 if repl.compile_and_print(code, sys.stdout, prefix="") else 1

    repl.run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
