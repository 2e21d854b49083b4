import dataclasses
import pprint
import re
from typing import Any

import colorama

from sexpc.SyntacticAnalysis.Ast import kind_of


def ast_to_dict(ast) -> Any:
    # Like dataclasses.asdict, but keeps each node's kind so the two trees' same-named fields can be told apart.
    if dataclasses.is_dataclass(ast):
        return {"kind": kind_of(ast)} | {f.name: ast_to_dict(getattr(ast, f.name)) for f in dataclasses.fields(ast)}
    if isinstance(ast, list):
        return [ast_to_dict(item) for item in ast]
    return ast


def format_ast(ast) -> str:
    return pprint.pformat(ast_to_dict(ast), width=120, indent=1, compact=False, sort_dicts=False)


class ErrFmt:
    @staticmethod
    def escape_ansi(line: str) -> str:
        ansi_escape = re.compile(r'(?:\x1B[@-_]|[\x80-\x9F])[0-?]*[ -/]*[@-~]')
        return ansi_escape.sub('', line)

    @staticmethod
    def err(source: str, offset: int) -> str:
        """
        Render the line of the source containing the offset, with a caret under the offending character:

            1 | (add 2 @)
              |        ^

        An offset past the end (an error at the end of the input) puts the caret just after the last character.
        """
        offset = max(0, min(offset, len(source)))
        line_start = source.rfind("\n", 0, offset) + 1
        line_end = source.find("\n", offset)
        line_end = len(source) if line_end == -1 else line_end
        line_number = source.count("\n", 0, offset) + 1

        number_margin = " " * len(str(line_number))

        line_containing_error_string = "".join([
            f"{colorama.Fore.WHITE}{colorama.Style.BRIGHT}{line_number} | {colorama.Style.RESET_ALL}",
            f"{colorama.Fore.GREEN}{source[line_start:line_end]}{colorama.Style.RESET_ALL}"])

        error_description_string = "".join([
            f"{colorama.Fore.WHITE}{colorama.Style.BRIGHT}{number_margin} | {colorama.Style.RESET_ALL}",
            f"{colorama.Fore.RED}{colorama.Style.BRIGHT}{' ' * (offset - line_start)}^{colorama.Style.RESET_ALL}"])

        return "\n".join([line_containing_error_string, error_description_string])
