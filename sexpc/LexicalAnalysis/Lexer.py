from __future__ import annotations

import logging
import re

from sexpc.Compiler.Exceptions import LexError
from sexpc.LexicalAnalysis.Tokens import Token, TokenType

logger = logging.getLogger(__name__)


class Lexer:
    _code: str

    # Rules are tried in this order at each position, and the first match wins. A rule with no token type is matched
    # and skipped (whitespace). The "\n" the code is terminated with is skipped by the whitespace rule, so the end of
    # the input never falls inside a number or name run.
    RULES: list[tuple[TokenType | None, re.Pattern]] = [
        (TokenType.Paren, re.compile(r"[()]")),
        (None, re.compile(r"[ \t\r\n]+")),
        (TokenType.Number, re.compile(r"[0-9]+")),
        (TokenType.Name, re.compile(r"[a-zA-Z]+")),
        (TokenType.String, re.compile(r"\"([^\"]*)\"")),
        (TokenType.Operator, re.compile(r"[+\-*/]")),
    ]

    KEYWORDS = {"true": TokenType.Boolean, "false": TokenType.Boolean}

    def __init__(self, code: str):
        self._code = code + "\n"

    def lex(self) -> list[Token]:
        current = 0
        output = []

        while current < len(self._code):
            for token_type, pattern in Lexer.RULES:
                matched = pattern.match(self._code, current)
                if not matched:
                    continue

                match token_type:
                    case None:
                        pass

                    # The string's value is the text between the quotes, so use the group instead of the full match.
                    case TokenType.String:
                        output.append(Token(token_type, matched.group(1), current))

                    # Names that are exactly "true" or "false" are booleans, not identifiers.
                    case TokenType.Name:
                        value = matched.group(0)
                        output.append(Token(Lexer.KEYWORDS.get(value, TokenType.Name), value, current))

                    case _:
                        output.append(Token(token_type, matched.group(0), current))

                current = matched.end()
                break

            else:
                # An opening quote that the string rule couldn't match has no closing quote before the end of the input.
                if self._code[current] == '"':
                    raise LexError('"', current, "Unterminated string starting")
                raise LexError(self._code[current], current)

        logger.debug("Lexed %d tokens", len(output))
        return output


def tokenize(source: str) -> list[Token]:
    return Lexer(source).lex()
