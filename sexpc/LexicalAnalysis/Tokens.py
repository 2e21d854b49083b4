from dataclasses import dataclass, field
from enum import Enum


class TokenType(Enum):
    Paren = "paren"
    Number = "number"
    Name = "name"
    String = "string"
    Boolean = "boolean"
    Operator = "operator"

    # Appended by the Parser after the last token, never produced by the Lexer.
    EOF = "eof"


@dataclass
class Token:
    kind: TokenType
    value: str
    offset: int = field(default=-1, compare=False)
