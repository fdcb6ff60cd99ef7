"""Tokenizer for the Sprig language.

Scanning is delegated to lark's basic lexer running in lexer-only mode:
the grammar below declares one terminal per token kind and nothing else.
The lark tokens are then turned into :class:`Token` records carrying the
Sprig token kind, the raw lexeme, the literal value for numbers and
strings, and the source line.

Blanks (space, tab, carriage return) are dropped. Newlines are kept as
``NEWLINE`` tokens because they may terminate statements. ``=`` swallows
a directly following ``=``; both spellings produce the same ``EQUAL``
token, there is no equality operator.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, List

from lark import Lark, UnexpectedCharacters
from lark import Token as LarkToken

from .errors import LexError
from .types import NIL


@dataclass
class Token:
    type: str
    lexeme: str
    literal: Any
    line: int

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.lexeme!r}, line {self.line})"


# Token kinds
LEFT_PAREN = 'LEFT_PAREN'
RIGHT_PAREN = 'RIGHT_PAREN'
LEFT_BRACE = 'LEFT_BRACE'
RIGHT_BRACE = 'RIGHT_BRACE'
SEMICOLON = 'SEMICOLON'
PLUS = 'PLUS'
MINUS = 'MINUS'
STAR = 'STAR'
SLASH = 'SLASH'
EQUAL = 'EQUAL'
NEWLINE = 'NEWLINE'
NUMBER = 'NUMBER'
STRING = 'STRING'
IDENTIFIER = 'IDENTIFIER'
TRUE = 'TRUE'
FALSE = 'FALSE'
NIL_KW = 'NIL'
LET = 'LET'
EOF = 'EOF'

KEYWORDS = {
    'true': TRUE,
    'false': FALSE,
    'nil': NIL_KW,
    'let': LET,
}


SPRIG_TOKENS = r"""
    start: (LEFT_PAREN | RIGHT_PAREN | LEFT_BRACE | RIGHT_BRACE | SEMICOLON
           | PLUS | MINUS | STAR | SLASH | EQUAL | NEWLINE
           | NUMBER | STRING | IDENTIFIER)*

    LEFT_PAREN: "("
    RIGHT_PAREN: ")"
    LEFT_BRACE: "{"
    RIGHT_BRACE: "}"
    SEMICOLON: ";"
    PLUS: "+"
    MINUS: "-"
    STAR: "*"
    SLASH: "/"
    EQUAL: /==?/
    NEWLINE: "\n"

    // the fraction is only taken when a digit follows the dot
    NUMBER: /[0-9]+(\.[0-9]+)?/
    STRING: /"[^"]*"/
    IDENTIFIER: /[A-Za-z_][A-Za-z0-9_]*/

    BLANK: /[ \t\r]+/
    %ignore BLANK
"""


SPRIG_LEXER = Lark(
    SPRIG_TOKENS,
    parser=None,
    lexer='basic',
)


def _convert(tok: LarkToken) -> Token:
    kind = tok.type
    lexeme = str(tok)
    literal: Any = NIL
    if kind == IDENTIFIER:
        kind = KEYWORDS.get(lexeme, IDENTIFIER)
    elif kind == NUMBER:
        literal = float(lexeme)
        if math.isinf(literal):
            raise LexError("Number literal out of range")
    elif kind == STRING:
        literal = lexeme[1:-1]
    # end_line counts newlines consumed by the token itself
    return Token(kind, lexeme, literal, tok.end_line)


def tokenize(source: str) -> List[Token]:
    """Convert source code into a list of tokens ending with ``EOF``.

    Raises :class:`LexError` for an unterminated string literal or any
    character that does not start a token.
    """
    tokens: List[Token] = []
    stream: Iterable[LarkToken] = SPRIG_LEXER.lex(source)
    try:
        for tok in stream:
            tokens.append(_convert(tok))
    except UnexpectedCharacters as e:
        if e.char == '"':
            raise LexError("Unterminated string") from None
        raise LexError(f"Unexpected character: {e.char}") from None
    line = 1 + source.count('\n')
    tokens.append(Token(EOF, '', NIL, line))
    return tokens
