"""Recursive-descent parser for the Sprig language.

Grammar, lowest precedence first::

    statement  := letStmt | block | printCall | exprStmt
    letStmt    := "let" IDENTIFIER ( "=" expression )? terminator?
    block      := "{" statement* "}"
    printCall  := "print" "(" expression ")" terminator?
    exprStmt   := expression terminator?
    expression := assignment
    assignment := term ( "=" assignment )?
    term       := factor ( ( "+" | "-" ) factor )*
    factor     := primary ( ( "*" | "/" ) primary )*
    primary    := "true" | "false" | "nil" | NUMBER | STRING | IDENTIFIER
                | "(" expression ")"

A terminator is ``;`` or a newline and is always optional. ``print`` is
not a keyword: an identifier spelled ``print`` at the start of a
statement is read as a print call. The parser stops at the first error;
there is no recovery.
"""

from __future__ import annotations

from typing import List, Sequence

from .ast import (
    Program, Stmt, Expr, ExpressionStmt, PrintStmt, LetStmt, BlockStmt,
    Literal, Variable, Binary, Assign,
)
from .errors import ParseError
from .lexer import (
    Token, tokenize,
    LEFT_PAREN, RIGHT_PAREN, LEFT_BRACE, RIGHT_BRACE, SEMICOLON,
    PLUS, MINUS, STAR, SLASH, EQUAL, NEWLINE,
    NUMBER, STRING, IDENTIFIER, TRUE, FALSE, NIL_KW, LET, EOF,
)
from .types import NIL


class Parser:
    def __init__(self, tokens: Sequence[Token]):
        self.tokens = list(tokens)
        self.pos = 0
        if not self.tokens or self.tokens[-1].type != EOF:
            line = self.tokens[-1].line if self.tokens else 1
            self.tokens.append(Token(EOF, '', NIL, line))

    def peek(self) -> Token:
        return self.tokens[self.pos]

    def previous(self) -> Token:
        return self.tokens[self.pos - 1]

    def is_at_end(self) -> bool:
        return self.peek().type == EOF

    def check(self, kind: str) -> bool:
        return not self.is_at_end() and self.peek().type == kind

    def advance(self) -> Token:
        if not self.is_at_end():
            self.pos += 1
        return self.previous()

    def match(self, *kinds: str) -> bool:
        for kind in kinds:
            if self.check(kind):
                self.advance()
                return True
        return False

    def consume(self, kind: str, message: str) -> Token:
        if self.check(kind):
            return self.advance()
        raise ParseError(message)

    def skip_newlines(self):
        while self.match(NEWLINE):
            pass

    def parse_program(self) -> Program:
        statements: List[Stmt] = []
        while not self.is_at_end():
            self.skip_newlines()
            if not self.is_at_end():
                statements.append(self.parse_statement())
        return Program(statements)

    def parse_statement(self) -> Stmt:
        if self.match(LET):
            return self.parse_let_stmt()
        if self.match(LEFT_BRACE):
            return self.parse_block()
        if self.check(IDENTIFIER) and self.peek().lexeme == 'print':
            return self.parse_print_stmt()
        return self.parse_expression_stmt()

    def parse_let_stmt(self) -> LetStmt:
        name = self.consume(IDENTIFIER, "Expected variable name")
        initializer = None
        if self.match(EQUAL):
            initializer = self.parse_expression()
        self.match(SEMICOLON, NEWLINE)
        return LetStmt(name.lexeme, initializer)

    def parse_block(self) -> BlockStmt:
        # the opening brace is already consumed
        statements: List[Stmt] = []
        while not self.check(RIGHT_BRACE) and not self.is_at_end():
            self.skip_newlines()
            if not self.check(RIGHT_BRACE):
                statements.append(self.parse_statement())
        self.consume(RIGHT_BRACE, "Expected '}' after block")
        return BlockStmt(statements)

    def parse_print_stmt(self) -> PrintStmt:
        self.advance()  # 'print'
        self.consume(LEFT_PAREN, "Expected '(' after 'print'")
        expr = self.parse_expression()
        self.consume(RIGHT_PAREN, "Expected ')' after expression")
        self.match(SEMICOLON, NEWLINE)
        return PrintStmt(expr)

    def parse_expression_stmt(self) -> ExpressionStmt:
        expr = self.parse_expression()
        self.match(SEMICOLON, NEWLINE)
        return ExpressionStmt(expr)

    def parse_expression(self) -> Expr:
        return self.parse_assignment()

    # assignment: term ('=' assignment)?
    def parse_assignment(self) -> Expr:
        expr = self.parse_term()
        if self.match(EQUAL):
            value = self.parse_assignment()
            if isinstance(expr, Variable):
                return Assign(expr.name, value)
            raise ParseError("Invalid assignment target")
        return expr

    def parse_term(self) -> Expr:
        expr = self.parse_factor()
        while self.match(MINUS, PLUS):
            op = self.previous()
            right = self.parse_factor()
            expr = Binary(expr, op, right)
        return expr

    def parse_factor(self) -> Expr:
        expr = self.parse_primary()
        while self.match(SLASH, STAR):
            op = self.previous()
            right = self.parse_primary()
            expr = Binary(expr, op, right)
        return expr

    def parse_primary(self) -> Expr:
        if self.match(TRUE):
            return Literal(True)
        if self.match(FALSE):
            return Literal(False)
        if self.match(NIL_KW):
            return Literal(NIL)
        if self.match(NUMBER, STRING):
            return Literal(self.previous().literal)
        if self.match(IDENTIFIER):
            return Variable(self.previous().lexeme)
        if self.match(LEFT_PAREN):
            expr = self.parse_expression()
            self.consume(RIGHT_PAREN, "Expected ')' after expression")
            return expr
        raise ParseError("Expected expression")


def parse_program(source: str) -> Program:
    """Parse Sprig source code into a Program AST.

    Lexing and parsing errors are raised as :class:`LexError` and
    :class:`ParseError` respectively.
    """
    tokens = tokenize(source)
    parser = Parser(tokens)
    return parser.parse_program()
