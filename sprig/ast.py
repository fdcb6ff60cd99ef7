"""Abstract Syntax Tree (AST) definitions for the Sprig language.

Expressions and statements are two closed families of dataclasses. Every
node owns its children outright; subtrees are never shared. The
interpreter dispatches on the node class.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

from .lexer import Token


@dataclass
class Node:
    """Base class for all AST nodes."""
    pass


# Expressions

@dataclass
class Expr(Node):
    pass


@dataclass
class Literal(Expr):
    value: Any


@dataclass
class Variable(Expr):
    name: str


@dataclass
class Binary(Expr):
    left: Expr
    operator: Token
    right: Expr


@dataclass
class Assign(Expr):
    name: str
    value: Expr


# Statements

@dataclass
class Stmt(Node):
    pass


@dataclass
class ExpressionStmt(Stmt):
    expr: Expr


@dataclass
class PrintStmt(Stmt):
    expr: Expr


@dataclass
class LetStmt(Stmt):
    name: str
    initializer: Optional[Expr]  # nil when absent


@dataclass
class BlockStmt(Stmt):
    statements: List[Stmt]


@dataclass
class Program(Node):
    body: List[Stmt]
