"""Tree-walking interpreter for the Sprig language.

An :class:`Interpreter` owns the global scope and runs submissions
against it. Each submission is lexed, parsed and then executed statement
by statement; the text printed along the way is collected and returned.
Bindings made by one submission stay visible to the next until
:meth:`Interpreter.reset` is called.

An interpreter instance is not safe for concurrent use: callers that
share one between threads must serialize their calls.
"""

from __future__ import annotations

import io
import math
from typing import Any, List, Optional, TextIO

from .ast import (
    Program, Stmt, Expr, ExpressionStmt, PrintStmt, LetStmt, BlockStmt,
    Literal, Variable, Binary, Assign,
)
from .environment import Environment
from .errors import SprigError, SprigRuntimeError
from .lexer import tokenize, PLUS, MINUS, STAR, SLASH
from .parser import Parser
from .types import NIL, is_number, is_string, to_number, to_string, type_name


class Interpreter:
    """Core interpreter that executes Sprig ASTs against a global scope."""
    def __init__(self, debug_level: int = 0, debug_file: str = 'debug.txt'):
        self.global_env = Environment()
        self.debug_level = debug_level
        self.debug_fp = open(debug_file, 'w', encoding='utf-8') if debug_level > 0 else None
        self.out: Optional[TextIO] = None
        self.last_error: Optional[SprigError] = None

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg)

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    # Public API
    def interpret(self, source: str) -> str:
        """Run one submission and return everything it printed.

        If lexing, parsing or evaluation fails, the result ends with a
        single ``Error: <message>`` line. Output printed by statements
        that ran before the failure is kept in front of it.
        """
        buffer = io.StringIO()
        self.last_error = None
        self.debug(f"submission: {len(source)} chars")
        try:
            tokens = tokenize(source)
            program = Parser(tokens).parse_program()
            if self.debug_level >= 3:
                self.debug(f"tokens: {len(tokens)}, statements: {len(program.body)}")
            self.run(program, buffer)
        except RecursionError:
            # nested parentheses, blocks or assignments beyond the Python stack
            self.fail(SprigError("Maximum nesting depth exceeded"), buffer)
        except SprigError as e:
            self.fail(e, buffer)
        return buffer.getvalue()

    def fail(self, error: SprigError, buffer: TextIO):
        self.debug(f"error: {error.message}")
        self.last_error = error
        buffer.write(f"Error: {error.message}\n")

    def reset(self):
        """Forget every global binding."""
        self.global_env = Environment()
        self.debug("reset")

    def run(self, program: Program, out: Optional[TextIO] = None):
        """Execute a parsed program against the global scope.

        Print output goes to ``out`` when given, otherwise to stdout.
        Errors propagate to the caller.
        """
        previous = self.out
        self.out = out
        try:
            self.execute_block(program.body, self.global_env)
        finally:
            self.out = previous

    def execute_block(self, statements: List[Stmt], env: Environment):
        for stmt in statements:
            self.execute(stmt, env)

    def execute(self, node: Stmt, env: Environment):
        if isinstance(node, ExpressionStmt):
            self.evaluate(node.expr, env)
            return
        if isinstance(node, PrintStmt):
            value = self.evaluate(node.expr, env)
            self.write(to_string(value))
            return
        if isinstance(node, LetStmt):
            value = self.evaluate(node.initializer, env) if node.initializer is not None else NIL
            env.define(node.name, value)
            if self.debug_level >= 2:
                self.debug(f"define {node.name}: {type_name(value)} = {to_string(value)} (depth {env.depth()})")
            return
        if isinstance(node, BlockStmt):
            # the block scope is dropped once this frame returns or unwinds
            block_env = Environment(parent=env)
            self.execute_block(node.statements, block_env)
            return
        raise NotImplementedError(f"execute: unexpected node type {type(node)}")

    def evaluate(self, node: Expr, env: Environment) -> Any:
        if isinstance(node, Literal):
            return node.value
        if isinstance(node, Variable):
            return env.get(node.name)
        if isinstance(node, Assign):
            value = self.evaluate(node.value, env)
            env.assign(node.name, value)
            if self.debug_level >= 2:
                self.debug(f"assign {node.name}: {type_name(value)} = {to_string(value)}")
            return value
        if isinstance(node, Binary):
            # walk the left spine so long operator chains do not recurse
            chain: List[Binary] = []
            while isinstance(node, Binary):
                chain.append(node)
                node = node.left
            value = self.evaluate(node, env)
            for binary in reversed(chain):
                right = self.evaluate(binary.right, env)
                value = self.apply_binary_op(binary.operator.type, value, right)
            return value
        raise NotImplementedError(f"evaluate: unexpected node type {type(node)}")

    def apply_binary_op(self, op: str, a: Any, b: Any) -> Any:
        if op == PLUS:
            if is_number(a) and is_number(b):
                return a + b
            # If either operand is a string, stringify both and concatenate
            if is_string(a) or is_string(b):
                return to_string(a) + to_string(b)
            raise SprigRuntimeError("Invalid binary operation")
        if op == MINUS:
            return to_number(a) - to_number(b)
        if op == STAR:
            return to_number(a) * to_number(b)
        if op == SLASH:
            return divide(to_number(a), to_number(b))
        raise SprigRuntimeError("Invalid binary operation")

    def write(self, text: str):
        if self.out is not None:
            self.out.write(text + '\n')
        else:
            print(text)


def divide(a: float, b: float) -> float:
    """IEEE division: a zero divisor gives an infinity or NaN, never an error."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def run_program(source: str, debug_level: int = 0) -> str:
    """Convenience function to run one submission in a fresh interpreter."""
    interpreter = Interpreter(debug_level=debug_level)
    try:
        return interpreter.interpret(source)
    finally:
        interpreter.close()


def run_file(file_path: str, debug_level: int = 0) -> str:
    """Read a Sprig source file and run it as a single submission."""
    with open(file_path, 'r', encoding='utf-8') as f:
        source = f.read()
    return run_program(source, debug_level=debug_level)
