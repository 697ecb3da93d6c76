"""
Restricted math expressions for user defined profile curves.

A profile curve given on the command line (or by a caller that accepts user
input) is written as two expressions of a single parameter, for example:

    radius = "sin(t)"
    height = "1.3 * cos(t)"

The text is parsed to an AST and every node is checked against a whitelist
before anything is evaluated, so the expression can only do arithmetic and
call the math functions listed below. Attribute access, subscripts, lambdas,
comprehensions and keyword arguments are rejected.
"""

from __future__ import annotations

import ast
import math
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List

_FUNCTIONS: Dict[str, Callable[..., float]] = {
    "sin": math.sin,
    "cos": math.cos,
    "tan": math.tan,
    "asin": math.asin,
    "acos": math.acos,
    "atan": math.atan,
    "atan2": math.atan2,
    "sinh": math.sinh,
    "cosh": math.cosh,
    "sqrt": math.sqrt,
    "exp": math.exp,
    "log": math.log,
    "pow": pow,
    "abs": abs,
    "min": min,
    "max": max,
}

_CONSTANTS: Dict[str, float] = {
    "pi": math.pi,
    "e": math.e,
    "tau": math.tau,
}

_NODES = (
    ast.Expression,
    ast.BinOp,
    ast.UnaryOp,
    ast.Add,
    ast.Sub,
    ast.Mult,
    ast.Div,
    ast.Mod,
    ast.Pow,
    ast.USub,
    ast.UAdd,
    ast.Call,
    ast.Name,
    ast.Load,
    ast.Constant,
)


class _Checker(ast.NodeVisitor):
    def __init__(self, parameter: str) -> None:
        self.parameter = parameter

    def generic_visit(self, node: ast.AST) -> None:
        if not isinstance(node, _NODES):
            raise ValueError(f"Disallowed syntax: {type(node).__name__}")
        super().generic_visit(node)

    def visit_Call(self, node: ast.Call) -> None:
        if not isinstance(node.func, ast.Name) or node.func.id not in _FUNCTIONS:
            name = getattr(node.func, "id", type(node.func).__name__)
            raise ValueError(f"Function not allowed: {name}")
        if node.keywords:
            raise ValueError("Keyword arguments are not allowed in function calls")
        for arg in node.args:
            self.visit(arg)

    def visit_Name(self, node: ast.Name) -> None:
        if node.id != self.parameter and node.id not in _FUNCTIONS and node.id not in _CONSTANTS:
            raise ValueError(f"Name not allowed: {node.id}")

    def visit_Constant(self, node: ast.Constant) -> None:
        if isinstance(node.value, bool) or not isinstance(node.value, (int, float)):
            raise ValueError(
                f"Only numeric constants are allowed (got {type(node.value).__name__})"
            )


@dataclass(frozen=True)
class Expression:
    """A validated one-parameter expression, compiled once and called per sample."""

    text: str
    parameter: str
    _fn: Callable[[float], float]

    def __call__(self, value: float) -> float:
        result = self._fn(float(value))
        if isinstance(result, complex):
            raise ValueError(f"{self.text!r} is not real at {self.parameter}={value:g}")
        return float(result)

    def evaluate(self, values: Iterable[float]) -> List[float]:
        return [self(v) for v in values]


def compile_expression(text: str, parameter: str = "t") -> Expression:
    """Validate ``text`` and compile it into a callable of ``parameter``.

    Raises ValueError for syntax errors and for anything outside the whitelist.
    """
    if not parameter.isidentifier() or parameter in _FUNCTIONS or parameter in _CONSTANTS:
        raise ValueError(f"Invalid parameter name: {parameter!r}")
    try:
        tree = ast.parse(text, mode="eval")
    except SyntaxError as exc:
        raise ValueError(f"Invalid expression {text!r}: {exc.msg}") from None
    _Checker(parameter).visit(tree)

    scope: Dict[str, object] = {"__builtins__": {}}
    scope.update(_FUNCTIONS)
    scope.update(_CONSTANTS)
    fn = eval(f"lambda {parameter}: ({text})", scope, {})  # AST checked, builtins removed
    return Expression(text=text, parameter=parameter, _fn=fn)
