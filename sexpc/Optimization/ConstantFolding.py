from __future__ import annotations

import functools
import logging
import math
import operator
from decimal import Decimal

from sexpc.SyntacticAnalysis import Ast
from sexpc.Traversal.Traverser import Order, Visitor

logger = logging.getLogger(__name__)


def divide(lhs: float, rhs: float) -> float:
    # Python raises on a float division by zero, so produce the IEEE result by hand.
    if rhs == 0:
        if lhs == 0 or math.isnan(lhs):
            return math.nan
        return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)
    return lhs / rhs


ARITHMETIC = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": divide,
}


def format_number(value: float) -> str:
    """
    Render a folded number with the fewest digits that read back as the same float. Exponents below -4 or from 6 up
    switch to exponent notation with a signed, two digit exponent ("1e+06", "2.5e-07"); anything in between is written
    out in full ("100000", "0.0001"). Negative zero keeps its sign.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"

    # repr() gives the shortest round-trip digits, normalize() strips any trailing zeros from them.
    number = Decimal(repr(value)).normalize()
    sign, digits, exponent = number.as_tuple()
    digits = "".join(map(str, digits))
    point = len(digits) + exponent - 1

    if point < -4 or point >= 6:
        mantissa = digits[0] + (f".{digits[1:]}" if len(digits) > 1 else "")
        return f"{'-' if sign else ''}{mantissa}e{'-' if point < 0 else '+'}{abs(point):02d}"
    return format(number, "f")


class ConstantFolding(Visitor):
    """
    Replace an arithmetic call whose params are all number literals with the literal it evaluates to, so "(* 3 2)"
    becomes "6". Arithmetic is done in floating point whatever the operands look like, so "(/ 7 2)" becomes "3.5".

    The walk is post-order, so "(+ 5 (* 3 2))" first folds the inner call to "6" and then folds the outer call, whose
    params are now both literals, to "11". Only calls are folded: the binary expression "+ 1 2" is left as it is.
    """
    ORDER = Order.Post

    def visit_call_expression(self, ast: Ast.CallExpressionAst, parent) -> Ast.NumberLiteralAst | None:
        if ast.name not in ARITHMETIC or len(ast.params) < 2:
            return None
        if not all(isinstance(param, Ast.NumberLiteralAst) for param in ast.params):
            return None

        operands = [float(param.value) for param in ast.params]
        result = format_number(functools.reduce(ARITHMETIC[ast.name], operands))
        logger.debug("Folded (%s %s) to %s", ast.name, " ".join(p.value for p in ast.params), result)
        return Ast.NumberLiteralAst(result)
