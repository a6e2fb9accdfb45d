from __future__ import annotations

import logging
from typing import Optional

from rsp import LispValue, SExpression, EvaluatorFn
from rsp.reader.parser import parse_one
from rsp.types.environment import Environment
from rsp.types.nil import Nil

logger = logging.getLogger(__name__)


def evaluate_source(code: str, env: Environment, eval_fn: Optional[EvaluatorFn] = None) -> LispValue:
    """Read and evaluate every expression in `code` within `env`.

    Returns the value of the last expression, or Nil if there were none.
    Errors propagate; bindings made before a failing expression are kept.
    """
    if eval_fn is None:
        from rsp.evaluation.evaluator import evaluate
        eval_fn = evaluate

    result: LispValue = Nil
    remaining = code
    while remaining.strip():
        remaining, expr = parse_one(remaining)
        if expr is None:
            break
        result = eval_fn(expr, env)
    return result


class Interpreter:
    """
    Orchestrates reading and evaluating rsp code.
    Maintains one root Environment, with the prelude, across calls.
    """

    def __init__(self, eval_fn: Optional[EvaluatorFn] = None, prelude: Optional[str] = None):
        if eval_fn is None:
            from rsp.evaluation.evaluator import evaluate
            eval_fn = evaluate
        self.eval_fn = eval_fn
        self.env: Environment = Environment.with_prelude()

        if prelude:
            logger.debug("Evaluating user prelude")
            self.eval(prelude)

    def eval_expr(self, expr: SExpression) -> LispValue:
        return self.eval_fn(expr, self.env)

    def eval(self, code: str) -> LispValue:
        return evaluate_source(code, self.env, self.eval_fn)
