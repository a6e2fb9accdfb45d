import logging

from rsp import EvaluatorFn
from rsp import SExpression, LispValue
from rsp.errors import RspArityError
from rsp.types.environment import Environment
from rsp.types.nil import Nil, is_truthy

logger = logging.getLogger(__name__)


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if not 2 <= len(tail) <= 3:
        raise RspArityError(f"'if' expects 2 or 3 arguments, got {len(tail)}")

    cond = evaluate_fn(tail[0], env)
    # Only false and nil are falsy
    if is_truthy(cond):
        logger.debug("'if' condition is truthy, evaluating then-branch")
        return evaluate_fn(tail[1], env)
    if len(tail) == 3:
        logger.debug("'if' condition is falsy, evaluating else-branch")
        return evaluate_fn(tail[2], env)
    return Nil
