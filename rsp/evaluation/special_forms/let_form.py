import logging

from rsp import EvaluatorFn
from rsp import SExpression, LispValue
from rsp.errors import RspArityError, RspReservedKeyword, RspTypeError
from rsp.evaluation.special_forms.keywords import is_special_form
from rsp.printer import lisp_repr
from rsp.types.environment import Environment
from rsp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let name value)
    Defines `name` in the current frame and returns the evaluated value.
    """
    if len(tail) != 2:
        raise RspArityError(f"'let' expects 2 arguments, got {len(tail)}")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        logger.debug("First argument to 'let' must be a symbol, found %s", lisp_repr(name))
        raise RspTypeError("Symbol", lisp_repr(name))
    if is_special_form(name.id):
        logger.debug("Attempted to bind reserved keyword %r using 'let'", name.id)
        raise RspReservedKeyword(name.id)

    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    logger.debug("'let' bound %s", name)
    return value
