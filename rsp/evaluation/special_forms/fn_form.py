import logging

from rsp.errors import RspArityError, RspReservedKeyword, RspTypeError
from rsp.evaluation.special_forms.keywords import is_special_form
from rsp.printer import lisp_repr
from rsp.types.lambda_fn import Lambda

from rsp import EvaluatorFn
from rsp import SExpression, LispValue
from rsp.types.environment import Environment
from rsp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def fn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (fn (params...) body): exactly one body expression. The body is kept
    # unevaluated and the current env is captured by reference.
    if len(tail) != 2:
        raise RspArityError(
            f"'fn' expects 2 arguments (parameters list and body), got {len(tail)}"
        )

    params_expr, body = tail
    if not isinstance(params_expr, list):
        raise RspTypeError("List of parameters", lisp_repr(params_expr))

    params: list[str] = []
    for param in params_expr:
        if not isinstance(param, Symbol):
            raise RspTypeError("Symbol", lisp_repr(param))
        if is_special_form(param.id):
            logger.debug("Attempted to use reserved keyword %r as a parameter", param.id)
            raise RspReservedKeyword(param.id)
        params.append(param.id)

    logger.debug("'fn' creating function with parameters %s", params)
    return Lambda(params, body, env)
