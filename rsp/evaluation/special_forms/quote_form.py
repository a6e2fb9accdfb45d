from rsp import SExpression, LispValue, EvaluatorFn
from rsp.errors import RspArityError
from rsp.types.environment import Environment


def quote_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    if len(tail) != 1:
        raise RspArityError(f"'quote' expects 1 argument, got {len(tail)}")
    return tail[0]
