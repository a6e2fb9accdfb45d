"""Application engine for rsp.

Centralizes function application semantics for the interpreter:
- Lisp Lambdas run their body in a fresh frame enclosed by the closure env
  (lexical scope), never by the caller's env.
- NativeFunctions are handed the evaluated argument list directly.
- Anything else is not callable.
"""

import logging

from rsp import LispValue, EvaluatorFn
from rsp.errors import RspArityError, RspNotAFunction
from rsp.printer import lisp_repr
from rsp.types.lambda_fn import Lambda
from rsp.types.native_fn import NativeFunction

logger = logging.getLogger(__name__)


def apply_lambda(fn: Lambda, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a Lisp Lambda value to already-evaluated arguments.

    The argument count must match the parameter count exactly; there is no
    partial application and no rest parameter.
    """
    if len(args) != fn.arity:
        logger.debug("Arity mismatch: expected %d arguments, got %d", fn.arity, len(args))
        raise RspArityError(f"Function expects {fn.arity} arguments, got {len(args)}")

    call_env = fn.extend_env(args)
    logger.debug("Evaluating body of %s in new frame %#x", fn, id(call_env))
    return evaluate_fn(fn.body, call_env)


def apply(head: LispValue, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply either a Lambda or a NativeFunction; raise RspNotAFunction otherwise."""
    if isinstance(head, Lambda):
        return apply_lambda(head, args, evaluate_fn)
    elif isinstance(head, NativeFunction):
        logger.debug("Applying native function %s", head.name)
        return head(args)
    else:
        logger.debug("Attempted to call non-function %s", lisp_repr(head))
        raise RspNotAFunction(
            f"Expected a Lisp function or a native function, but found: {lisp_repr(head)}"
        )
