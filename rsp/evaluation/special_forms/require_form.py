from __future__ import annotations

import logging

from rsp import SExpression, LispValue, EvaluatorFn
from rsp.errors import RspArityError, RspTypeError
from rsp.modules.module_loader import require
from rsp.printer import lisp_repr
from rsp.types.environment import Environment
from rsp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def require_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    Usage:
        (require "path/to/module")   ; loads path/to/module.lisp
        (require 'math)              ; returns the built-in math module
    The argument is evaluated and must produce a string or a symbol.
    """
    if len(tail) != 1:
        raise RspArityError(
            f"'require' expects 1 argument (path string or symbol), got {len(tail)}"
        )

    specifier = evaluate_fn(tail[0], env)
    if isinstance(specifier, Symbol):
        specifier = specifier.id
    elif not isinstance(specifier, str):
        logger.debug("'require' argument must evaluate to a string or symbol, found %s", lisp_repr(specifier))
        raise RspTypeError("String or Symbol path", lisp_repr(specifier))

    return require(specifier, env, evaluate_fn)
