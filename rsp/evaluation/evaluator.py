"""Core evaluator for the rsp interpreter.

Implements the recursive eval: self-evaluating atoms, symbol resolution
(including qualified `module/member` access), special-form dispatch, and
function application with strict left-to-right argument evaluation. There is
no tail-call elimination; recursion depth is bounded by the Python stack.
"""

from __future__ import annotations

import logging

from rsp import SExpression, LispValue
from rsp.errors import RspMemberNotFoundInModule, RspNotAModule, RspUndefinedSymbol
from rsp.evaluation.apply import apply
from rsp.evaluation.special_forms import SPECIAL_FORMS
from rsp.types.environment import Environment
from rsp.types.module import Module
from rsp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def _lookup(name: str, env: Environment) -> LispValue:
    value = env.get(name)
    if value is None:
        logger.debug("Undefined symbol %r encountered", name)
        raise RspUndefinedSymbol(name)
    return value


def _member(module: Module, module_name: str, member: str) -> LispValue:
    value = module.member(member)
    if value is None:
        logger.debug("Member %r not found in module %r", member, module_name)
        raise RspMemberNotFoundInModule(module_name, member)
    return value


def resolve_symbol(symbol: Symbol, env: Environment) -> LispValue:
    """Value of a symbol in `env`.

    `a/b` with both parts non-empty reads member `b` from the module bound to
    `a`. Symbols with an empty part around the '/' (such as the division
    operator itself) are plain names.
    """
    parts = symbol.split_qualified()
    if parts is None:
        return _lookup(symbol.id, env)

    module_name, member = parts
    target = env.get(module_name)
    if target is None:
        logger.debug("Module variable %r not found for member access", module_name)
        raise RspUndefinedSymbol(module_name)
    if not isinstance(target, Module):
        logger.debug("Variable %r is not a module, cannot access member", module_name)
        raise RspNotAModule(module_name)
    logger.debug("Accessing member %r of module held by %r", member, module_name)
    return _member(target, module_name, member)


def resolve_callable_head(symbol: Symbol, env: Environment) -> LispValue:
    """Resolve the symbol in the head of a call.

    A qualified head first treats its module part as a variable. If that does
    not give a module, the module part is looked up as a global module name in
    the root frame, so a local binding that shadows a built-in module name
    does not hide the module in call position.
    """
    parts = symbol.split_qualified()
    if parts is None:
        return _lookup(symbol.id, env)

    module_name, member = parts
    as_variable = env.get(module_name)
    if isinstance(as_variable, Module):
        return _member(as_variable, module_name, member)

    as_global = env.root().vars.get(module_name)
    if isinstance(as_global, Module):
        logger.debug("%r is not a module in scope, using global module of that name", module_name)
        return _member(as_global, module_name, member)

    if as_variable is not None or as_global is not None:
        raise RspNotAModule(module_name)
    logger.debug("Neither a variable nor a global module named %r exists", module_name)
    raise RspUndefinedSymbol(symbol.id)


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env`.

    Raises an RspError subclass on failure; errors pass through unchanged.
    """
    logger.debug("Evaluating %r", expr)
    match expr:
        case Symbol():
            return resolve_symbol(expr, env)

        case []:
            return []

        case [head, *tail_args]:
            # --- Special forms handling ---
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail_args, env, evaluate)

            # --- Function application ---
            if isinstance(head, Symbol):
                fn = resolve_callable_head(head, env)
            else:
                fn = evaluate(head, env)

            args = [evaluate(arg, env) for arg in tail_args]
            return apply(fn, args, evaluate)

    # --- Atoms return as-is ---
    return expr
