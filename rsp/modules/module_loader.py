"""Resolution, loading and caching of on-disk modules for `require`.

A module specifier (string or symbol) maps to a `.lisp` file relative to the
current working directory. The canonical path of that file is the module's
identity: each canonical path is read and evaluated at most once per process,
after which every `require` is served from the ModuleCache.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from rsp import EvaluatorFn
from rsp.config import MODULE_SUFFIX
from rsp.errors import (
    RspError,
    RspEvaluationError,
    RspModuleIoError,
    RspModuleLoadError,
    RspModuleNotFound,
    RspSyntaxError,
)
from rsp.modules.module_cache import ModuleCache, get_module_cache
from rsp.reader.parser import parse_one
from rsp.types.environment import Environment
from rsp.types.module import Module

logger = logging.getLogger(__name__)


def _io_error(path: Path, e: OSError) -> RspModuleIoError:
    return RspModuleIoError(path, type(e).__name__, e.strerror or str(e))


def resolve_module_path(specifier: str) -> Path:
    """Turn a module specifier into a canonical filesystem path.

    Raises RspModuleNotFound if the target does not exist and RspModuleIoError
    for any other failure to resolve it.
    """
    relative = specifier if specifier.endswith(MODULE_SUFFIX) else specifier + MODULE_SUFFIX
    candidate = Path(relative)
    if not candidate.is_absolute():
        try:
            candidate = Path(os.getcwd()) / candidate
        except OSError as e:
            raise _io_error(candidate, e) from e

    try:
        canonical = candidate.resolve(strict=True)
    except FileNotFoundError:
        logger.debug("Module file %s does not exist", candidate)
        raise RspModuleNotFound(candidate) from None
    except OSError as e:
        raise _io_error(candidate, e) from e

    logger.debug("Module specifier %r resolved to %s", specifier, canonical)
    return canonical


def load_module(
    path: Path,
    evaluate_fn: EvaluatorFn,
    cache: Optional[ModuleCache] = None,
) -> Module:
    """Return the module at canonical `path`, loading it on the first request."""
    if cache is None:
        cache = get_module_cache()

    cached = cache.get(path)
    if cached is not None:
        logger.debug("Module %s found in cache", path)
        return cached

    if cache.is_loading(path):
        raise RspModuleLoadError(
            path, RspEvaluationError(f"Circular require of module '{path}'")
        )

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise _io_error(path, e) from e
    except UnicodeDecodeError as e:
        raise RspModuleIoError(path, "InvalidData", str(e)) from e

    # Modules never see the requiring code's bindings, only the prelude
    module_env = Environment.with_prelude()
    cache.begin_load(path)
    try:
        _run_module_source(path, content, module_env, evaluate_fn)
    finally:
        cache.end_load(path)

    module = Module(path, module_env)
    cache.insert(path, module)
    logger.debug("Module %s loaded and cached", path)
    return module


def _run_module_source(
    path: Path, content: str, env: Environment, evaluate_fn: EvaluatorFn
) -> None:
    remaining = content
    while True:
        remaining = remaining.lstrip()
        if not remaining:
            break
        try:
            remaining, expr = parse_one(remaining)
        except RspSyntaxError as e:
            logger.debug("Parsing error in module %s: %s", path, e)
            raise RspModuleLoadError(
                path, RspEvaluationError(f"Module parsing error in '{path}': {e}")
            ) from e
        if expr is None:
            # Only comments were left
            break
        try:
            evaluate_fn(expr, env)
        except RspError as e:
            logger.debug("Error evaluating expression in module %s: %s", path, e)
            raise RspModuleLoadError(path, e) from e


def require(
    specifier: str,
    env: Environment,
    evaluate_fn: EvaluatorFn,
    cache: Optional[ModuleCache] = None,
) -> Module:
    """Resolve `specifier` to a Module: a module bound under that name, else a file."""
    bound = env.get(specifier)
    if isinstance(bound, Module):
        logger.debug("Found module %r in environment, returning it", specifier)
        return bound
    if bound is not None:
        logger.debug("%r is bound to a non-module value, loading from the filesystem", specifier)

    return load_module(resolve_module_path(specifier), evaluate_fn, cache)
