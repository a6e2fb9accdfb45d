from rsp.evaluation.evaluator import evaluate, resolve_symbol, resolve_callable_head
from rsp.evaluation.apply import apply

__all__ = ["evaluate", "resolve_symbol", "resolve_callable_head", "apply"]
