# Core type aliases for rsp's data model.
# Plain Python types (float, bool, str, list) represent both code (forms) and
# runtime values. Symbol, Nil, Lambda, NativeFunction and Module cover the rest.
#
# Naming guidance:
# - SExpression: use in reader/special-form code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable; the language is
# homoiconic so a value can always be read back as code.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any
# Forms alias
SExpression = LispValue

# Evaluator function type, handed to special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]
