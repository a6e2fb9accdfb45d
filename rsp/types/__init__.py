from rsp.types.symbol import Symbol
from rsp.types.nil import Nil, NilType, is_truthy
from rsp.types.environment import Environment
from rsp.types.lambda_fn import Lambda
from rsp.types.native_fn import NativeFunction
from rsp.types.module import Module

__all__ = [
    "Symbol",
    "Nil",
    "NilType",
    "is_truthy",
    "Environment",
    "Lambda",
    "NativeFunction",
    "Module",
]
