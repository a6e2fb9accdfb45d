from __future__ import annotations

from pathlib import Path


class RspError(Exception):
    """ Base class for all rsp errors"""
    pass


class RspEvaluationError(RspError):
    """ Raised for evaluation failures not otherwise classified"""

    def __init__(self, message: str):
        super().__init__(f"Evaluation error: {message}")
        self.message = message


class RspTypeError(RspError):
    """ Raised when an operand or argument has the wrong kind of value"""

    def __init__(self, expected: str, found: str):
        super().__init__(f"Type error: expected {expected}, found {found}")
        self.expected = expected
        self.found = found


class RspUndefinedSymbol(RspError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, name: str):
        super().__init__(f"Undefined symbol: {name}")
        self.name = name


class RspArityError(RspError):
    """ Raised when the number of arguments passed to a form or function is incorrect"""

    def __init__(self, message: str):
        super().__init__(f"Arity mismatch: {message}")
        self.message = message


class RspReservedKeyword(RspError):
    """ Raised when a special form name is bound as a variable or parameter"""

    def __init__(self, name: str):
        super().__init__(f"Cannot bind reserved keyword: {name}")
        self.name = name


class RspNotAFunction(RspError):
    """ Raised when a non-callable value is applied"""

    def __init__(self, description: str):
        super().__init__(f"Not a function: {description}")
        self.description = description


class RspNotAModule(RspError):
    """ Raised when member access is attempted on a value that is not a module"""

    def __init__(self, name: str):
        super().__init__(f"Symbol '{name}' is not a module, cannot access members.")
        self.name = name


class RspMemberNotFoundInModule(RspError):
    """ Raised when a qualified symbol names a member the module does not define"""

    def __init__(self, module: str, member: str):
        super().__init__(f"Member '{member}' not found in module '{module}'.")
        self.module = module
        self.member = member


class RspModuleNotFound(RspError):
    """ Raised when a required module file does not exist"""

    def __init__(self, path: Path):
        super().__init__(f"Module not found: {path}")
        self.path = path


class RspModuleIoError(RspError):
    """ Raised when resolving or reading a module fails for a reason other than absence"""

    def __init__(self, path: Path, kind: str, message: str):
        super().__init__(f"I/O error for module '{path}': kind: {kind}, message: {message}")
        self.path = path
        self.kind = kind
        self.message = message


class RspModuleLoadError(RspError):
    """ Raised when parsing or evaluating a module's contents fails; wraps the inner error"""

    def __init__(self, path: Path, source: RspError):
        super().__init__(f"Error loading module '{path}': {source}")
        self.path = path
        self.source = source


class RspDivisionByZero(RspError):
    """ Raised by arithmetic natives on a zero divisor"""

    def __init__(self, message: str):
        super().__init__(f"Division by zero: {message}")
        self.message = message


class RspValueError(RspError):
    """ Raised when a well-typed value is structurally invalid for the operation"""

    def __init__(self, message: str):
        super().__init__(f"Value error: {message}")
        self.message = message


class RspSyntaxError(RspError):
    """ Raised by the reader on malformed source text.

    `incomplete` is set when the text ended before the expression did, so a
    caller reading interactively can ask for more input.
    """

    def __init__(self, message: str, position: int | None = None, incomplete: bool = False):
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Syntax error{where}: {message}")
        self.message = message
        self.position = position
        self.incomplete = incomplete
