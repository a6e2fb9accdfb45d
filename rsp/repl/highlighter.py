"""ANSI syntax highlighting for REPL input and results."""
from __future__ import annotations

from rsp.reader.parser import LITERALS, NUMBER_RE, lex
from rsp.evaluation.special_forms.keywords import RESERVED_KEYWORDS

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_SPECIAL_FORM = "\033[1;35m"
COLOR_NUMBER = "\033[94m"
COLOR_STRING = "\033[92m"
COLOR_LITERAL = "\033[96m"
COLOR_COMMENT = "\033[90m"
COLOR_ERROR = "\033[91m"


def _color_for(kind: str, text: str) -> str | None:
    match kind:
        case "comment":
            return COLOR_COMMENT
        case "string":
            return COLOR_STRING
        case "unterminated":
            return COLOR_ERROR
        case "atom" if text in RESERVED_KEYWORDS:
            return COLOR_SPECIAL_FORM
        case "atom" if text in LITERALS:
            return COLOR_LITERAL
        case "atom" if NUMBER_RE.fullmatch(text):
            return COLOR_NUMBER
    return None


def colorize(text: str, color: str) -> str:
    return f"{color}{text}{RESET}"


def highlight(source: str) -> str:
    """Return `source` with ANSI colors added; the text itself is unchanged."""
    out: list[str] = []
    for kind, text, _ in lex(source, keep_trivia=True):
        color = _color_for(kind, text)
        out.append(colorize(text, color) if color else text)
    return "".join(out)
