"""Names of the special forms. These are reserved and cannot be bound by
`let` or used as `fn` parameters."""

LET = "let"
QUOTE = "quote"
FN = "fn"
IF = "if"
REQUIRE = "require"

RESERVED_KEYWORDS = frozenset({LET, QUOTE, FN, IF, REQUIRE})


def is_special_form(name: str) -> bool:
    return name in RESERVED_KEYWORDS
