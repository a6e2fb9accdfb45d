"""Registry of special forms for the rsp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
function application. Handlers take `(tail, env, evaluate_fn)` where `tail` is
the list of raw, unevaluated argument expressions.
"""

from rsp.types.symbol import Symbol
from rsp.evaluation.special_forms.keywords import (
    FN,
    IF,
    LET,
    QUOTE,
    REQUIRE,
    RESERVED_KEYWORDS,
    is_special_form,
)
from rsp.evaluation.special_forms.let_form import let_form
from rsp.evaluation.special_forms.quote_form import quote_form
from rsp.evaluation.special_forms.fn_form import fn_form
from rsp.evaluation.special_forms.if_form import if_form
from rsp.evaluation.special_forms.require_form import require_form

SPECIAL_FORMS = {
    Symbol(LET): let_form,
    Symbol(QUOTE): quote_form,
    Symbol(FN): fn_form,
    Symbol(IF): if_form,
    Symbol(REQUIRE): require_form,
}

__all__ = ["SPECIAL_FORMS", "RESERVED_KEYWORDS", "is_special_form"]
