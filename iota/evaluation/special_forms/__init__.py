"""Registry of special forms for the Iota evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
procedure application. Every handler takes the operand forms, the active
environment, the primitive table and the evaluator to recurse with.
"""

from iota.types.symbol import Symbol
from iota.evaluation.special_forms.begin_form import begin_form
from iota.evaluation.special_forms.quote_form import quote_form
from iota.evaluation.special_forms.lambda_form import lambda_form
from iota.evaluation.special_forms.define_form import define_form
from iota.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    Symbol("begin"): begin_form,
    Symbol("quote"): quote_form,
    Symbol("lambda"): lambda_form,
    Symbol("define"): define_form,
    Symbol("if"): if_form,
}
