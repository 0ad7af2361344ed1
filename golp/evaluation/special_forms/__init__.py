"""Registry of special forms for the Golp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
function application.
"""

from golp.types.symbol import Symbol
from golp.evaluation.special_forms.set_form import set_form
from golp.evaluation.special_forms.progn_form import progn_form
from golp.evaluation.special_forms.quote_forms import quote_form
from golp.evaluation.special_forms.lambda_form import lambda_form
from golp.evaluation.special_forms.define_form import define_form
from golp.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("set!"): set_form,
    Symbol("define"): define_form,
    Symbol("def"): define_form,
    Symbol("lambda"): lambda_form,
    Symbol("fn"): lambda_form,
    Symbol("begin"): progn_form,
}
