"""Registry of special forms for the humble evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary procedure application, so
these keywords cannot be rebound as procedures.
"""

from humble.types.symbol import Symbol
from humble.evaluation.special_forms.define_form import define_form
from humble.evaluation.special_forms.set_form import set_form
from humble.evaluation.special_forms.if_form import if_form
from humble.evaluation.special_forms.logic_forms import and_form, or_form
from humble.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    Symbol("define"): define_form,
    Symbol("set!"): set_form,
    Symbol("if"): if_form,
    Symbol("and"): and_form,
    Symbol("or"): or_form,
    Symbol("lambda"): lambda_form,
}
