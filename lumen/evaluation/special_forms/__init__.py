"""Registry of special forms for the lumen evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
Handlers receive the unevaluated operands as a Python list, the current
environment and the evaluator function; they return either a value or a
TailCall for the evaluator loop to continue with.
"""

from lumen.types.symbol import Symbol
from lumen.evaluation.special_forms.catch_error_form import catch_error_form
from lumen.evaluation.special_forms.define_form import define_form
from lumen.evaluation.special_forms.defmacro_form import defmacro_form
from lumen.evaluation.special_forms.if_form import if_form
from lumen.evaluation.special_forms.lambda_form import lambda_form, case_lambda_form
from lumen.evaluation.special_forms.let_form import let_form
from lumen.evaluation.special_forms.logic_forms import and_form, or_form
from lumen.evaluation.special_forms.progn_form import begin_form
from lumen.evaluation.special_forms.quote_forms import quote_form, quasiquote_form, unquote_form, unquote_splice_form
from lumen.evaluation.special_forms.set_form import set_form

SPECIAL_FORMS = {
    Symbol("and"): and_form,
    Symbol("begin"): begin_form,
    Symbol("case-lambda"): case_lambda_form,
    Symbol("catch-error"): catch_error_form,
    Symbol("define"): define_form,
    Symbol("define-macro"): defmacro_form,
    Symbol("if"): if_form,
    Symbol("lambda"): lambda_form,
    Symbol("let"): let_form,
    Symbol("or"): or_form,
    Symbol("quote"): quote_form,
    Symbol("quasiquote"): quasiquote_form,
    Symbol("unquote"): unquote_form,
    Symbol("unquote-splicing"): unquote_splice_form,
    Symbol("set!"): set_form,
}
