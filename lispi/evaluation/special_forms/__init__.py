"""Registry of special forms for the lispi evaluator.

Maps Symbols to handlers that receive their argument forms unevaluated along
with the caller's Environment and the evaluator. `register` wraps each
handler in a Function and binds it in the global scope, so special forms are
found by ordinary symbol lookup like any other function.
"""

from lispi.types.symbol import Symbol
from lispi.evaluation.special_forms.define_form import define_form
from lispi.evaluation.special_forms.if_form import if_form
from lispi.evaluation.special_forms.lambda_form import lambda_form
from lispi.evaluation.special_forms.import_form import import_form

SPECIAL_FORMS = {
    Symbol("def"): define_form,
    Symbol("if"): if_form,
    Symbol("fn"): lambda_form,
    Symbol("import"): import_form,
}
