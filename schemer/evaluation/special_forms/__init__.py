"""Registry of special forms for the Schemer evaluator.

Special forms are ordinary native procedures that inspect their operands
before (or instead of) evaluating them. They are bound in the root
environment like any other procedure, so `if` can be rebound or passed
around as a value.
"""

from schemer.evaluation.special_forms.define_form import define_form
from schemer.evaluation.special_forms.set_form import set_form
from schemer.evaluation.special_forms.lambda_form import lambda_form
from schemer.evaluation.special_forms.if_form import if_form
from schemer.evaluation.special_forms.logic_forms import and_form, or_form
from schemer.evaluation.special_forms.quote_forms import quote_form, quasiquote_form

SPECIAL_FORMS = (
    ("define", define_form),
    ("set!", set_form),
    ("lambda", lambda_form),
    ("λ", lambda_form),
    ("if", if_form),
    ("and", and_form),
    ("or", or_form),
    ("quote", quote_form),
    ("quasiquote", quasiquote_form),
)
