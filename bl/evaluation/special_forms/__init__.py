"""Registry of special forms for the bl evaluator.

Maps symbol names to handler functions that implement non-standard evaluation
rules. Each RuntimeContext interns these names and dispatches on the resulting
Symbols by identity before ordinary function application.
"""

from bl.evaluation.special_forms.quote_form import quote_form
from bl.evaluation.special_forms.if_form import if_form
from bl.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    "quote": quote_form,
    "if": if_form,
    "lambda": lambda_form,
}
