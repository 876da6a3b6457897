"""Registry of special forms for the minilisp evaluator.

Maps Symbols to handler functions that receive their arguments unevaluated.
The evaluator consults this table before builtins and user functions.
"""

from minilisp.types.symbol import Symbol
from minilisp.evaluation.special_forms.quote_form import quote_form
from minilisp.evaluation.special_forms.cond_form import cond_form
from minilisp.evaluation.special_forms.logic_forms import and_form
from minilisp.evaluation.special_forms.set_form import setq_form
from minilisp.evaluation.special_forms.define_form import defun_form
from minilisp.evaluation.special_forms.eval_form import eval_form
from minilisp.evaluation.special_forms.apply_form import apply_form
from minilisp.evaluation.special_forms.load_form import load_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("cond"): cond_form,
    Symbol("and"): and_form,
    Symbol("setq"): setq_form,
    Symbol("defun"): defun_form,
    Symbol("eval"): eval_form,
    Symbol("apply"): apply_form,
    Symbol("load"): load_form,
}
