"""Registry of special forms for the LSON evaluator.

Maps head strings to handler functions that implement non-standard
evaluation rules. The evaluator consults this table before macro lookup
and ordinary function application; a head is matched literally.
"""

from lson.evaluation.special_forms.quote_form import quote_form
from lson.evaluation.special_forms.def_form import def_form
from lson.evaluation.special_forms.if_form import if_form
from lson.evaluation.special_forms.fn_form import fn_form
from lson.evaluation.special_forms.defmacro_form import defmacro_form
from lson.evaluation.special_forms.do_form import do_form

SPECIAL_FORMS = {
    "quote": quote_form,
    "": quote_form,
    "def": def_form,
    "if": if_form,
    "fn": fn_form,
    "defmacro": defmacro_form,
    "do": do_form,
}
