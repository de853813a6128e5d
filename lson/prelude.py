"""Bootstrap programs, run once by every Interpreter before any user input.

They are written in LSON itself, using only special forms and the list
builtins, and define the rest of the surface syntax:

- `defun`, a macro: ["defun", f, params, body...] expands to
  ["do", ["def", f, ["fn", params, body...]], ["", f]]
- `not`, a function: false and null give true, anything else false
"""

BOOTSTRAP = [
    ["defmacro", "defun", ["name", "params", "&", "body"],
     ["list", ["", "do"],
      ["list", ["", "def"], "name",
       ["append", ["list", ["", "fn"], "params"], "body"]],
      ["list", ["", ""], "name"]]],
    ["defun", "not", ["x"], ["if", "x", False, True]],
]
