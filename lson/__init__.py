# Core type aliases for LSON's data model.
# Code and runtime values share plain Python types decoded from JSON:
# int/float, str, bool, None, list and dict. Only closures and builtin
# references get their own classes (see lson.types.closure).
#
# Naming guidance:
# - SExpression: use where a value is about to be treated as code (forms).
# - LsonValue:   use in evaluator/runtime code for evaluated values.
# Both resolve to `Any` and are interchangeable.

from typing import Any

LsonValue = Any
SExpression = LsonValue

__version__ = "0.1.0"
