# Core type aliases for Schemelet's data model.
# Code (forms) and runtime values share one representation: the Value variants
# in schemelet.types.values. A parsed program is a tree of Values and the
# evaluator returns Values.
#
# Naming guidance:
# - SExpression: Use in reader/special-form code to denote syntactic forms.
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to the same base class and are interchangeable.

from typing import Callable

from schemelet.types.values import Value

__version__ = "0.1.0"

# Runtime value alias
LispValue = Value
# Forms alias (used interchangeably with LispValue)
SExpression = Value

# Evaluator function type, handed to special forms and apply
EvaluatorFn = Callable[..., LispValue]
