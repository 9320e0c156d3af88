from schemelet.types.values import (
    Value,
    Number,
    Float,
    Ratio,
    Complex,
    String,
    Character,
    Bool,
    Vector,
    List,
    DottedList,
    PrimitiveFunc,
    Port,
    TRUE,
    FALSE,
    NIL,
    make_list,
    make_dotted,
)
from schemelet.types.symbol import Atom
from schemelet.types.environment import Environment, Cell
from schemelet.types.lambda_fn import Func

__all__ = [
    "Value",
    "Atom",
    "Number",
    "Float",
    "Ratio",
    "Complex",
    "String",
    "Character",
    "Bool",
    "Vector",
    "List",
    "DottedList",
    "PrimitiveFunc",
    "Func",
    "Port",
    "Environment",
    "Cell",
    "TRUE",
    "FALSE",
    "NIL",
    "make_list",
    "make_dotted",
]
