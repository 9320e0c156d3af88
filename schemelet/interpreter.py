from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterable, Literal

from schemelet import LispValue, SExpression
from schemelet.builtin.env_builtin import primitive_bindings
from schemelet.builtin.io_builtin import load_helper
from schemelet.config import get_prelude_path, get_recursion_limit
from schemelet.errors import DefaultError, SchemeletError
from schemelet.evaluation.evaluator import evaluate
from schemelet.reader.parser import read_expr_list
from schemelet.types.environment import Environment
from schemelet.types.values import NIL

logger = logging.getLogger(__name__)


def raise_host_limits() -> None:
    """Lift host limits that ordinary programs would otherwise hit.

    Every procedure call nests several Python frames, so the default
    recursion limit stops user recursion after roughly a hundred calls. Big
    integers must also read and print at any size.
    """
    limit = get_recursion_limit()
    if sys.getrecursionlimit() < limit:
        sys.setrecursionlimit(limit)
    sys.set_int_max_str_digits(0)


class Interpreter:
    """
    Orchestrates reading and evaluating Schemelet code.
    Keeps one root Environment alive across calls, so definitions made by
    one evaluation are visible to the next.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        raise_host_limits()
        self.env: Environment = primitive_bindings()

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            path = get_prelude_path()
            if path.is_file():
                self.load(path)
            else:
                # Be permissive: no prelude found -> proceed with primitives only
                logger.warning("prelude %s not found", path)
        elif prelude:
            self.eval_prelude(prelude)

    def _eval_all(self, exprs: Iterable[SExpression]) -> LispValue:
        result: LispValue = NIL
        try:
            for expr in exprs:
                result = evaluate(expr, self.env)
        except RecursionError:
            raise DefaultError("Maximum recursion depth exceeded") from None
        return result

    def eval_prelude(self, code: str) -> None:
        self._eval_all(read_expr_list(code))

    def eval(self, code: str) -> LispValue:
        """Evaluate every expression in `code` in order and return the last value.

        Raises SchemeletError on the first failure; host stack exhaustion from
        deep recursion is reported as DefaultError.
        """
        return self._eval_all(read_expr_list(code))

    def eval_string(self, code: str) -> str:
        """Evaluate `code` and render the result or the error as display text."""
        try:
            return str(self.eval(code))
        except SchemeletError as ex:
            logger.debug("evaluation failed: %s", ex)
            return str(ex)

    def load(self, path: str | Path) -> LispValue:
        """Evaluate every expression of a source file in the root environment."""
        logger.debug("loading %s", path)
        return self._eval_all(load_helper(str(path)))
