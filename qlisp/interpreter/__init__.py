from __future__ import annotations

import logging
from typing import Literal, NamedTuple

from qlisp import LispValue
from qlisp.config import prelude_enabled
from qlisp.errors import QlispPreludeError
from qlisp.reader.parser import parse
from qlisp.reader.reader import read
from qlisp.evaluation.evaluator import evaluate, run
from qlisp.printer import to_string
from qlisp.types import Environment, Error, SessionControl
from qlisp.builtin.env_builtin import register

logger = logging.getLogger(__name__)


class EvalResult(NamedTuple):
    value: LispValue
    control: SessionControl

    @property
    def terminated(self) -> bool:
        return self.control is SessionControl.TERMINATE


class Interpreter:
    """
    Orchestrates reading and evaluating qlisp source.
    Maintains the root Environment, with the builtins registered, across calls.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Environment = Environment()
        register(self.env)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            if prelude_enabled():
                # Lazy import to avoid circular imports
                from qlisp.modules.prelude_loader import load_prelude
                try:
                    load_prelude(self)
                except FileNotFoundError:
                    # Be permissive: no prelude found -> proceed
                    logger.debug("no prelude found, starting with builtins only")
        elif prelude:
            self.eval_prelude(prelude)

    def read(self, code: str) -> LispValue:
        """The whole input as one S-Expression, as a prompt line is read."""
        return read(parse(code))

    def eval_prelude(self, code: str) -> None:
        """Evaluate each top-level form of `code` on its own, as a file is loaded."""
        forms = self.read(code)
        for form in list(forms):
            result = evaluate(self.env, form)
            if isinstance(result, Error):
                raise QlispPreludeError(f"Prelude failed: {to_string(result)}")
        logger.debug("prelude evaluated, %d forms", len(forms))

    def eval(self, code: str) -> EvalResult:
        """Read and evaluate one input. Syntax errors propagate as QlispSyntaxError.

        Nesting or recursion deeper than the Python stack allows becomes an
        Error value, whether it happens while reading or while evaluating.
        """
        try:
            value, control = run(self.env, self.read(code))
        except RecursionError:
            return EvalResult(Error("Maximum recursion depth exceeded"), SessionControl.CONTINUE)
        if control is SessionControl.TERMINATE:
            logger.debug("session terminated by user")
        return EvalResult(value, control)

    def print(self, value: LispValue) -> str:
        return to_string(value)
