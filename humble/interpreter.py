from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path
from typing import Iterable, Iterator, Literal

from humble import LispValue
from humble.builtin.env_builtin import register
from humble.config import get_prelude_paths, prelude_files
from humble.errors import HumbleEvalError, UnexpectedEndOfInput
from humble.evaluation.evaluator import evaluate
from humble.reader.parser import tokenize, TokenStream
from humble.types.environment import Environment

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating humble code.
    Maintains one global Environment across calls, so definitions persist
    and survive a failed evaluation.
    """

    def __init__(
        self,
        prelude: str | None | Literal['auto'] = 'auto',
        env: Environment | None = None,
    ):
        if env is None:
            env = Environment()
            register(env)
        self.env: Environment = env

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            self.load_prelude(prelude_files(get_prelude_paths()))
        elif prelude:
            self.eval_prelude(prelude)

    def load_prelude(self, files: Iterable[Path]) -> None:
        for path in files:
            if not path.is_file():
                logger.debug("Prelude file %s not found, skipping", path)
                continue
            for outcome in self.load(path):
                if isinstance(outcome, HumbleEvalError):
                    logger.warning("Prelude %s: %s", path, outcome)

    def eval_prelude(self, code: str) -> None:
        for _ in self.iter_eval(code):
            pass

    def iter_eval(self, code: str) -> Iterator[LispValue]:
        """Evaluate the top-level forms of `code` one by one, yielding each value.

        Reading is lazy: a syntax error in a later form is raised only after
        the earlier forms have been evaluated. Any error stops the iteration.
        """
        stream = TokenStream(tokenize(code))
        for expr in stream.parse_all():
            yield evaluate(expr, self.env)

    def iter_outcomes(self, code: str) -> Iterator[LispValue | HumbleEvalError]:
        """Like `iter_eval`, but a form that fails to evaluate yields its error
        in place of a value and the next form still runs.

        A HumbleSyntaxError is raised: the token stream cannot resync after it.
        """
        stream = TokenStream(tokenize(code))
        for expr in stream.parse_all():
            try:
                outcome = evaluate(expr, self.env)
            except HumbleEvalError as ex:
                outcome = ex
            yield outcome

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code` and return the value of the last one."""
        results = list(self.iter_eval(code))
        if not results:
            raise UnexpectedEndOfInput("Unexpected end of input")
        return results[-1]

    def iter_load(self, path: str | PathLike) -> Iterator[LispValue | HumbleEvalError]:
        """Evaluate the forms of a source file in order, yielding each outcome."""
        path = Path(path)
        logger.debug("Loading %s", path)
        code = path.read_text(encoding="utf-8")
        count = 0
        for outcome in self.iter_outcomes(code):
            count += 1
            yield outcome
        logger.debug("Loaded %s: %d forms", path, count)

    def load(self, path: str | PathLike) -> list[LispValue | HumbleEvalError]:
        """Evaluate every form of a source file in order; return all outcomes.

        A form that fails contributes its HumbleEvalError to the list and the
        load goes on with the next form. A syntax error is raised.
        """
        return list(self.iter_load(path))
