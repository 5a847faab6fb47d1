"""Entry points for evaluating Schemer programs.

`interpret` is the pure entry point: every call gets its own root
environment, so nothing leaks from one program into the next. `Interpreter`
is a session that keeps one root environment alive, which is what the REPL
and prelude loading need.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from schemer import config
from schemer.builtin.env_builtin import root_environment
from schemer.evaluation.evaluator import evaluate_sequence
from schemer.reader import read
from schemer.types.conversion import from_nodes

logger = logging.getLogger(__name__)


def interpret(nodes: Iterable):
    """Evaluate parsed syntax nodes against a fresh root environment."""
    env = root_environment()
    values = from_nodes(nodes)
    return evaluate_sequence(values, env)


def run(source: str):
    """Read and evaluate a complete program given as source text."""
    return interpret(read(source))


class Interpreter:
    """
    A session interpreter for Schemer code.
    Definitions made by one `eval` call are visible to the next.
    """
    def __init__(self, prelude_paths: Optional[Iterable[Path | str]] = None):
        self.env = root_environment()

        if prelude_paths is None:
            prelude_paths = config.get_prelude_paths()
        for path in prelude_paths:
            self.load(path)

    def load(self, path: Path | str):
        """Evaluate a source file into the session environment."""
        path = Path(path)
        logger.info("Loading %s", path)
        return self.eval(path.read_text(encoding="utf-8"))

    def eval(self, code: str):
        """Evaluate `code` in the session and return the last value."""
        logger.debug("Evaluating %r", code)
        values = from_nodes(read(code))
        return evaluate_sequence(values, self.env)
