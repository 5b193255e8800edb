from __future__ import annotations

import logging
from pathlib import Path

from lispi import SExpression, LispValue, EvaluatorFn
from lispi.config import get_import_roots
from lispi.printer import to_source
from lispi.reader.parser import read_all
from lispi.types.environment import Environment
from lispi.types.errors import (
    LispiArityError,
    LispiImportError,
    LispiSyntaxError,
    LispiTypeError,
)
from lispi.types.lisp_list import LispList
from lispi.types.nil import Nil

logger = logging.getLogger(__name__)


def resolve_import_path(name: str) -> Path:
    """Locate an imported file.

    A path that exists as given (absolute, or relative to the working
    directory) wins; otherwise each LISPI_PATH root is tried in order. When
    nothing matches, the path is returned unchanged so the read reports it.
    """
    path = Path(name)
    if path.is_absolute() or path.exists():
        return path
    for root in get_import_roots():
        candidate = root / path
        if candidate.is_file():
            return candidate
    return path


def read_source(path: Path) -> list[SExpression]:
    """Read and parse every top-level form of `path`.

    Raises LispiImportError if the file cannot be read or does not parse.
    """
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise LispiImportError(f"Can't read file {path}, error: {exc}") from exc
    try:
        return read_all(source)
    except LispiSyntaxError as exc:
        raise LispiImportError(f"Can't parse file {path}, error: {exc}") from exc


def import_form(tail: LispList, env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """
    Usage:
        (import "path/to/file.lisp")

    Every form of the file is evaluated in the current environment, so its
    `def`s land in the global scope.
    """
    if len(tail) != 1:
        raise LispiArityError(
            f"Import form expects 1 path argument, got {len(tail)}",
            expected=1,
            actual=len(tail),
        )

    name = evaluate_fn(tail[0], env)
    if not isinstance(name, str):
        raise LispiTypeError(f"Expected string as argument to 'import', got: {to_source(name)}")

    path = resolve_import_path(name)
    forms = read_source(path)
    logger.debug("importing %s (%d forms)", path, len(forms))
    for form in forms:
        evaluate_fn(form, env)
    logger.debug("imported %s", path)
    return Nil
