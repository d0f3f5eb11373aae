"""The flat import mechanism.

(import "name") first looks for a host library installer registered under
`name`. Failing that it looks for `name.rum` in the search path (RUM_PATH)
and evaluates it in the root Context. Names are flat: no dots, no path
separators.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, Mapping, Optional

from rum import EvaluatorFn
from rum.config import get_search_path
from rum.errors import TypeMismatchError, UnknownVariableError
from rum.reader.parser import parse_all
from rum.reader.source import Source
from rum.types.context import Context
from rum.types.nil import Nil
from rum.types.values import Value

logger = logging.getLogger(__name__)

# install(root_context, prefix)
Installer = Callable[[Context, str], None]

SUFFIX = ".rum"


def _check_name(name: str) -> None:
    if not name or any(c in name for c in "./\\"):
        raise TypeMismatchError(f"invalid library name {name!r}: names are flat, without '.' or '/'")


class Importer:
    """Resolves import names for one interpreter."""

    def __init__(
        self,
        libraries: Optional[Mapping[str, Installer]] = None,
        search_path: Optional[Iterable[Path]] = None,
    ):
        self.libraries: dict[str, Installer] = dict(libraries or {})
        self._search_path = list(search_path) if search_path is not None else None

    @property
    def search_path(self) -> list[Path]:
        # Read lazily so that RUM_PATH changes are picked up.
        if self._search_path is not None:
            return self._search_path
        return get_search_path()

    def resolve(self, name: str) -> Optional[Path]:
        for root in self.search_path:
            candidate = root / f"{name}{SUFFIX}"
            if candidate.is_file():
                return candidate
        return None

    def load(
        self, env: Context, name: str, prefix: Optional[str] = None, *, evaluate_fn: EvaluatorFn
    ) -> Value:
        _check_name(name)
        root = env.root()

        installer = self.libraries.get(name)
        if installer is not None:
            logger.info("importing library %s as %s", name, prefix or name)
            installer(root, prefix or name)
            return Nil

        path = self.resolve(name)
        if path is None:
            raise UnknownVariableError(f"cannot find library {name!r} (search path: {self.search_path})")
        logger.info("importing %s from %s", name, path)
        source = Source(path.read_text(encoding="utf-8"), name=str(path))
        result: Value = Nil
        for form in parse_all(source):
            result = evaluate_fn(form, root)
        return result
