"""
Shared driver behaviour

Method name resolution across naming conventions and the permission
handling applied to every PDF file a driver writes.
"""

import logging
import os

from .. import conf
from ..exceptions import UnknownOperationError
from ..inflector import alternative_names


logger = logging.getLogger(__name__)


def is_path(name) -> bool:
    """Check if an output target names a file on disk (as opposed to a file-like object)."""
    return isinstance(name, (str, os.PathLike)) and bool(os.fspath(name))


def apply_file_permissions(path) -> None:
    """
    Apply the configured file mode to a written PDF file.

    Failing to change the mode is logged as a warning and never aborts
    the write.

    Args:
        path: Path of the written file
    """
    if not os.path.isfile(path):
        return

    mode = conf.get_file_permissions()
    try:
        os.chmod(path, mode)
    except OSError as e:
        logger.warning(f"Could not set permissions {oct(mode)} on {path}: {e}")


class MethodAliasMixin:
    """
    Resolve method names written in another naming convention.

    Callers can use FPDF style (MultiCell), camelCase (drawString) or
    snake_case (multi_cell) regardless of the convention of the wrapped
    engine. The first existing alternative is cached per instance.
    """

    def __getattr__(self, name):
        # only called when normal lookup failed
        if name.startswith('_'):
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )

        aliases = self.__dict__.setdefault('_method_aliases', {})
        if name in aliases:
            return getattr(self, aliases[name])

        alternatives = alternative_names(name)
        for alternative in alternatives:
            if callable(getattr(type(self), alternative, None)):
                logger.debug(f"Resolved {type(self).__name__}.{name} to {alternative}")
                aliases[name] = alternative
                return getattr(self, alternative)

        logger.debug(f"Could not resolve {type(self).__name__}.{name}, tried {alternatives}")
        raise UnknownOperationError(name, alternatives)
