"""Handler path rewriting for imported fragments.

Function handlers are relative to the file declaring them. Once a fragment
is merged into the root config they must be relative to the root instead.
"""
import logging
import os
import posixpath
from pathlib import Path
from typing import Any, Dict, Optional, Union


logger = logging.getLogger(__name__)


def to_posix_path(location: str) -> str:
    """Convert a host-separated path to forward-slash form."""
    return location.replace(os.sep, posixpath.sep)


def rewrite_handlers(
    fragment: Dict[str, Any],
    import_path: Union[str, Path],
    root_dir: Optional[Union[str, Path]] = None,
) -> None:
    """Prefix every string handler with the fragment's directory.

    ``functions.<name>.handler`` of a fragment at ``a/b/serverless.yml`` is
    rewritten from ``index.handler`` to ``a/b/index.handler`` when the root
    config lives in ``root_dir``. Entries that are not mappings, and
    handlers that are not strings, are left alone.

    Args:
        fragment: Loaded fragment, modified in place
        import_path: Path the fragment was loaded from
        root_dir: Directory handlers are made relative to (defaults to the
            real path of the working directory)
    """
    functions = fragment.get("functions")
    if not isinstance(functions, dict):
        return

    root = os.path.realpath(root_dir if root_dir is not None else os.getcwd())
    import_dir = os.path.relpath(os.path.dirname(os.path.realpath(import_path)), root)

    for name, func in functions.items():
        if not isinstance(func, dict) or not isinstance(func.get("handler"), str):
            continue
        handler = to_posix_path(
            os.path.normpath(os.path.join(import_dir, func["handler"]))
        )
        logger.debug(
            f"Rewrote handler of {name}",
            extra={"function": name, "original": func["handler"], "handler": handler},
        )
        func["handler"] = handler
