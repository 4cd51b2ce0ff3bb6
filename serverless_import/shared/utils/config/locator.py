"""Module locator for resolving import specifiers to files.

Search order for a specifier:
1. Absolute path: used as-is
2. Explicitly relative (``./x``, ``../x``): joined to the base directory
3. Bare path: joined to the base directory, then looked up inside an
   installed Python package named by its first segment
   (``shared_config/serverless.yml`` -> ``<site-packages>/shared_config/serverless.yml``)
"""
import importlib.util
import logging
from pathlib import Path
from typing import List, Union

from serverless_import.shared.exceptions.config import ImportNotFoundError


logger = logging.getLogger(__name__)

_RELATIVE_PREFIXES = ("./", "../", ".\\", "..\\")


class ModuleResolver:
    """Resolves a specifier relative to a base directory or an installed package."""

    def candidates(self, specifier: str, base_dir: Union[str, Path]) -> List[Path]:
        """List every location a specifier may resolve to, in search order.

        Args:
            specifier: Path-like module specifier
            base_dir: Directory the specifier is relative to

        Returns:
            Candidate file paths
        """
        path = Path(specifier)
        base = Path(base_dir)

        if path.is_absolute():
            return [path]

        if specifier in (".", "..") or specifier.startswith(_RELATIVE_PREFIXES):
            return [base / path]

        found = [base / path]
        found.extend(self._package_candidates(path))
        return found

    def _package_candidates(self, path: Path) -> List[Path]:
        top, rest = path.parts[0], path.parts[1:]
        if not top.isidentifier() or not rest:
            return []

        try:
            spec = importlib.util.find_spec(top)
        except (ImportError, ValueError) as e:
            logger.debug(
                f"Package lookup failed for {top}: {e}",
                extra={"package": top},
            )
            return []

        if spec is None or not spec.submodule_search_locations:
            return []

        return [Path(location).joinpath(*rest) for location in spec.submodule_search_locations]

    def resolve(self, specifier: str, base_dir: Union[str, Path]) -> Path:
        """Resolve a specifier to an existing file.

        Args:
            specifier: Path-like module specifier
            base_dir: Directory the specifier is relative to

        Returns:
            Absolute path of the first existing candidate

        Raises:
            ImportNotFoundError: If no candidate is an existing file
        """
        tried = self.candidates(specifier, base_dir)

        for candidate in tried:
            if candidate.is_file():
                resolved = candidate.resolve()
                logger.debug(
                    f"Resolved module {specifier} to {resolved}",
                    extra={"specifier": specifier, "path": str(resolved)},
                )
                return resolved

        raise ImportNotFoundError(
            specifier,
            reason="the given module cannot be resolved",
            tried=[str(candidate) for candidate in tried],
        )


def resolve_module(specifier: str, base_dir: Union[str, Path]) -> Path:
    """Convenience function to resolve a module specifier.

    Args:
        specifier: Path-like module specifier
        base_dir: Directory the specifier is relative to

    Returns:
        Absolute path to the module file
    """
    return ModuleResolver().resolve(specifier, base_dir)
