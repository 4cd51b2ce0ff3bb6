"""Import path resolver.

Turns an import specifier into a loadable file path. Nothing is read or
parsed here, only existence and resolvability are checked.

Lookup order:
1. Specifier with a recognized config extension: the path joined to the base
   directory, then the same specifier resolved as a module (which adds the
   lookup inside installed packages)
2. Existing directory below the base directory: ``<dir>/serverless<ext>``
   for each recognized extension
3. Anything else is a module or package: ``<specifier>/serverless<ext>``
   resolved relative to the base directory, for each recognized extension
"""
import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from serverless_import.shared.exceptions.config import ImportNotFoundError
from serverless_import.shared.interfaces import IModuleResolver
from serverless_import.shared.utils.config.locator import ModuleResolver
from serverless_import.services.importer.config import ImporterSettings, get_settings


logger = logging.getLogger(__name__)


class PathResolver:
    """Resolves import specifiers to config file paths.

    Attributes:
        settings: Importer settings (recognized extensions, conventional name)
        module_resolver: Module resolution collaborator
    """

    def __init__(
        self,
        settings: Optional[ImporterSettings] = None,
        module_resolver: Optional[IModuleResolver] = None,
    ):
        self.settings = settings or get_settings()
        self.module_resolver = module_resolver or ModuleResolver()

    def resolve(self, specifier: str, base_dir: Union[str, Path]) -> Path:
        """Resolve an import specifier.

        Args:
            specifier: Import specifier (file, directory or module)
            base_dir: Directory of the config declaring the import

        Returns:
            Path of the config source to load

        Raises:
            ImportNotFoundError: If nothing matches; lists every attempt
        """
        extension = os.path.splitext(specifier)[1]

        if extension in self.settings.config_extensions:
            return self._resolve_file(specifier, base_dir)

        directory = os.path.join(base_dir, specifier)
        if os.path.isdir(directory):
            return self._resolve_directory(specifier, directory)

        return self._resolve_package(specifier, base_dir)

    def _resolve_file(self, specifier: str, base_dir: Union[str, Path]) -> Path:
        literal = Path(os.path.join(base_dir, specifier))
        if literal.exists():
            logger.debug(
                f"Resolved {specifier} as a literal path",
                extra={"specifier": specifier, "path": str(literal)},
            )
            return literal

        try:
            return self.module_resolver.resolve(specifier, base_dir)
        except ImportNotFoundError as e:
            tried = [str(literal)] + [t for t in e.tried if t != str(literal)]

        logger.error(
            f"Import not found: {specifier}",
            extra={"specifier": specifier, "base_dir": str(base_dir), "tried": tried},
        )
        raise ImportNotFoundError(
            specifier,
            reason="the given file doesn't exist",
            tried=tried,
        )

    def _resolve_directory(self, specifier: str, directory: str) -> Path:
        tried: List[str] = []
        for file_name in self.settings.conventional_files:
            possible_file = os.path.join(directory, file_name)
            if os.path.exists(possible_file):
                logger.debug(
                    f"Resolved directory {specifier} to {possible_file}",
                    extra={"specifier": specifier, "path": possible_file},
                )
                return Path(possible_file)
            tried.append(possible_file)

        logger.error(
            f"No {self.settings.conventional_name} config in directory: {specifier}",
            extra={"specifier": specifier, "tried": tried},
        )
        raise ImportNotFoundError(
            specifier,
            reason=(
                "in the given directory no "
                f"{self.settings.conventional_name} config can be found"
            ),
            tried=tried,
        )

    def _resolve_package(self, specifier: str, base_dir: Union[str, Path]) -> Path:
        tried: List[str] = []
        for file_name in self.settings.conventional_files:
            possible_file = os.path.join(specifier, file_name)
            try:
                resolved = self.module_resolver.resolve(possible_file, base_dir)
            except ImportNotFoundError:
                tried.append(possible_file)
                continue

            logger.debug(
                f"Resolved module {specifier} to {resolved}",
                extra={"specifier": specifier, "path": str(resolved)},
            )
            return resolved

        logger.error(
            f"Module not resolvable: {specifier}",
            extra={"specifier": specifier, "base_dir": str(base_dir), "tried": tried},
        )
        raise ImportNotFoundError(
            specifier,
            reason="the given module cannot be resolved",
            tried=tried,
        )
