"""Import orchestrator walking the import tree of a config.

For every declaration under ``custom.import``, in order:
1. Resolve the specifier (relative to the declaring config's directory)
2. Load the fragment and rewrite its handler paths
3. Process the fragment's own imports, depth first
4. Expand its ``global.functions`` block over the root's current functions
5. Merge overrides and fragment into the root config (root values win)

The root config is the only object ever written to; fragments are
discarded once merged.
"""
import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from serverless_import.shared.exceptions.base import ServerlessImportError
from serverless_import.shared.exceptions.config import ImportLoadError
from serverless_import.shared.utils.config.merger import merge
from serverless_import.shared.utils.logging.context import log_context
from serverless_import.services.importer.config import ImporterSettings, get_settings
from serverless_import.services.importer.schemas.import_spec import ImportSpec, declared_imports
from serverless_import.services.importer.services.loader import ConfigLoader
from serverless_import.services.importer.services.resolver import PathResolver
from serverless_import.services.importer.services.rewriter import rewrite_handlers


logger = logging.getLogger(__name__)


class ImportOrchestrator:
    """Resolves, loads and merges every import reachable from a root config.

    Example:
        root = YAMLLoader().load("serverless.yml")
        orchestrator = ImportOrchestrator(root)
        orchestrator.process(root, base_dir=".")
        # root now holds the merged configuration

    Attributes:
        config: Root config, mutated in place
        settings: Importer settings
        resolver: Path resolver
        loader: Config loader
        root_dir: Directory handler paths are made relative to
        imported: Resolved paths of every processed import, in merge order
    """

    def __init__(
        self,
        config: Dict[str, Any],
        settings: Optional[ImporterSettings] = None,
        resolver: Optional[PathResolver] = None,
        loader: Optional[ConfigLoader] = None,
        root_dir: Optional[Union[str, Path]] = None,
    ):
        self.config = config
        self.settings = settings or get_settings()
        self.resolver = resolver or PathResolver(settings=self.settings)
        self.loader = loader or ConfigLoader(settings=self.settings)
        self.root_dir = os.path.realpath(root_dir if root_dir is not None else os.getcwd())
        self.imported: List[str] = []

    def run(self) -> Dict[str, Any]:
        """Process the root config's imports relative to ``root_dir``.

        Returns:
            The merged root config
        """
        self.process(self.config, self.root_dir)
        logger.info(
            f"Imported {len(self.imported)} config(s)",
            extra={"imports": list(self.imported)},
        )
        return self.config

    def process(
        self,
        config: Dict[str, Any],
        base_dir: Union[str, Path],
        depth: int = 0,
    ) -> None:
        """Import everything ``config`` declares into the root config.

        Args:
            config: Config whose declarations are processed (the root or a
                fragment)
            base_dir: Directory the declarations are relative to
            depth: Nesting level of ``config`` in the import tree

        Raises:
            ImportNotFoundError: If a specifier cannot be resolved
            ImportLoadError: If a fragment or one of its imports fails to load
        """
        for declaration in declared_imports(config, self.settings.import_key):
            self._import(declaration, base_dir, depth)

    def _import(self, declaration: Any, base_dir: Union[str, Path], depth: int) -> None:
        try:
            spec = ImportSpec.from_declaration(declaration)
        except ValidationError as e:
            raise ImportLoadError(repr(declaration), e) from e

        with log_context(import_specifier=spec.module, import_depth=depth):
            logger.info(f"Importing {spec.module}", extra={"base_dir": str(base_dir)})

            import_path = self.resolver.resolve(spec.module, base_dir)
            fragment = self.loader.load(import_path, spec.inputs, specifier=spec.module)
            rewrite_handlers(fragment, import_path, self.root_dir)

            try:
                self.process(fragment, os.path.dirname(import_path), depth + 1)
            except ServerlessImportError as e:
                raise ImportLoadError(spec.module, e, config_file=str(import_path)) from e

            overrides = self._global_overrides(fragment)
            merge(self.config, overrides, fragment)
            self.imported.append(str(import_path))

            logger.debug(
                f"Merged {spec.module}",
                extra={
                    "path": str(import_path),
                    "fragment_keys": list(fragment.keys()),
                    "global_functions": sorted(overrides["functions"]) if overrides else [],
                },
            )

    def _global_overrides(self, fragment: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Pop ``global`` off the fragment and expand ``global.functions``.

        Only functions present in the root config right now receive the
        defaults; every function gets its own copy.
        """
        global_block = fragment.pop("global", None)
        defaults = global_block.get("functions") if isinstance(global_block, dict) else None
        if not defaults:
            return None

        functions = self.config.get("functions")
        names = list(functions) if isinstance(functions, dict) else []
        return {"functions": {name: copy.deepcopy(defaults) for name in names}}


def import_configs(
    config: Dict[str, Any],
    base_dir: Optional[Union[str, Path]] = None,
    settings: Optional[ImporterSettings] = None,
    root_dir: Optional[Union[str, Path]] = None,
) -> Dict[str, Any]:
    """Convenience function to merge all imports of ``config`` into it.

    Args:
        config: Root config, mutated in place
        base_dir: Directory the root's declarations are relative to
            (defaults to ``root_dir``)
        settings: Importer settings
        root_dir: Directory handler paths are made relative to (defaults to
            the working directory)

    Returns:
        The merged config
    """
    orchestrator = ImportOrchestrator(config, settings=settings, root_dir=root_dir)
    orchestrator.process(config, base_dir if base_dir is not None else orchestrator.root_dir)
    return config
