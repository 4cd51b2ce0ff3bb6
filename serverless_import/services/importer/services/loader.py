"""Config loader turning a resolved import path into a fragment.

Data files are handed to the file reader. Template sources (``.py``) are
executed as modules and their designated callable is invoked with the
import inputs, so one template can be imported several times with
different parameters.
"""
import importlib.util
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from serverless_import.shared.exceptions.config import ImportLoadError
from serverless_import.shared.interfaces import IFileReader
from serverless_import.shared.utils.config.yaml_loader import YAMLLoader
from serverless_import.services.importer.config import ImporterSettings, get_settings
from serverless_import.services.importer.schemas.import_spec import (
    Fragment,
    StaticFragment,
    TemplateFragment,
)


logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads import sources into config dictionaries.

    Attributes:
        settings: Importer settings (template extension and export name)
        file_reader: Collaborator parsing data-format files
    """

    def __init__(
        self,
        settings: Optional[ImporterSettings] = None,
        file_reader: Optional[IFileReader] = None,
    ):
        self.settings = settings or get_settings()
        self.file_reader = file_reader or YAMLLoader()

    def read(self, path: Union[str, Path]) -> Fragment:
        """Read an import source without rendering it.

        Args:
            path: Resolved import path

        Returns:
            TemplateFragment for template sources, StaticFragment otherwise
        """
        path = Path(path)
        if path.suffix == self.settings.template_extension:
            return TemplateFragment(factory=self._load_template(path))
        return StaticFragment(data=self.file_reader.load(path))

    def _load_template(self, path: Path):
        module_name = f"_serverless_import_template_{abs(hash(str(path.resolve())))}"
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise ImportError(f"Cannot load template module from {path}")

        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)

        factory = getattr(module, self.settings.template_export, None)
        if not callable(factory):
            raise TypeError(
                f"Template {path} does not define a callable "
                f"'{self.settings.template_export}'"
            )
        return factory

    def load(
        self,
        path: Union[str, Path],
        inputs: Optional[Dict[str, Any]] = None,
        specifier: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Load an import source into a config dictionary.

        Args:
            path: Resolved import path
            inputs: Arguments for template sources
            specifier: Specifier as declared, used in error messages

        Returns:
            Fragment config

        Raises:
            ImportLoadError: If reading, parsing or rendering fails
        """
        specifier = specifier or str(path)
        inputs = inputs or {}

        try:
            fragment = self.read(path)
            config = fragment.render(inputs)
            if not isinstance(config, dict):
                raise TypeError(
                    f"Import must produce a mapping, got {type(config).__name__}"
                )
        except Exception as e:
            logger.error(
                f"Failed to load import {specifier}: {e}",
                extra={"specifier": specifier, "path": str(path)},
            )
            raise ImportLoadError(specifier, e, config_file=str(path)) from e

        logger.debug(
            f"Loaded import {specifier}",
            extra={
                "specifier": specifier,
                "path": str(path),
                "template": isinstance(fragment, TemplateFragment),
                "keys": list(config.keys()),
            },
        )
        return config
