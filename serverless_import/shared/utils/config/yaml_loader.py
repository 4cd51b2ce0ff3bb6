"""YAML/JSON config file loader."""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from serverless_import.shared.exceptions.config import ConfigParseError


logger = logging.getLogger(__name__)

JSON_SUFFIXES = frozenset({".json"})


class YAMLLoader:
    """Loads YAML and JSON config files into Python dictionaries."""

    def load(self, path: Union[str, Path]) -> Dict[str, Any]:
        """Load a config file into a dictionary.

        The format is picked from the suffix: ``.json`` is read with the
        JSON parser, everything else as YAML (a JSON document is valid YAML).

        Args:
            path: Path to the config file

        Returns:
            Parsed document as dictionary (empty documents give ``{}``)

        Raises:
            ConfigParseError: If the syntax is invalid, the file cannot be
                read, or the document root is not a mapping
        """
        path = Path(path)
        logger.debug(f"Loading config file: {path}", extra={"path": str(path)})

        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix.lower() in JSON_SUFFIXES:
                    text = f.read()
                    data = json.loads(text) if text.strip() else None
                else:
                    data = yaml.safe_load(f)

        except yaml.YAMLError as e:
            mark = getattr(e, "problem_mark", None)
            logger.error(
                f"YAML parse error in {path}: {e}",
                extra={"path": str(path), "error": str(e)},
            )
            raise ConfigParseError(
                message=f"Failed to parse YAML file: {e}",
                config_file=str(path),
                line_number=mark.line + 1 if mark is not None else None,
                column_number=mark.column + 1 if mark is not None else None,
                original_error=e,
            ) from e

        except json.JSONDecodeError as e:
            logger.error(
                f"JSON parse error in {path}: {e}",
                extra={"path": str(path), "error": str(e)},
            )
            raise ConfigParseError(
                message=f"Failed to parse JSON file: {e.msg}",
                config_file=str(path),
                line_number=e.lineno,
                column_number=e.colno,
                original_error=e,
            ) from e

        except OSError as e:
            logger.error(
                f"Failed to read file {path}: {e}",
                extra={"path": str(path), "error": str(e)},
            )
            raise ConfigParseError(
                message=f"Failed to read config file: {e}",
                config_file=str(path),
                original_error=e,
            ) from e

        if data is None:
            logger.debug(f"Config file is empty: {path}", extra={"path": str(path)})
            return {}

        if not isinstance(data, dict):
            logger.error(
                f"Config file must contain a dictionary: {path}",
                extra={"path": str(path), "type": type(data).__name__},
            )
            raise ConfigParseError(
                message=f"Config must contain dictionary, got {type(data).__name__}",
                config_file=str(path),
            )

        logger.debug(
            f"Config file loaded: {path}",
            extra={"path": str(path), "keys": list(data.keys())},
        )
        return data
