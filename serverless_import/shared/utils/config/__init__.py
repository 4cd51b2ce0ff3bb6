"""Configuration loading utilities."""

from serverless_import.shared.utils.config.locator import ModuleResolver, resolve_module  # noqa: F401
from serverless_import.shared.utils.config.yaml_loader import YAMLLoader  # noqa: F401
from serverless_import.shared.utils.config.merger import merge, merge_lists  # noqa: F401

__all__ = [
    # Module resolution
    "ModuleResolver",
    "resolve_module",
    # YAML/JSON loading
    "YAMLLoader",
    # Config merging
    "merge",
    "merge_lists",
]
