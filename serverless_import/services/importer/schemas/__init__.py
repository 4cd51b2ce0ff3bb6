"""Import schemas."""

from serverless_import.services.importer.schemas.import_spec import (  # noqa: F401
    Fragment,
    ImportSpec,
    StaticFragment,
    TemplateFragment,
    declared_imports,
)

__all__ = [
    "Fragment",
    "ImportSpec",
    "StaticFragment",
    "TemplateFragment",
    "declared_imports",
]
