"""Unit tests for import declarations and fragments."""
import pytest
from pydantic import ValidationError

from serverless_import.services.importer.schemas import (
    ImportSpec,
    StaticFragment,
    TemplateFragment,
    declared_imports,
)


@pytest.mark.parametrize(
    "config, expected",
    [
        ({}, []),
        ({"custom": None}, []),
        ({"custom": {}}, []),
        ({"custom": {"import": ""}}, []),
        ({"custom": {"import": 42}}, []),
        ({"custom": {"import": "shared"}}, ["shared"]),
        ({"custom": {"import": ["a", "b"]}}, ["a", "b"]),
        (
            {"custom": {"import": {"module": "t.py", "inputs": {"x": 1}}}},
            [{"module": "t.py", "inputs": {"x": 1}}],
        ),
    ],
)
def test_declared_imports_shapes(config, expected):
    """Should normalize every supported declaration shape."""
    assert declared_imports(config) == expected


def test_declared_imports_custom_key():
    """Should read the configured key under custom."""
    assert declared_imports({"custom": {"include": "a"}}, import_key="include") == ["a"]


def test_import_spec_from_string():
    """Should default inputs to an empty mapping."""
    spec = ImportSpec.from_declaration("shared/serverless.yml")

    assert spec.module == "shared/serverless.yml"
    assert spec.inputs == {}


def test_import_spec_from_mapping():
    """Should keep template inputs."""
    spec = ImportSpec.from_declaration({"module": "api.py", "inputs": {"stage": "dev"}})

    assert spec.module == "api.py"
    assert spec.inputs == {"stage": "dev"}


def test_import_spec_empty_inputs_entry():
    """Should treat `inputs:` with no value as no inputs."""
    assert ImportSpec.from_declaration({"module": "api.py", "inputs": None}).inputs == {}


@pytest.mark.parametrize("declaration", [{"inputs": {}}, {"module": ""}, 7])
def test_import_spec_rejects_invalid_declarations(declaration):
    """Should require a non-empty module."""
    with pytest.raises(ValidationError):
        ImportSpec.from_declaration(declaration)


def test_fragments_render_uniformly():
    """Should render static data as-is and call templates with inputs."""
    static = StaticFragment(data={"a": 1})
    template = TemplateFragment(factory=lambda inputs: {"stage": inputs["stage"]})

    assert static.render({"stage": "dev"}) == {"a": 1}
    assert template.render({"stage": "dev"}) == {"stage": "dev"}
