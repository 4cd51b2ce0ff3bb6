"""Unit tests for configuration exceptions."""
from serverless_import.shared.exceptions import (
    ConfigError,
    ConfigParseError,
    ImportLoadError,
    ImportNotFoundError,
    PluginRegistrationError,
    ServerlessImportError,
)


def test_import_not_found_lists_every_attempt():
    """Should name the specifier and each tried location."""
    error = ImportNotFoundError(
        "shared",
        reason="in the given directory no serverless config can be found",
        tried=["shared/serverless.yml", "shared/serverless.yaml"],
    )

    message = str(error)
    assert message.startswith("Cannot import shared: in the given directory")
    assert "Tried:\n- shared/serverless.yml\n- shared/serverless.yaml" in message
    assert error.details == {
        "specifier": "shared",
        "tried": ["shared/serverless.yml", "shared/serverless.yaml"],
    }
    assert error.error_code == "IMPORT_NOT_FOUND"


def test_import_not_found_without_attempts():
    """Should omit the Tried section when nothing is listed."""
    error = ImportNotFoundError("a.yml")

    assert str(error) == "Cannot import a.yml: the given file doesn't exist"


def test_import_load_error_carries_cause():
    """Should include the cause message and keep the original exception."""
    cause = ValueError("bad template")
    error = ImportLoadError("templates/api.py", cause, config_file="/work/templates/api.py")

    assert str(error) == "Cannot import templates/api.py\nCause: bad template"
    assert error.original is cause
    assert error.specifier == "templates/api.py"
    assert error.import_path == "/work/templates/api.py"
    assert error.details["cause_type"] == "ValueError"


def test_nested_import_load_errors_keep_each_specifier():
    """Should keep the whole chain of specifiers in the message."""
    inner = ImportNotFoundError("./missing.yml")
    outer = ImportLoadError("a/serverless.yml", inner)

    message = str(outer)
    assert "Cannot import a/serverless.yml" in message
    assert "Cause: Cannot import ./missing.yml" in message


def test_cause_with_empty_message_uses_type_name():
    """Should fall back to the exception type when it has no message."""
    error = ImportLoadError("x.yml", KeyError())

    assert str(error).endswith("Cause: KeyError")


def test_hierarchy():
    """Should derive all errors from the package base class."""
    assert issubclass(ImportNotFoundError, ConfigError)
    assert issubclass(ImportLoadError, ConfigError)
    assert issubclass(ConfigParseError, ConfigError)
    assert issubclass(ConfigError, ServerlessImportError)
    assert issubclass(PluginRegistrationError, ServerlessImportError)


def test_to_dict():
    """Should serialize for logging and CLI output."""
    error = ConfigParseError("bad yaml", config_file="a.yml", line_number=3, column_number=7)

    assert error.to_dict() == {
        "error_code": "CONFIG_PARSE_ERROR",
        "message": "bad yaml",
        "details": {"line": 3, "column": 7},
        "exception_type": "ConfigParseError",
    }
    assert str(error) == "bad yaml | Config: a.yml"


def test_plugin_registration_error_names_plugins():
    """Should list the plugins that could not be registered."""
    error = PluginRegistrationError(["a", "b"])

    assert "a, b" in str(error)
    assert error.plugins == ["a", "b"]
