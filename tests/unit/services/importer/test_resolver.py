"""Unit tests for the import path resolver."""
from pathlib import Path

import pytest

from serverless_import.shared.exceptions.config import ImportNotFoundError
from serverless_import.services.importer.services.resolver import PathResolver


class RecordingModuleResolver:
    """Module resolver that records lookups and resolves from a fixed table."""

    def __init__(self, table=None):
        self.table = table or {}
        self.calls = []

    def resolve(self, specifier, base_dir):
        self.calls.append((specifier, str(base_dir)))
        key = (specifier, str(base_dir))
        if key in self.table:
            return Path(self.table[key])
        raise ImportNotFoundError(specifier, tried=[f"{base_dir}/{specifier}"])


def test_literal_file_wins_without_module_resolution(write_config, workdir, settings):
    """Should return an existing literal path without asking the module resolver."""
    write_config("shared.yml", {"a": 1})
    modules = RecordingModuleResolver()

    resolved = PathResolver(settings, modules).resolve("shared.yml", workdir)

    assert resolved == workdir / "shared.yml"
    assert modules.calls == []


def test_file_falls_back_to_module_resolution(workdir, settings):
    """Should resolve relative to the base directory when the literal path is absent."""
    modules = RecordingModuleResolver({("./b.yml", "/base/a"): "/base/a/b.yml"})

    resolved = PathResolver(settings, modules).resolve("./b.yml", "/base/a")

    assert resolved == Path("/base/a/b.yml")
    assert modules.calls == [("./b.yml", "/base/a")]


def test_missing_file_reports_all_attempts(workdir, settings):
    """Should raise with the literal path and the module candidates."""
    with pytest.raises(ImportNotFoundError) as exc_info:
        PathResolver(settings).resolve("missing.yaml", workdir / "nested")

    error = exc_info.value
    assert "Cannot import missing.yaml: the given file doesn't exist" in str(error)
    assert error.tried == [str(workdir / "nested" / "missing.yaml")]


def test_directory_returns_conventional_file(write_config, workdir, settings):
    """Should find serverless.<ext> inside a directory."""
    write_config("shared/serverless.yaml", {"a": 1})

    resolved = PathResolver(settings).resolve("shared", workdir)

    assert resolved == workdir / "shared" / "serverless.yaml"


def test_directory_prefers_extension_order(write_config, workdir, settings):
    """Should pick the first extension in the configured order."""
    write_config("shared/serverless.json", {"a": 1})
    write_config("shared/serverless.yml", {"a": 2})

    resolved = PathResolver(settings).resolve("shared", workdir)

    assert resolved == workdir / "shared" / "serverless.yml"


def test_directory_without_config_lists_every_file(workdir, settings):
    """Should list every extension-qualified path that was tried."""
    (workdir / "empty").mkdir()

    with pytest.raises(ImportNotFoundError) as exc_info:
        PathResolver(settings).resolve("empty", workdir)

    error = exc_info.value
    assert "in the given directory no serverless config can be found" in str(error)
    assert error.tried == [
        str(workdir / "empty" / name)
        for name in ("serverless.yml", "serverless.yaml", "serverless.json", "serverless.py")
    ]


def test_package_specifier_tries_each_extension(workdir, settings):
    """Should resolve <module>/serverless<ext> in extension order."""
    modules = RecordingModuleResolver(
        {("stack-config/serverless.json", "/base"): "/lib/stack-config/serverless.json"}
    )

    resolved = PathResolver(settings, modules).resolve("stack-config", "/base")

    assert resolved == Path("/lib/stack-config/serverless.json")
    assert [call[0] for call in modules.calls] == [
        "stack-config/serverless.yml",
        "stack-config/serverless.yaml",
        "stack-config/serverless.json",
    ]


def test_unresolvable_package_lists_module_paths(workdir, settings):
    """Should list every module path attempted."""
    with pytest.raises(ImportNotFoundError) as exc_info:
        PathResolver(settings, RecordingModuleResolver()).resolve("nope", "/base")

    error = exc_info.value
    assert "the given module cannot be resolved" in str(error)
    assert error.tried == [
        "nope/serverless.yml",
        "nope/serverless.yaml",
        "nope/serverless.json",
        "nope/serverless.py",
    ]


def test_custom_conventional_name(write_config, workdir):
    """Should honor a different conventional file name."""
    from serverless_import.services.importer.config import ImporterSettings

    settings = ImporterSettings(_env_file=None, conventional_name="stack")
    write_config("infra/stack.yml", {"a": 1})

    resolved = PathResolver(settings).resolve("infra", workdir)

    assert resolved == workdir / "infra" / "stack.yml"


def test_literal_file_is_looked_up_below_base_dir(write_config, workdir, settings):
    """Should prefer the file next to the declaring config over one in the working directory."""
    write_config("b.yml", {"stage": "from-root"})
    write_config("a/b.yml", {"stage": "from-a"})

    resolved = PathResolver(settings).resolve("./b.yml", workdir / "a")

    assert resolved == workdir / "a" / "b.yml"


def test_directory_is_looked_up_below_base_dir(write_config, workdir, settings):
    """Should prefer the directory next to the declaring config."""
    write_config("shared/serverless.yml", {"stage": "from-root"})
    write_config("a/shared/serverless.yml", {"stage": "from-a"})

    resolved = PathResolver(settings).resolve("shared", workdir / "a")

    assert resolved == workdir / "a" / "shared" / "serverless.yml"


def test_absolute_specifier_ignores_base_dir(write_config, workdir, settings):
    """Should use absolute specifiers unchanged."""
    target = write_config("elsewhere/serverless.yml", {"a": 1})

    assert PathResolver(settings).resolve(str(target), "/unrelated") == target
