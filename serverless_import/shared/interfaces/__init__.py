"""Abstract interfaces for the host tool and shared infrastructure.

Allows dependency injection for testability and flexibility.
All concrete implementations must honor these contracts.
"""
from abc import abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Union


# ==================== Config Source Interfaces ====================

class IFileReader(Protocol):
    """Protocol for reading a data-format config file."""

    @abstractmethod
    def load(self, path: Union[str, Path]) -> Dict[str, Any]:
        """Read and parse a config file.

        Args:
            path: Path to a recognized data-format file

        Returns:
            Parsed document
        """
        ...


class IModuleResolver(Protocol):
    """Protocol for module resolution relative to a base directory."""

    @abstractmethod
    def resolve(self, specifier: str, base_dir: Union[str, Path]) -> Path:
        """Resolve a specifier to an existing file.

        Args:
            specifier: Path-like module specifier
            base_dir: Directory the specifier is relative to

        Returns:
            Absolute path

        Raises:
            ImportNotFoundError: If the specifier cannot be resolved
        """
        ...


# ==================== Plugin Manager Interfaces ====================

class IPluginManager(Protocol):
    """Plugin manager registering plugins synchronously by name."""

    @abstractmethod
    def load_service_plugins(self, plugins: List[str]) -> None:
        """Load and register the given plugins."""
        ...


class IAsyncPluginManager(Protocol):
    """Plugin manager that resolves plugins first, then adds them one by one."""

    @abstractmethod
    async def resolve_service_plugins(self, plugins: List[str]) -> List[Any]:
        """Resolve plugin names to plugin objects.

        Unresolvable names may come back as None.
        """
        ...

    @abstractmethod
    def add_plugin(self, plugin: Any) -> None:
        """Register one resolved plugin."""
        ...


# ==================== Host Interfaces ====================

class IHostService(Protocol):
    """The host's parsed service description."""

    plugins: Optional[List[str]]

    @abstractmethod
    def reload_service_file_param(self) -> None:
        """Re-read the service description after the configuration changed."""
        ...


class IHostUtils(Protocol):
    """File helpers offered by the host."""

    @abstractmethod
    def read_file_sync(self, path: Union[str, Path]) -> Any:
        """Read and parse a config file."""
        ...


class IServerlessHost(Protocol):
    """The host tool the import pass runs inside.

    Hosts may additionally expose ``error_class``: an exception type used to
    surface configuration errors to the operator.
    """

    configuration_input: Dict[str, Any]
    service: IHostService
    utils: IHostUtils
    plugin_manager: Any

    @abstractmethod
    def extend_configuration(self, keys: List[str], value: Any) -> None:
        """Set the configuration value at ``keys``."""
        ...
