"""Plugin diffing and registration.

Imports may declare ``plugins``; the ones the host does not know yet are
handed to its plugin manager. Two manager conventions exist and exactly one
is used:
- ``load_service_plugins(names)``: synchronous, by name
- ``resolve_service_plugins(names)`` then ``add_plugin(plugin)``: resolution
  may be asynchronous, unresolved entries are skipped
"""
import inspect
import logging
from typing import Any, Iterable, List, Optional

from serverless_import.shared.exceptions.base import PluginRegistrationError


logger = logging.getLogger(__name__)


def diff_plugins(imported: Optional[Iterable[str]], existing: Optional[Iterable[str]]) -> List[str]:
    """Return imported plugin names missing from ``existing``.

    Args:
        imported: Plugin names after the import pass
        existing: Plugin names the host already declared

    Returns:
        New plugin names, in imported order
    """
    known = list(existing or [])
    return [name for name in (imported or []) if name not in known]


async def register_plugins(plugin_manager: Any, plugins: List[str]) -> List[Any]:
    """Hand new plugins to the host's plugin manager and wait for it.

    Args:
        plugin_manager: Host plugin manager (IPluginManager or IAsyncPluginManager)
        plugins: Plugin names to register

    Returns:
        The registered plugins: names for the synchronous convention,
        resolved plugin objects otherwise

    Raises:
        PluginRegistrationError: If the manager supports neither convention
    """
    load_service_plugins = getattr(plugin_manager, "load_service_plugins", None)
    if callable(load_service_plugins):
        logger.info(
            f"Loading {len(plugins)} imported plugin(s)",
            extra={"plugins": plugins, "convention": "load_service_plugins"},
        )
        load_service_plugins(plugins)
        return list(plugins)

    resolve_service_plugins = getattr(plugin_manager, "resolve_service_plugins", None)
    add_plugin = getattr(plugin_manager, "add_plugin", None)
    if not callable(resolve_service_plugins) or not callable(add_plugin):
        raise PluginRegistrationError(plugins)

    logger.info(
        f"Resolving {len(plugins)} imported plugin(s)",
        extra={"plugins": plugins, "convention": "resolve_service_plugins"},
    )
    resolved = resolve_service_plugins(plugins)
    if inspect.isawaitable(resolved):
        resolved = await resolved

    added = [plugin for plugin in (resolved or []) if plugin]
    for plugin in added:
        add_plugin(plugin)

    if len(added) < len(plugins):
        logger.warning(
            f"{len(plugins) - len(added)} imported plugin(s) could not be resolved",
            extra={"plugins": plugins, "resolved_count": len(added)},
        )
    return added
