"""Config merger for folding imported fragments into a target config.

Merge rules (target precedence):
- Dicts: merged recursively, in place
- Lists: target followed by the source elements it does not already hold
- Anything else: the value already in the target wins; a source value is
  only used when the target has no such key

Example:
    target = {"provider": {"name": "aws"}, "plugins": ["a"]}
    source = {"provider": {"name": "gcp", "region": "eu-west-1"}, "plugins": ["a", "b"]}

    merge(target, source)
    # {"provider": {"name": "aws", "region": "eu-west-1"}, "plugins": ["a", "b"]}
"""
import logging
from collections.abc import Mapping, MutableMapping
from typing import Any, List, Sequence


logger = logging.getLogger(__name__)


def _is_container(value: Any) -> bool:
    return isinstance(value, (Mapping, list))


def _mergeable(existing: Any, incoming: Any) -> bool:
    """Both values are mappings, or both are lists."""
    if isinstance(existing, Mapping) and isinstance(incoming, Mapping):
        return True
    return isinstance(existing, list) and isinstance(incoming, list)


def _contains(items: Sequence[Any], candidate: Any) -> bool:
    """Membership test: scalars by value, containers by identity.

    Booleans never equal numbers (``True`` is not a duplicate of ``1``).
    """
    if _is_container(candidate):
        return any(item is candidate for item in items)
    return any(
        not _is_container(item)
        and isinstance(item, bool) == isinstance(candidate, bool)
        and item == candidate
        for item in items
    )


def merge_lists(target: List[Any], source: List[Any]) -> List[Any]:
    """Append the elements of ``source`` missing from ``target``.

    Order is preserved on both sides. Duplicates inside ``source`` itself
    are kept.

    Args:
        target: Existing list (higher priority, kept first)
        source: Incoming list

    Returns:
        New list
    """
    return target + [item for item in source if not _contains(target, item)]


def merge(target: Any, *sources: Any) -> Any:
    """Deep merge ``sources`` into ``target``, left to right.

    ``target`` is mutated and returned. ``None`` sources are skipped.

    When ``target`` and the current source are both lists, the merged list
    is returned right away and any remaining sources are not applied.

    Args:
        target: Config node receiving values (wins every conflict)
        *sources: Config nodes providing defaults, earliest first

    Returns:
        The merged target (a new list in the list case)
    """
    for source in sources:
        if source is None:
            continue

        if isinstance(target, list) and isinstance(source, list):
            return merge_lists(target, source)

        if not isinstance(source, Mapping) or not isinstance(target, MutableMapping):
            logger.debug(
                "Skipping non-mergeable source",
                extra={
                    "target_type": type(target).__name__,
                    "source_type": type(source).__name__,
                },
            )
            continue

        for key, value in source.items():
            if key in target and _mergeable(target[key], value):
                target[key] = merge(target[key], value)
            elif key not in target:
                target[key] = value

    return target
