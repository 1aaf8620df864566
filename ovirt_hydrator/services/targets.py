"""
Resolution of hydration targets.

A target is given as one of:
- a registered node type name, e.g. ``"api"``
- a constructor (class or zero-argument factory)
- an existing API node instance

Whatever is given must end up as an object with settable ``collections``
and ``properties``.
"""

import dataclasses
import logging
from collections.abc import Callable
from enum import Enum
from typing import Any

from pydantic import BaseModel

from ovirt_hydrator.exceptions import InvalidTargetError
from ovirt_hydrator.schemas.api_node import ApiNode, ApiNodeLike

logger = logging.getLogger(__name__)

NodeFactory = Callable[[], Any]

_NODE_TYPES: dict[str, NodeFactory] = {"api": ApiNode}


class TargetKind(str, Enum):
    NAME = "name"
    FACTORY = "factory"
    INSTANCE = "instance"


def register_node_type(name: str, factory: NodeFactory) -> None:
    """
    Register a node type under a name usable as a hydration target.

    Args:
        name: Lookup name
        factory: Zero-argument callable producing an API node
    """
    if not callable(factory):
        raise InvalidTargetError(f"Node type {name!r} must be callable")
    _NODE_TYPES[name] = factory


def unregister_node_type(name: str) -> None:
    """Remove a registered node type; unknown names are ignored."""
    _NODE_TYPES.pop(name, None)


def registered_node_types() -> list[str]:
    """Get the names usable as hydration targets, sorted."""
    return sorted(_NODE_TYPES)


def _is_api_node(obj: Any) -> bool:
    return not isinstance(obj, type) and isinstance(obj, ApiNodeLike)


def _is_settable(obj: Any, name: str) -> bool:
    if isinstance(obj, BaseModel) and obj.model_config.get("frozen"):
        return False
    if dataclasses.is_dataclass(obj) and obj.__dataclass_params__.frozen:
        return False
    descriptor = getattr(type(obj), name, None)
    if isinstance(descriptor, property) and descriptor.fset is None:
        return False
    return True


def _check_writable(node: Any, description: str) -> Any:
    for name in ("collections", "properties"):
        if not _is_settable(node, name):
            raise InvalidTargetError(f"{description} has a read-only {name!r} attribute")
    return node


def target_kind(target: Any) -> TargetKind:
    """
    Tell which form a target was given in.

    Instances are checked before callables, since a node may be callable.

    Raises:
        InvalidTargetError: If the target fits none of the forms
    """
    if isinstance(target, str):
        return TargetKind.NAME
    if _is_api_node(target):
        return TargetKind.INSTANCE
    if callable(target):
        return TargetKind.FACTORY
    raise InvalidTargetError(
        f"Invalid hydration target of type {type(target).__name__}"
    )


def _construct(factory: NodeFactory, description: str) -> ApiNodeLike:
    try:
        node = factory()
    except Exception as e:
        raise InvalidTargetError(f"Cannot construct {description}: {e}") from e

    if not _is_api_node(node):
        raise InvalidTargetError(
            f"{description} produced {type(node).__name__}, which is not an API node"
        )
    return _check_writable(node, description)


def resolve_target(target: Any) -> ApiNodeLike:
    """
    Resolve a target into an API node instance.

    Args:
        target: Node type name, constructor or API node instance

    Returns:
        API node ready to receive collections and properties

    Raises:
        InvalidTargetError: If no API node can be obtained
    """
    kind = target_kind(target)

    if kind is TargetKind.INSTANCE:
        return _check_writable(target, type(target).__name__)

    if kind is TargetKind.NAME:
        factory = _NODE_TYPES.get(target)
        if factory is None:
            raise InvalidTargetError(f"Unknown node type: {target!r}")
        logger.debug(f"Resolved node type {target!r}")
        return _construct(factory, f"node type {target!r}")

    return _construct(target, getattr(target, "__name__", repr(target)))
