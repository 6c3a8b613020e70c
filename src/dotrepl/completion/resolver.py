# dotrepl.completion.resolver - Chain resolution against live scopes
"""
Walks a chain's segments through the value graph to find the object whose
members should be offered.
"""
import logging
import sys
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from dotrepl.completion.chain import ChainSpec
from dotrepl.runtime.values import ABSENT, SyntheticScope, ValueModel

logger = logging.getLogger(__name__)


@dataclass
class Resolution:
    """Where completion should look, and whether it is still at global scope."""

    root: Any
    is_global: bool


def loaded_module_names() -> list[str]:
    return list(sys.modules)


def resolve(
    chain: ChainSpec,
    module: Any,
    builtins_scope: Any,
    model: ValueModel,
    module_names: Optional[Iterable[str]] = None,
) -> Optional[Resolution]:
    """
    Resolve every segment before the partial one.

    Only the first segment may fall back to the builtins scope; once the
    walk has stepped into an object, a miss ends resolution.

    Args:
        chain: Extracted chain
        module: Global scope of the session
        builtins_scope: Builtin namespace
        model: Value model used for lookups
        module_names: Loaded module names for import completion
            (defaults to sys.modules)

    Returns:
        Resolution, or None when a segment does not resolve
    """
    root = module
    is_global = True

    for name in chain.names:
        value = model.get_attribute(root, name)
        if value is ABSENT:
            if not is_global:
                logger.debug("no attribute %r, giving up", name)
                return None
            value = model.get_attribute(builtins_scope, name)
            if value is ABSENT:
                logger.debug("%r is neither global nor builtin", name)
                return None
        root = value
        is_global = False

    if is_global and chain.follows_import:
        names = loaded_module_names() if module_names is None else module_names
        root = SyntheticScope("modules", names)

    return Resolution(root=root, is_global=is_global)
