"""
Hook reference resolution

``"package.module:function"`` resolves to a function hook,
``"package.module:Object.member"`` to a (target, member) hook.
"""
import importlib
from typing import Any, List

from ...core.exceptions import ConfigError
from ...domain.deploy.models import FunctionHook, Hook, MethodHook


def resolve_hook(reference: str) -> Hook:
    """
    Resolve a hook reference.
    
    A missing module is a configuration error. A missing attribute is kept as a
    (target, member) hook so that it is reported when the hook runs.
    
    Raises:
        ConfigError: If the reference is malformed or the module cannot be imported
    """
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        raise ConfigError(f"Invalid callback reference '{reference}', expected 'module:attribute'")

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigError(f"Cannot import callback module '{module_name}': {e}") from e

    *owners, member = attr_path.split(".")
    for name in owners:
        if not hasattr(target, name):
            return MethodHook(target=target, member=name)
        target = getattr(target, name)

    if not owners and callable(getattr(target, member, None)):
        return FunctionHook(func=getattr(target, member))
    return MethodHook(target=target, member=member)


def resolve_hooks(references: Any, key: str) -> List[Hook]:
    if references is None:
        return []
    if isinstance(references, str):
        references = [references]
    if not isinstance(references, list):
        raise ConfigError(f"'{key}' must be a list of callback references")
    return [resolve_hook(str(ref)) for ref in references]
