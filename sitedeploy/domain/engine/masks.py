"""
Ignore / preprocess mask matching
"""
from fnmatch import fnmatchcase
from typing import Iterable


def matches_mask(path: str, masks: Iterable[str], is_dir: bool = False) -> bool:
    """
    Check a '/relative/path' against glob masks.
    
    Rules:
    - masks without '/' match the entry name (``*.bak`` matches ``/a/b.bak``)
    - masks containing '/' are anchored to the root (``/temp/*``)
    - a trailing '/' restricts the mask to directories
    - a leading '!' negates, the last matching mask wins
    
    Args:
        path: Path relative to the deployment root, starting with '/'
        masks: Glob masks
        is_dir: Whether the path is a directory
    
    Returns:
        True if the path is matched
    """
    path = "/" + path.strip("/")
    name = path.rsplit("/", 1)[-1]
    matched = False

    for mask in masks:
        mask = mask.strip()
        if not mask:
            continue

        negate = mask.startswith("!")
        if negate:
            mask = mask[1:]

        if mask.endswith("/"):
            if not is_dir:
                continue
            mask = mask.rstrip("/")

        if "/" in mask:
            hit = fnmatchcase(path, "/" + mask.lstrip("/"))
        else:
            hit = fnmatchcase(name, mask)

        if hit:
            matched = not negate

    return matched
