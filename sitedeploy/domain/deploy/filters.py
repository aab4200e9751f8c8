"""
Filter chain builder
"""
from typing import List, Tuple

from ...core.constants import DEFAULT_PREPROCESS_MASKS
from ...core.interfaces import DeployLogger
from ..engine.filters import FilterChain, FilterFunc
from ..engine.preprocessor import Preprocessor
from .models import Section


def preprocess_steps(preprocessor: Preprocessor) -> List[Tuple[str, FilterFunc, bool]]:
    """The js/css pipeline as (tag, function, final) triples"""
    return [
        ("js", preprocessor.expand_apache_imports, False),
        ("js", preprocessor.compress_js, True),
        ("css", preprocessor.expand_apache_imports, False),
        ("css", preprocessor.expand_css_imports, False),
        ("css", preprocessor.compress_css, True),
    ]


def build_filters(section: Section, deploy_logger: DeployLogger) -> FilterChain:
    """Empty chain unless the section enables preprocessing"""
    chain = FilterChain()
    if not section.preprocess:
        return chain
    for tag, func, final in preprocess_steps(Preprocessor(deploy_logger)):
        chain = chain.with_filter(tag, func, final=final)
    return chain


def resolve_preprocess_masks(section: Section) -> Tuple[str, ...]:
    """Declared masks verbatim, defaults only when none are declared"""
    if not section.preprocess:
        return ()
    return tuple(section.preprocess_masks) or DEFAULT_PREPROCESS_MASKS
