"""
Content filter chain
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Tuple

FilterFunc = Callable[[str, Path], str]


@dataclass(frozen=True)
class Filter:
    """
    One content transformation step.
    
    Attributes:
        tag: File type tag the step applies to (file extension without dot)
        func: ``func(content, origin_file) -> content``
        final: Last step permitted to run for its tag
    """
    tag: str
    func: FilterFunc
    final: bool = False

    @property
    def name(self) -> str:
        return getattr(self.func, "__name__", repr(self.func))


class FilterChain:
    """Immutable ordered list of filters"""

    def __init__(self, filters: Iterable[Filter] = ()):
        self._filters: Tuple[Filter, ...] = tuple(filters)

    def with_filter(self, tag: str, func: FilterFunc, final: bool = False) -> "FilterChain":
        """Return a new chain with the step appended"""
        return FilterChain(self._filters + (Filter(tag=tag, func=func, final=final),))

    def steps(self, tag: str) -> List[Filter]:
        """Steps that run for a tag: registration order, up to and including the first final one"""
        result = []
        for f in self._filters:
            if f.tag != tag:
                continue
            result.append(f)
            if f.final:
                break
        return result

    def apply(self, tag: str, content: str, origin: Path) -> str:
        for f in self.steps(tag):
            content = f.func(content, origin)
        return content

    @property
    def tags(self) -> List[str]:
        return list(dict.fromkeys(f.tag for f in self._filters))

    def __iter__(self) -> Iterator[Filter]:
        return iter(self._filters)

    def __len__(self) -> int:
        return len(self._filters)

    def __repr__(self) -> str:
        return f"FilterChain({[(f.tag, f.name, f.final) for f in self._filters]})"
