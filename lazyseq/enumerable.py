from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- operator and terminal method sets ---
from .extensions.core import _CoreOperations
from .extensions.terminal import _TerminalOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

# --- cursor contract ---

class ISequence(ABC, Generic[T]):
    @abstractmethod
    def _pull(self) -> PullResult[T]:
        """produce the next element, or EXHAUSTED"""
        pass

# --- base sequence implementation ---

class _BaseSequence(ISequence[T], _CoreOperations[T], _TerminalOperations[T]):
    """
    single-pass cursor shared by every sequence variant.

    variants only implement _pull(); pull() adds the exhausted-stays-exhausted
    guarantee on top of it, so a variant is never asked for more once it has
    reported EXHAUSTED. every operator and terminal operation is built on pull().
    """

    def __init__(self, source: Any):
        self._source = source
        self._exhausted = False
        self.to = TerminalAccessor(self)

    def pull(self) -> PullResult[T]:
        if self._exhausted:
            return EXHAUSTED
        result = self._pull()
        if result is EXHAUSTED:
            self._exhausted = True
        return result

    @property
    def is_exhausted(self) -> bool:
        return self._exhausted

    def __iter__(self) -> Iterator[T]:
        # a sequence is its own iterator: iterating twice does not restart it
        return self

    def __next__(self) -> T:
        result = self.pull()
        if result is EXHAUSTED:
            raise StopIteration
        return result.value

    def __repr__(self) -> str:
        state = "exhausted" if self._exhausted else "open"
        return f"{type(self).__name__}({state})"

# --- identity sequence ---

class Sequence(_BaseSequence[T]):
    """a lazy, single-pass sequence over any python iterable or iterator."""

    def __init__(self, source: Iterable[T]):
        super().__init__(iter(source))

    def _pull(self) -> PullResult[T]:
        try:
            return Yielded(next(self._source))
        except StopIteration:
            return EXHAUSTED

# --- filter and projection sequences ---

class FilteredSequence(_BaseSequence[T]):
    """yields only the source elements that satisfy the predicate."""

    def __init__(self, source: _BaseSequence[T], predicate: Predicate[T]):
        super().__init__(source)
        self._predicate = predicate

    def _pull(self) -> PullResult[T]:
        # runs until a match or the end of the source, however long that is
        while True:
            result = self._source.pull()
            if result is EXHAUSTED or self._predicate(result.value):
                return result


class ProjectedSequence(_BaseSequence[U]):
    """maps each source element through the selector, one for one."""

    def __init__(self, source: _BaseSequence[T], selector: Selector[T, U]):
        super().__init__(source)
        self._selector = selector

    def _pull(self) -> PullResult[U]:
        result = self._source.pull()
        if result is EXHAUSTED:
            return result
        return Yielded(self._selector(result.value))
