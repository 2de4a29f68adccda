from __future__ import annotations
import logging
from ..types import *
from ..enumerable import Sequence, _BaseSequence

logger = logging.getLogger(__name__)


class Grouping(Sequence[T], Generic[K, T]):
    """a key plus a sequence over the elements that produced it, in source order"""

    def __init__(self, key: K, elements: List[T]):
        super().__init__(elements)
        self._key = key

    @property
    def key(self) -> K:
        return self._key

    def __repr__(self) -> str:
        return f"Grouping(key={self._key!r})"


class GroupedSequence(_BaseSequence[Grouping[K, T]], Generic[K, T]):
    """
    yields one Grouping per distinct key, keys in order of first occurrence.

    the source is drained on the first pull rather than at construction, since a
    group cannot be handed out before every element has been seen. this costs a
    full traversal up front and o(n) memory for the index. keys must be hashable.
    """

    def __init__(self, source: _BaseSequence[T], key_selector: KeySelector[T, K]):
        super().__init__(source)
        self._key_selector = key_selector
        self._index: Optional[Dict[K, List[T]]] = None
        self._keys: Optional[Iterator[K]] = None

    def _build_index(self) -> Dict[K, List[T]]:
        index: Dict[K, List[T]] = {}
        drained = 0
        for item in self._source:
            index.setdefault(self._key_selector(item), []).append(item)
            drained += 1
        logger.debug("group_by drained %d elements into %d groups", drained, len(index))
        return index

    def _pull(self) -> PullResult[Grouping[K, T]]:
        if self._index is None:
            try:
                index = self._build_index()
            except Exception:
                # a failed drain ends the stage; the leftover source never forms groups
                self._index = {}
                self._keys = iter(())
                self._exhausted = True
                raise
            self._index = index
            self._keys = iter(self._index)
        key = next(self._keys, MISSING)
        if key is MISSING:
            return EXHAUSTED
        return Yielded(Grouping(key, self._index[key]))
