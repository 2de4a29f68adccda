from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import _BaseSequence

class _TerminalOperations(Generic[T]):
    def count(self: '_BaseSequence[T]', predicate: Optional[Predicate[T]] = None) -> int:
        """count elements, draining the sequence"""
        if predicate is None: return sum(1 for _ in self)
        return sum(1 for x in self if predicate(x))

    def any(self: '_BaseSequence[T]', predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition, stopping at the first that does"""
        for item in self:
            if predicate is None or predicate(item): return True
        return False

    def all(self: '_BaseSequence[T]', predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition, stopping at the first that does not"""
        for item in self:
            if not predicate(item): return False
        return True

    def first(self: '_BaseSequence[T]', predicate: Optional[Predicate[T]] = None) -> T:
        """get first element"""
        item = self.first_or_default(predicate)
        if item is MISSING:
            if predicate is None: raise NotFoundError("sequence contains no elements")
            raise NotFoundError("no element satisfies the condition")
        return item

    def first_or_default(self: '_BaseSequence[T]', predicate: Optional[Predicate[T]] = None,
                         default: Any = MISSING) -> Any:
        """get first element, or `default` (MISSING unless given) when there is none"""
        for item in self:
            if predicate is None or predicate(item): return item
        return default

    def for_each(self: '_BaseSequence[T]', callback: Callback[T],
                 legacy_trailing_call: bool = False) -> None:
        """
        call callback(element, index) for every element, index counting from 0.

        with legacy_trailing_call the callback also fires once more after the
        sequence is exhausted, as callback(None, n). older callers relied on that
        extra call; it also happens for an empty sequence.
        """
        index = 0
        for item in self:
            callback(item, index)
            index += 1
        if legacy_trailing_call:
            callback(None, index)


class TerminalAccessor(Generic[T]):
    """conversions that drain the sequence into a concrete container"""

    def __init__(self, sequence_instance: '_BaseSequence[T]'):
        self._sequence = sequence_instance

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._sequence)

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(list(self._sequence))

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._sequence)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._sequence}

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(list(self._sequence))

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(list(self._sequence))
