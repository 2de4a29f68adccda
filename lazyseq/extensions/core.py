from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import _BaseSequence, FilteredSequence, ProjectedSequence
    from .grouping import GroupedSequence

class _CoreOperations(Generic[T]):
    def where(self: '_BaseSequence[T]', predicate: Predicate[T]) -> 'FilteredSequence[T]':
        """filter elements based on a predicate"""
        from ..enumerable import FilteredSequence
        return FilteredSequence(self, predicate)

    def select(self: '_BaseSequence[T]', selector: Selector[T, U]) -> 'ProjectedSequence[U]':
        """project each element to a new form"""
        from ..enumerable import ProjectedSequence
        return ProjectedSequence(self, selector)

    def group_by(self: '_BaseSequence[T]', key_selector: KeySelector[T, K]) -> 'GroupedSequence[K, T]':
        """
        group elements by a key, in order of first occurrence.
        unlike where/select this stage is eager: its first pull drains the whole
        source and holds every element in memory until the groups are consumed.
        """
        from .grouping import GroupedSequence
        return GroupedSequence(self, key_selector)
