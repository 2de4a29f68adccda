import typing
from itertools import repeat as _repeat
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import Sequence

def sequence_of(*values: T) -> 'Sequence[T]':
    """create sequence from literal values"""
    from .enumerable import Sequence
    return Sequence(values)

def as_sequence(data: Iterable[T]) -> 'Sequence[T]':
    """create sequence over an existing iterable; generators stay lazy"""
    from .enumerable import Sequence
    return Sequence(data)

def from_range(start: int, count: int) -> 'Sequence[int]':
    """create sequence from range"""
    from .enumerable import Sequence
    return Sequence(range(start, start + count))

def repeat(item: T, count: int) -> 'Sequence[T]':
    """create sequence with repeated item"""
    from .enumerable import Sequence
    return Sequence(_repeat(item, count))

def empty() -> 'Sequence[Any]':
    """create empty sequence"""
    from .enumerable import Sequence
    return Sequence(())

# --- aliases ---
from_iterable = as_sequence
S = as_sequence
