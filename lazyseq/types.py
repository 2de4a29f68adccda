from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Callback = Callable[[T, int], Any]


class Yielded(Generic[T]):
    """a single pulled element"""

    __slots__ = ('_value',)

    def __init__(self, value: T):
        self._value = value

    @property
    def value(self) -> T: return self._value

    def __eq__(self, other) -> bool:
        return isinstance(other, Yielded) and self._value == other._value

    def __hash__(self) -> int:
        return hash(('Yielded', self._value))

    def __repr__(self) -> str:
        return f"Yielded({self._value!r})"


class Exhausted:
    """
    the terminal pull result. there is only one instance, EXHAUSTED,
    so callers may test with `is`
    """

    _instance: Optional['Exhausted'] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool: return False

    def __repr__(self) -> str:
        return "EXHAUSTED"


EXHAUSTED = Exhausted()

PullResult = Union[Yielded[T], Exhausted]


class _Missing:
    """absent-value marker, distinct from None and from any element"""

    _instance: Optional['_Missing'] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool: return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


class NotFoundError(ValueError):
    """raised when a sequence holds no element satisfying the condition"""
    pass
