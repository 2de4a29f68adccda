r"""
'  .__
'  |  | _____  ___________.__. ______ ____  ______
'  |  | \__  \ \___   <   |  |/  ___// __ \/ ____/
'  |  |__/ __ \_/    / \___  |\___ \\  ___< <_|  |
'  |____(____  /_____ \/ ____/____  >\___  >__   |
'            \/      \/\/         \/     \/   |__|
"""

# expose the sequence classes
from .enumerable import ISequence, Sequence, FilteredSequence, ProjectedSequence
from .extensions.grouping import GroupedSequence, Grouping

# expose the factory functions
from .factories import (
    sequence_of,
    as_sequence,
    from_iterable,
    from_range,
    repeat,
    empty,
    S
)

# expose the pull result and error types
from .types import (
    Yielded,
    Exhausted,
    EXHAUSTED,
    MISSING,
    NotFoundError
)

# define what `import *` does
__all__ = [
    "ISequence",
    "Sequence",
    "FilteredSequence",
    "ProjectedSequence",
    "GroupedSequence",
    "Grouping",
    "sequence_of",
    "as_sequence",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "S",
    "Yielded",
    "Exhausted",
    "EXHAUSTED",
    "MISSING",
    "NotFoundError"
]
