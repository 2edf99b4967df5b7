"""
'    ________ __________________  _________________________  ________
'    \_____  \\______   \______ \ \_   _____/\______   \   \/  /_   _|
'     /   |   \|       _/|    |  \ |    __)_  |       _/\     /  | |
'    /    |    \    |   \|    `   \|        \ |    |   \/     \  | |
'    \_______  /____|_  /_______  /_______  / |____|_  /___/\  \ |_|
'            \/       \/        \/        \/         \/      \_/
"""

import logging

# expose the selection and sorting modules
from . import selector, sorting, comparers, config

# expose the fluent collection
from .collection import Collection, from_iterable, empty, P

# expose supporting types and errors
from .types import SelectionResult, Comparer, Equality
from .errors import SelectionError, InvalidArgumentError, NoSuchElementError

# expose the most used functions directly
from .sorting import merge_sort, sorted_copy
from .selector import attempt

# library logging stays silent unless the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "selector",
    "sorting",
    "comparers",
    "config",
    "Collection",
    "from_iterable",
    "empty",
    "P",
    "SelectionResult",
    "Comparer",
    "Equality",
    "SelectionError",
    "InvalidArgumentError",
    "NoSuchElementError",
    "merge_sort",
    "sorted_copy",
    "attempt",
]
