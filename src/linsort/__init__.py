from linsort._cli import main
from linsort._config import set_max_span
from linsort._contracts import checked
from linsort._counting import ExtendedCountingSort, extended_counting_sort
from linsort._engine import ObligationResult, check_sorter
from linsort._errors import CapacityError, ElementTypeError, LinsortError, UnknownSorterError
from linsort._properties import Tagged
from linsort._sorter import ReferenceSort, Sorter, available_sorters, get_sorter, register_sorter

__all__ = [
    "CapacityError",
    "ElementTypeError",
    "ExtendedCountingSort",
    "LinsortError",
    "ObligationResult",
    "ReferenceSort",
    "Sorter",
    "Tagged",
    "UnknownSorterError",
    "available_sorters",
    "check_sorter",
    "checked",
    "extended_counting_sort",
    "get_sorter",
    "main",
    "register_sorter",
    "set_max_span",
]
