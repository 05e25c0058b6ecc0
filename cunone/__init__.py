__version__ = "0.0.1"

from .types import *
from .accessors import AccessorArray, to_accessor_array, is_accessor_array, resolve_array_kind
from .traversal import resolve_traversal, count_visits, bind_predicate
from .scan import cunone_by, cunone, cunone_by_assign, cunone_by_rows
