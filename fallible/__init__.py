"""fallible: a result algebra for composing fallible computations.

Usage:
    from fallible import Error, Ok, catch

    value = catch(lambda: int(raw)).map_ok(abs).get_or_default(lambda _: 0)
"""

from fallible.core import *  # noqa: F403
from fallible.core import __all__ as _core_all

__all__ = list(_core_all)
__version__ = "0.1.0"
