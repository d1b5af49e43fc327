"""fnkit: Option and Result types for Python 3.13+.

Flat imports (preferred):
    from fnkit import Option, Some, Nothing, Result, Ok, Fail, Error
    from fnkit import traverse, condition, safe

Submodule imports (for organization):
    from fnkit.types import Option, Result
    from fnkit.combinators import traverse, zip_with
    from fnkit.itertools import first_or_none, try_get_value
"""

# Configuration
from fnkit._config import Config, get_config, init

# Combinators
from fnkit.combinators import (
    collect,
    condition,
    tee,
    traverse,
    unless,
    when,
    zip_with,
)

# Decorators
from fnkit.decorators import safe

# Exceptions
from fnkit.exceptions import (
    FnkitError,
    NullValueError,
    OptionCastError,
    OptionError,
    ResultCastError,
    ResultStateError,
)

# Collection helpers
from fnkit.itertools import first_or_none, try_get_value

# Types
from fnkit.types import (
    Error,
    ExceptionError,
    Fail,
    Nothing,
    NothingType,
    Ok,
    Option,
    Result,
    Some,
    Unit,
    optional,
    unit,
)

__all__ = [
    "Config",
    "Error",
    "ExceptionError",
    "Fail",
    "FnkitError",
    "Nothing",
    "NothingType",
    "NullValueError",
    "Ok",
    "Option",
    "OptionCastError",
    "OptionError",
    "Result",
    "ResultCastError",
    "ResultStateError",
    "Some",
    "Unit",
    "collect",
    "condition",
    "first_or_none",
    "get_config",
    "init",
    "optional",
    "safe",
    "tee",
    "traverse",
    "try_get_value",
    "unit",
    "unless",
    "when",
    "zip_with",
]
