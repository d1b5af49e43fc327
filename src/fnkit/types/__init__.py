"""Core types: Option, Some, Nothing, Result, Ok, Fail, Error, Unit."""

from fnkit.types.error import Error, ExceptionError
from fnkit.types.option import Nothing, NothingType, Option, Some, optional
from fnkit.types.result import Fail, Ok, Result
from fnkit.types.unit import Unit, unit

__all__ = [
    "Error",
    "ExceptionError",
    "Fail",
    "Nothing",
    "NothingType",
    "Ok",
    "Option",
    "Result",
    "Some",
    "Unit",
    "optional",
    "unit",
]
