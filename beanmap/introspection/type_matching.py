"""Match runtime value types against declared annotations."""

import types
from typing import Annotated, Any, TypeVar, Union, get_args, get_origin

NoneType = type(None)

_UNION_ORIGINS = {Union}
if hasattr(types, 'UnionType'):
    _UNION_ORIGINS.add(types.UnionType)

# PEP 484 numeric tower: int is acceptable where float is expected, etc.
_NUMERIC_PROMOTIONS = {
    float: (int,),
    complex: (int, float),
}
_NUMERIC_TYPES = (int, float, complex)


def _unwrap(declared: Any) -> Any:
    """Strip Annotated, NewType and TypeVar wrappers."""
    while True:
        if get_origin(declared) is Annotated:
            declared = get_args(declared)[0]
        elif hasattr(declared, '__supertype__'):
            declared = declared.__supertype__
        elif isinstance(declared, TypeVar):
            if declared.__bound__ is not None:
                declared = declared.__bound__
            elif declared.__constraints__:
                declared = Union[declared.__constraints__]
            else:
                return Any
        else:
            return declared


def is_assignable(value_type: type, declared: Any) -> bool:
    """
    Check whether a value of ``value_type`` can be passed where ``declared`` is expected.

    Parameters
    ----------
    value_type : type
        Runtime type of the candidate value
    declared : Any
        Resolved annotation of the parameter or field. None means the
        declaration is missing or could not be resolved.

    Returns
    -------
    bool
        True when the value is compatible. Without a declaration any
        non-None value matches, while None has nothing to be matched against.
        With a declaration None always matches.
    """
    if declared is None:
        return value_type is not NoneType
    if value_type is NoneType:
        return True

    declared = _unwrap(declared)
    if declared is Any or declared is object:
        return True

    origin = get_origin(declared)
    if origin in _UNION_ORIGINS:
        return any(is_assignable(value_type, arg) for arg in get_args(declared))
    if origin is not None:
        declared = origin

    if not isinstance(declared, type):
        # Literal, ForwardRef leftovers and other special forms
        return True

    if issubclass(value_type, bool) and declared in _NUMERIC_TYPES:
        # True is not a number here
        return False

    try:
        if issubclass(value_type, declared):
            return True
    except TypeError:
        # non runtime-checkable protocols cannot be tested
        return True
    return issubclass(value_type, _NUMERIC_PROMOTIONS.get(declared, ()))
