"""Accessor naming convention helpers."""

from typing import Optional, Sequence


def decapitalize(text: str) -> str:
    """Lower-case the first character, leaving the rest untouched."""
    if not text:
        return text
    return text[0].lower() + text[1:]


def capitalize(text: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    if not text:
        return text
    return text[0].upper() + text[1:]


def property_name_for(method_name: str, prefixes: Sequence[str]) -> Optional[str]:
    """
    Derive the property name exposed by an accessor method name.

    Parameters
    ----------
    method_name : str
        Name of the candidate method, e.g. ``getName`` or ``isLongName``
    prefixes : Sequence[str]
        Recognised prefixes, tried in order

    Returns
    -------
    Optional[str]
        The property name, or None when the name does not follow the
        convention. The character right after the prefix must be upper-case,
        so ``isolate`` and a bare ``is`` are rejected.
    """
    for prefix in prefixes:
        if not method_name.startswith(prefix):
            continue
        remainder = method_name[len(prefix):]
        if remainder and remainder[0].isupper():
            return decapitalize(remainder)
    return None


def setter_name_for(property_name: str, prefix: str = 'set') -> Optional[str]:
    """Name of the mutator for a property, None for an empty name."""
    if not property_name:
        return None
    return prefix + capitalize(property_name)
