"""Discovery of getter/setter properties on bean classes."""

from .bindings import AccessorBinding, MutatorBinding
from .enumerator import PropertyEnumerator
from .naming import capitalize, decapitalize, property_name_for, setter_name_for
from .type_matching import is_assignable

__all__ = [
    'AccessorBinding',
    'MutatorBinding',
    'PropertyEnumerator',
    'capitalize',
    'decapitalize',
    'is_assignable',
    'property_name_for',
    'setter_name_for',
]
