"""Reflective conversion between accessor-style beans and property maps."""

from beanmap.config import ConverterConfig
from beanmap.converters import MapBeanConverter, describe, from_map, to_map
from beanmap.errors import (
    BindingNotFound,
    ConversionError,
    EnumerationError,
    InstantiationError,
    InvocationError,
)
from beanmap.introspection import AccessorBinding, MutatorBinding, PropertyEnumerator
from beanmap.validation import RoundTripValidator, ValidationResult

__version__ = '0.1.0'

__all__ = [
    'AccessorBinding',
    'BindingNotFound',
    'ConversionError',
    'ConverterConfig',
    'EnumerationError',
    'InstantiationError',
    'InvocationError',
    'MapBeanConverter',
    'MutatorBinding',
    'PropertyEnumerator',
    'RoundTripValidator',
    'ValidationResult',
    'describe',
    'from_map',
    'to_map',
]
