"""Exception hierarchy for bean/map conversion."""

from typing import Optional


class ConversionError(Exception):
    """Base class for every failure raised by beanmap."""

    def __init__(self, message: str, bean_type: Optional[type] = None,
                 property_name: Optional[str] = None,
                 method_name: Optional[str] = None):
        super().__init__(message)
        self.bean_type = bean_type
        self.property_name = property_name
        self.method_name = method_name


class EnumerationError(ConversionError):
    """The accessor metadata of a class could not be read."""


class InvocationError(ConversionError):
    """A resolved getter or setter raised while being invoked."""


class InstantiationError(ConversionError):
    """The target class could not be constructed without arguments."""


class BindingNotFound(ConversionError):
    """No setter accepts the given key and value.

    Only raised when the converter is configured as strict; the default
    builder skips such entries.
    """
