"""Convert beans to property maps and back."""

import inspect
import logging
from collections.abc import Mapping
from typing import Any, Dict, Optional, Type, TypeVar

from beanmap.config import ConverterConfig
from beanmap.errors import BindingNotFound, InstantiationError, InvocationError
from beanmap.introspection import PropertyEnumerator

logger = logging.getLogger(__name__)

T = TypeVar('T')


class MapBeanConverter:
    """Project beans into dictionaries and build beans from dictionaries."""

    def __init__(self, config: Optional[ConverterConfig] = None,
                 enumerator: Optional[PropertyEnumerator] = None):
        self.config = config or ConverterConfig()
        self.enumerator = enumerator or PropertyEnumerator(self.config)

    def to_map(self, bean: Any) -> Dict[str, Any]:
        """
        Read every getter of a bean into a dictionary.

        Parameters
        ----------
        bean : Any
            Object following the getX/isX accessor convention

        Returns
        -------
        Dict[str, Any]
            Property name to current value, None values included

        Raises
        ------
        InvocationError
            If any getter raises; the projection is aborted
        """
        if bean is None:
            raise TypeError("Cannot convert None to a property map")

        bean_type = type(bean)
        result = {}
        for binding in self.enumerator.enumerate_getters(bean_type):
            try:
                result[binding.property_name] = binding.read(bean)
            except Exception as exc:
                raise InvocationError(
                    f"Getter {bean_type.__name__}.{binding.method_name} failed: {exc}",
                    bean_type=bean_type,
                    property_name=binding.property_name,
                    method_name=binding.method_name,
                ) from exc
        return result

    def from_map(self, bean_type: Type[T], data: Mapping) -> T:
        """
        Instantiate ``bean_type`` and populate it through its setters.

        Parameters
        ----------
        bean_type : Type[T]
            Class with a zero-argument constructor
        data : Mapping
            Property name to value

        Returns
        -------
        T
            The new instance. Keys without a compatible setter are skipped
            unless the converter is strict.

        Raises
        ------
        InstantiationError
            If the class cannot be constructed without arguments
        InvocationError
            If a resolved setter raises
        BindingNotFound
            In strict mode, for a key with no compatible setter
        """
        if not inspect.isclass(bean_type):
            raise TypeError(f"Expected a class, got {type(bean_type).__name__}")
        if not isinstance(data, Mapping):
            raise TypeError(f"Expected a mapping, got {type(data).__name__}")

        bean = _instantiate(bean_type)

        for key, value in data.items():
            binding = self.enumerator.enumerate_setter(bean_type, key, type(value))
            if binding is None:
                if self.config.strict:
                    raise BindingNotFound(
                        f"No setter on {bean_type.__name__} accepts {key!r}={value!r}",
                        bean_type=bean_type,
                        property_name=key,
                    )
                logger.debug(f"Skipping {key!r}: no compatible setter on {bean_type.__name__}")
                continue

            try:
                binding.write(bean, value)
            except Exception as exc:
                raise InvocationError(
                    f"Setter {bean_type.__name__}.{binding.method_name} failed: {exc}",
                    bean_type=bean_type,
                    property_name=binding.property_name,
                    method_name=binding.method_name,
                ) from exc

        return bean

    def describe(self, bean: Any) -> str:
        """Render a bean as ``ClassName{prop=value, ...}``."""
        properties = ', '.join(f"{name}={value!r}" for name, value in self.to_map(bean).items())
        return f"{type(bean).__name__}{{{properties}}}"


def _instantiate(bean_type: type) -> Any:
    try:
        signature = inspect.signature(bean_type)
    except (TypeError, ValueError):
        # some builtins hide their signature; let the call decide
        signature = None

    if signature is not None:
        required = [
            p.name for p in signature.parameters.values()
            if p.default is inspect.Parameter.empty
            and p.kind not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
        ]
        if required:
            raise InstantiationError(
                f"{bean_type.__name__} has no zero-argument constructor "
                f"(requires {', '.join(required)})",
                bean_type=bean_type,
            )

    try:
        return bean_type()
    except Exception as exc:
        raise InstantiationError(
            f"Cannot instantiate {bean_type.__name__}: {exc}", bean_type=bean_type
        ) from exc


_default_converter = MapBeanConverter()


def to_map(bean: Any) -> Dict[str, Any]:
    """Project a bean with the shared default converter."""
    return _default_converter.to_map(bean)


def from_map(bean_type: Type[T], data: Mapping) -> T:
    """Build a bean with the shared default converter."""
    return _default_converter.from_map(bean_type, data)


def describe(bean: Any) -> str:
    return _default_converter.describe(bean)
