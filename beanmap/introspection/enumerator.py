"""Classify the methods of a bean class into getter and setter bindings."""

import dataclasses
import inspect
import logging
import threading
import types
import weakref
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Tuple, get_type_hints

from beanmap.config import ConverterConfig
from beanmap.errors import EnumerationError

from .bindings import AccessorBinding, MutatorBinding
from .naming import property_name_for, setter_name_for
from .type_matching import is_assignable

logger = logging.getLogger(__name__)

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


class PropertyEnumerator:
    """
    Discover properties exposed through accessor naming conventions.

    A class's declared methods are the plain functions found in the
    ``__dict__`` of every class in its MRO except ``object``. A name defined
    on a subclass shadows the same name on its bases. Static methods, class
    methods and ``property`` objects are never treated as accessors.
    """

    def __init__(self, config: Optional[ConverterConfig] = None):
        self.config = config or ConverterConfig()
        self._getter_cache = weakref.WeakKeyDictionary()
        self._setter_cache = weakref.WeakKeyDictionary()
        self._resolved_cache = weakref.WeakKeyDictionary()
        self._lock = threading.Lock()

    def enumerate_getters(self, cls: type) -> List[AccessorBinding]:
        """
        List the readable properties of a class.

        Parameters
        ----------
        cls : type
            Bean class to inspect

        Returns
        -------
        List[AccessorBinding]
            One binding per property name, in MRO then definition order.
            ``declared_type`` holds the return annotation as written,
            which may be an unresolved string.
        """
        _require_class(cls)
        return list(self._cached(self._getter_cache, cls, self._collect_getters))

    def enumerate_setters(self, cls: type) -> List[MutatorBinding]:
        """List every single-argument mutator of a class, annotations unresolved."""
        _require_class(cls)
        return list(self._setters_by_method(cls).values())

    def enumerate_setter(self, cls: type, property_name: str,
                         value_type: type) -> Optional[MutatorBinding]:
        """
        Resolve the mutator that can store a value of ``value_type`` in a property.

        Parameters
        ----------
        cls : type
            Bean class to inspect
        property_name : str
            Key from the property map, e.g. ``name``
        value_type : type
            Runtime type of the value to assign; ``type(None)`` for None

        Returns
        -------
        Optional[MutatorBinding]
            The binding with its declared type resolved, or None when no
            ``set<Name>`` method exists or its declared parameter type does
            not accept ``value_type``
        """
        _require_class(cls)
        if not isinstance(property_name, str):
            return None

        method_name = setter_name_for(property_name, self.config.setter_prefix)
        if method_name is None:
            return None

        binding = self._setters_by_method(cls).get(method_name)
        if binding is None:
            logger.debug(f"{cls.__name__} has no mutator {method_name}")
            return None

        binding = self._resolved(cls, binding)
        if not is_assignable(value_type, binding.declared_type):
            logger.debug(
                f"{cls.__name__}.{method_name} does not accept "
                f"{value_type.__name__} (declared {binding.declared_type!r})"
            )
            return None

        return binding

    def clear_cache(self):
        """Forget every cached binding."""
        with self._lock:
            self._getter_cache.clear()
            self._setter_cache.clear()
            self._resolved_cache.clear()

    def _cached(self, cache: weakref.WeakKeyDictionary, cls: type,
                build: Callable[[type], Any]) -> Any:
        if not self.config.cache:
            return build(cls)

        with self._lock:
            entry = cache.get(cls)
        if entry is not None:
            return entry

        entry = build(cls)
        with self._lock:
            # another thread may have won the race; keep its entry
            entry = cache.setdefault(cls, entry)
        logger.debug(f"Cached bindings for {cls.__qualname__}")
        return entry

    def _setters_by_method(self, cls: type) -> Mapping[str, MutatorBinding]:
        return self._cached(self._setter_cache, cls, self._collect_setters)

    def _resolved(self, cls: type, binding: MutatorBinding) -> MutatorBinding:
        """Resolve the declared type of one mutator, once per class and method."""
        if not self.config.cache:
            return _resolve_mutator(cls, binding)

        with self._lock:
            resolved = self._resolved_cache.get(cls, {}).get(binding.method_name)
        if resolved is not None:
            return resolved

        resolved = _resolve_mutator(cls, binding)
        with self._lock:
            per_class = self._resolved_cache.setdefault(cls, {})
            return per_class.setdefault(binding.method_name, resolved)

    def _collect_getters(self, cls: type) -> Tuple[AccessorBinding, ...]:
        bindings: Dict[str, AccessorBinding] = {}

        for name, func in _declared_functions(cls):
            property_name = property_name_for(name, self.config.getter_prefixes)
            if property_name is None:
                continue

            parameters = _parameters_after_self(cls, name, func)
            if parameters is None or parameters:
                continue

            if property_name in bindings:
                logger.debug(
                    f"{cls.__name__}.{name} ignored: property {property_name} "
                    f"already bound to {bindings[property_name].method_name}"
                )
                continue

            bindings[property_name] = AccessorBinding(
                property_name=property_name,
                method_name=name,
                method=func,
                declared_type=_raw_annotations(func).get('return'),
            )

        return tuple(bindings.values())

    def _collect_setters(self, cls: type) -> Mapping[str, MutatorBinding]:
        bindings: Dict[str, MutatorBinding] = {}

        for name, func in _declared_functions(cls):
            property_name = property_name_for(name, (self.config.setter_prefix,))
            if property_name is None:
                continue

            parameters = _parameters_after_self(cls, name, func)
            if parameters is None or len(parameters) != 1:
                continue
            parameter = parameters[0]
            if parameter.kind not in _POSITIONAL:
                continue

            bindings[name] = MutatorBinding(
                property_name=property_name,
                method_name=name,
                method=func,
                declared_type=_raw_annotations(func).get(parameter.name),
            )

        return types.MappingProxyType(bindings)


def _require_class(cls: Any):
    if not inspect.isclass(cls):
        raise TypeError(f"Expected a class, got {type(cls).__name__}")


def _declared_functions(cls: type) -> Iterator[Tuple[str, Callable[..., Any]]]:
    """Yield (name, function) pairs visible on ``cls``, most-derived first."""
    seen = set()
    for klass in inspect.getmro(cls):
        if klass is object:
            continue
        try:
            namespace = vars(klass)
        except TypeError as exc:
            raise EnumerationError(
                f"Cannot read the namespace of {klass!r}", bean_type=cls
            ) from exc

        for name, attr in namespace.items():
            if name in seen:
                continue
            seen.add(name)
            if inspect.isfunction(attr):
                yield name, attr


def _parameters_after_self(cls: type, name: str,
                           func: Callable[..., Any]) -> Optional[List[inspect.Parameter]]:
    """Parameters following ``self``, or None if ``func`` cannot be bound to an instance."""
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError) as exc:
        raise EnumerationError(
            f"Cannot read the signature of {cls.__name__}.{name}",
            bean_type=cls, method_name=name,
        ) from exc

    parameters = list(signature.parameters.values())
    if not parameters or parameters[0].kind not in _POSITIONAL:
        return None
    return parameters[1:]


def _raw_annotations(obj: Any) -> Dict[str, Any]:
    """Annotations exactly as written; strings stay unevaluated."""
    try:
        return dict(getattr(obj, '__annotations__', None) or {})
    except NameError:
        return {}


def _resolve_mutator(cls: type, binding: MutatorBinding) -> MutatorBinding:
    parameter = _parameters_after_self(cls, binding.method_name, binding.method)[0]
    declared = _resolve_annotation(binding.method, parameter.name)
    if declared is None:
        # fall back to the annotated field backing the property
        declared = _resolve_annotation(cls, binding.property_name)
    return dataclasses.replace(binding, declared_type=declared)


def _resolve_annotation(owner: Any, name: str) -> Optional[Any]:
    """Evaluate one annotation of ``owner``; None when missing or unresolvable."""
    try:
        return get_type_hints(owner).get(name)
    except (NameError, AttributeError, TypeError, SyntaxError) as exc:
        logger.debug(f"Cannot resolve annotations of {owner.__qualname__}: {exc}")

    if inspect.isclass(owner):
        raw = {}
        for klass in reversed(inspect.getmro(owner)):
            raw.update(_raw_annotations(klass))
    else:
        raw = _raw_annotations(owner)
    declared = raw.get(name)
    return None if isinstance(declared, str) else declared
