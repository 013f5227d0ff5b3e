"""Converter configuration, loadable from YAML."""

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Tuple, Union

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConverterConfig:
    """Settings shared by the enumerator and the converter."""
    strict: bool = False
    cache: bool = True
    getter_prefixes: Tuple[str, ...] = field(default=('get', 'is'))
    setter_prefix: str = 'set'

    def __post_init__(self):
        if not isinstance(self.strict, bool):
            raise ValueError(f"strict must be a boolean, got {self.strict!r}")
        if not isinstance(self.cache, bool):
            raise ValueError(f"cache must be a boolean, got {self.cache!r}")
        if isinstance(self.getter_prefixes, str) or not self.getter_prefixes:
            raise ValueError("getter_prefixes must be a non-empty list of prefixes")
        for prefix in self.getter_prefixes:
            if not isinstance(prefix, str) or not prefix:
                raise ValueError(f"Invalid getter prefix: {prefix!r}")
        if not isinstance(self.setter_prefix, str) or not self.setter_prefix:
            raise ValueError(f"Invalid setter prefix: {self.setter_prefix!r}")
        # lists coming from YAML are frozen into tuples
        object.__setattr__(self, 'getter_prefixes', tuple(self.getter_prefixes))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ConverterConfig':
        """
        Build a configuration from a plain mapping.

        Parameters
        ----------
        data : Dict[str, Any]
            Option values keyed by field name; unknown keys are ignored with
            a warning

        Returns
        -------
        ConverterConfig
            Validated configuration
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"Configuration must be a mapping, got {type(data).__name__}")

        known = {f.name for f in fields(cls)}
        options = {}
        for key, value in data.items():
            if key in known:
                options[key] = value
            else:
                logger.warning(f"Ignoring unknown configuration key: {key}")
        return cls(**options)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> 'ConverterConfig':
        """Load a configuration file, optionally nested under a ``beanmap`` key."""
        with open(path, 'r') as f:
            document = yaml.safe_load(f)

        if isinstance(document, dict) and 'beanmap' in document:
            document = document['beanmap']

        logger.debug(f"Loaded converter configuration from {path}")
        return cls.from_dict(document)
