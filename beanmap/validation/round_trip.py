"""Check that a bean survives a to_map/from_map round trip."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from beanmap.converters import MapBeanConverter
from beanmap.errors import ConversionError

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Result of round-tripping a bean through its property map."""
    success: bool
    score: float
    source_map: Dict[str, Any] = field(default_factory=dict)
    rebuilt_map: Dict[str, Any] = field(default_factory=dict)
    differences: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)


class RoundTripValidator:
    """Validate that writable properties are preserved by conversion."""

    def __init__(self, converter: Optional[MapBeanConverter] = None):
        self.converter = converter or MapBeanConverter()

    def validate(self, bean: Any) -> ValidationResult:
        """
        Project ``bean``, rebuild a fresh instance from the map and compare.

        Parameters
        ----------
        bean : Any
            Bean to check; its class must have a zero-argument constructor

        Returns
        -------
        ValidationResult
            Differences for writable properties that changed, warnings for
            read-only properties, errors for conversions that failed. A None
            bean is reported as an error rather than raised.
        """
        bean_type = type(bean)
        logger.info(f"Validating round trip of {bean_type.__name__}")

        try:
            source_map = self.converter.to_map(bean)
            rebuilt = self.converter.from_map(bean_type, source_map)
            rebuilt_map = self.converter.to_map(rebuilt)
        except (ConversionError, TypeError) as exc:
            logger.error(f"Round trip of {bean_type.__name__} failed: {exc}")
            return ValidationResult(success=False, score=0.0, errors=[str(exc)])

        return self._compare_maps(bean_type, source_map, rebuilt_map)

    def _compare_maps(self, bean_type: type,
                      source_map: Dict[str, Any],
                      rebuilt_map: Dict[str, Any]) -> ValidationResult:
        """Compare the original and rebuilt projections property by property."""
        writable = {
            binding.property_name
            for binding in self.converter.enumerator.enumerate_setters(bean_type)
        }
        differences = []
        warnings = []
        checked = 0
        matches = 0

        for name, value in source_map.items():
            if name not in writable:
                warnings.append(f"Property {name} is read-only and was not restored")
                continue

            checked += 1
            if name not in rebuilt_map:
                differences.append(f"Property {name} missing after rebuild")
            elif rebuilt_map[name] != value:
                differences.append(f"Property {name}: {value!r} vs {rebuilt_map[name]!r}")
            else:
                matches += 1

        score = matches / checked if checked else 1.0

        return ValidationResult(
            success=not differences,
            score=score,
            source_map=source_map,
            rebuilt_map=rebuilt_map,
            differences=differences,
            warnings=warnings,
        )
