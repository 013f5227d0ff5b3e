"""Round-trip validation of bean conversions."""

from .round_trip import RoundTripValidator, ValidationResult

__all__ = ['RoundTripValidator', 'ValidationResult']
