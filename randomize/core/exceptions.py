"""
Custom exception classes for the randomize library.
"""

class RandomizeError(Exception):
    """Base class for exceptions in randomize."""
    pass

class TypeConstraintError(RandomizeError, TypeError):
    """Exception raised when a type (or a bound) is not a supported arithmetic type."""
    pass

class InvalidRangeError(RandomizeError, ValueError):
    """Exception raised when a range is inverted or cannot be sampled (min > max, NaN, inf)."""
    pass

class ConfigurationError(RandomizeError, ValueError):
    """Exception raised for errors in the configuration."""
    pass
