"""
Core Exceptions
"""

class BaseCoreException(Exception):
    """Base exception for commonlibs modules"""
    pass

class InvalidArgumentError(BaseCoreException, ValueError):
    """Raised when a required argument is missing, blank, or cannot be interpreted"""
    pass
