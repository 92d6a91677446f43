"""
Core value types and exceptions
"""

from .exceptions import BaseCoreException, InvalidArgumentError
from .result import Result

__all__ = [
    'BaseCoreException',
    'InvalidArgumentError',
    'Result',
]
