"""
Validation rule library.
"""

from .builtin import Validators
from .cross import CrossValidators

__all__ = ['Validators', 'CrossValidators']
