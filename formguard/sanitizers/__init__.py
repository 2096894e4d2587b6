"""
Sanitization rule library and standalone sanitizer chains.
"""

from .builtin import Sanitizers
from .chain import Sanitizer, SanitizerBuilder

__all__ = ['Sanitizers', 'Sanitizer', 'SanitizerBuilder']
