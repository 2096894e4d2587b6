"""
Validation engine: rule contracts, field pipelines, sessions and configuration.
"""

from .builder import SessionState, Validator, ValidatorBuilder, create
from .config import ValidatorConfig
from .field import FieldValidator
from .rules import SanitizerRule, ValidatorRule

__all__ = [
    'SessionState',
    'Validator',
    'ValidatorBuilder',
    'create',
    'ValidatorConfig',
    'FieldValidator',
    'SanitizerRule',
    'ValidatorRule',
]
