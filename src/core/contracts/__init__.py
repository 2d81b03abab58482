"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованных значений.
"""

from .validators import (
    JS_DATE_VALIDATOR,
    ContractValidator,
    JSDateValidator,
    SchemaLoader,
    validate_js_date,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "JSDateValidator",
    # Instances
    "JS_DATE_VALIDATOR",
    # Functions
    "validate_js_date",
]
