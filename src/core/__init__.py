"""
Core domain models, time arithmetic and contracts.

This module contains the foundational building blocks the date adapter
is built on: calendar value types, host time-value arithmetic and the
JSON Schema contract of the serialized date.
"""
