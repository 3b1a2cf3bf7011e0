"""
Domain models and value objects.

Contains the Hyperoperation expression model.
"""

from hyperoperation.domain.expression import Hyperoperation

__all__ = [
    "Hyperoperation",
]
