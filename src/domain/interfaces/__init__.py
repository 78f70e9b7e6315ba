"""
Domain Interfaces (Ports)
"""

from .repositories import ContractRepository

__all__ = [
    "ContractRepository",
]
