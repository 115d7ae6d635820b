"""
Mappers between Supabase rows and domain entities.
"""

from .transaction_mapper import TransactionMapper

__all__ = ["TransactionMapper"]
