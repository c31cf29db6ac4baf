"""
Data models for the catalogue merge.

This module contains pure data classes with no business logic.
"""

from .product import LookupTables, MergeSummary, OutputRow, VariantColor

__all__ = ['VariantColor', 'OutputRow', 'LookupTables', 'MergeSummary']
