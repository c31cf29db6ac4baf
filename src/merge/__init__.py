"""
Merge pipeline: supplier workbooks in, Shopee upload sheet out.
"""

from .pipeline import SOURCE_LABELS, CatalogMergePipeline, build_name

__all__ = ['CatalogMergePipeline', 'SOURCE_LABELS', 'build_name']
