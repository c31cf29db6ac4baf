"""
Shopee Catalogue Merge Tool

Modules:
    models      - Data models (OutputRow, VariantColor, LookupTables, MergeSummary)
    common      - Shared utilities (config loader, logging, errors, constants)
    sources     - Supplier workbook reader, column layouts, lookup extractors
    shopee      - Shopee mass-upload sheet export
    merge       - The merge pipeline tying sources to the export
"""
