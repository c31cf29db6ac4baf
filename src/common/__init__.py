# Common utilities
from .config_loader import (
    SOURCE_KINDS,
    SourceManifest,
    load_config,
    load_source_manifest,
    parse_source_manifest,
)
from .errors import (
    CatalogMergeError,
    FileOpenError,
    PipelineStateError,
    RowReadError,
    RowTooShortError,
    SheetNotFoundError,
)
from .log_config import setup_logging
