"""
Configuration Loader

Loads YAML configuration files, chiefly the source manifest that lists
which supplier workbooks feed a merge run and where the output goes.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST = 'sources.yaml'
DEFAULT_OUTPUT = 'output.xlsx'

# Manifest keys, in the order the sources are loaded
SOURCE_KINDS = (
    'exclude_product_ids',
    'sales_info',
    'media_info',
    'basic_info',
    'price_info',
)


@dataclass
class SourceManifest:
    """Input workbooks per source kind plus the output filename."""
    exclude_product_ids: List[Path] = field(default_factory=list)
    sales_info: List[Path] = field(default_factory=list)
    media_info: List[Path] = field(default_factory=list)
    basic_info: List[Path] = field(default_factory=list)
    price_info: List[Path] = field(default_factory=list)
    output: Path = Path(DEFAULT_OUTPUT)

    def paths_for(self, kind: str) -> List[Path]:
        """Return the input paths for one source kind."""
        if kind not in SOURCE_KINDS:
            raise ValueError(f"Unknown source kind: {kind}")
        return getattr(self, kind)


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try relative to this file first
    module_dir = Path(__file__).parent.parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str | Path) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of a file in the config directory, or a path to any
            existing YAML file

    Returns:
        Parsed YAML content as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_path = Path(filename)
    if not config_path.is_file():
        config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def _resolve(path: str, base_dir: Path) -> Path:
    candidate = Path(path)
    if candidate.is_absolute():
        return candidate
    return base_dir / candidate


def parse_source_manifest(config: Dict[str, Any], base_dir: Optional[Path] = None) -> SourceManifest:
    """
    Build a SourceManifest from an already-parsed config mapping.

    Args:
        config: Mapping with any of the SOURCE_KINDS keys and ``output``
        base_dir: Directory relative paths resolve against (default: cwd)

    Returns:
        SourceManifest with absolute-or-base-relative paths

    Raises:
        ValueError: On unknown keys or a source kind that is not a list
    """
    base_dir = Path(base_dir) if base_dir is not None else Path.cwd()

    unknown = set(config) - set(SOURCE_KINDS) - {'output'}
    if unknown:
        raise ValueError(f"Unknown manifest keys: {', '.join(sorted(unknown))}")

    manifest = SourceManifest(output=_resolve(config.get('output') or DEFAULT_OUTPUT, base_dir))

    for kind in SOURCE_KINDS:
        paths = config.get(kind) or []
        if isinstance(paths, str):
            paths = [paths]
        if not isinstance(paths, list):
            raise ValueError(f"Manifest entry '{kind}' must be a list of paths")
        setattr(manifest, kind, [_resolve(p, base_dir) for p in paths])

    return manifest


def load_source_manifest(
    filename: str | Path = DEFAULT_MANIFEST,
    base_dir: Optional[Path] = None,
) -> SourceManifest:
    """
    Load the source manifest.

    Args:
        filename: Manifest file name in the config directory, or a path
        base_dir: Directory relative input paths resolve against (default: cwd)

    Returns:
        SourceManifest

    Example:
        sales_info:
          - datasource/sales-info-001.xlsx
        price_info:
          - datasource/discount_nominate_1000-1.xlsx
        output: output.xlsx
    """
    manifest = parse_source_manifest(load_config(filename), base_dir)
    logger.debug(
        "Manifest %s: %s",
        filename,
        ", ".join(f"{kind}={len(manifest.paths_for(kind))}" for kind in SOURCE_KINDS),
    )
    return manifest
