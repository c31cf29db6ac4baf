"""
Product data models.

Pure data classes for the merged catalogue.
No business logic - only data structure definitions.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Mapping


@dataclass
class VariantColor:
    """One purchasable colour option with its swatch image."""
    color_id: str
    image_url: str = ""


@dataclass
class OutputRow:
    """
    Merged record for one product, ready for the Shopee upload sheet.

    Built once per product from the first sales row that mentions it;
    later sales rows for the same product never touch it. One sheet row
    is emitted per entry in ``colors``.
    """
    product_id: str
    name: str
    description: str = ""
    image_urls: List[str] = field(default_factory=list)
    price: str = ""
    quantity: str = ""
    colors: List[VariantColor] = field(default_factory=list)


@dataclass(frozen=True)
class LookupTables:
    """
    ProductID-keyed tables derived from the supplier workbooks.

    Built once per run and consumed read-only by the join pass.
    """
    image_urls: Mapping[str, List[str]] = field(default_factory=dict)
    colors: Mapping[str, List[VariantColor]] = field(default_factory=dict)
    descriptions: Mapping[str, str] = field(default_factory=dict)
    prices: Mapping[str, str] = field(default_factory=dict)
    excluded: FrozenSet[str] = frozenset()

    def sizes(self) -> Dict[str, int]:
        """Entry count per table, for logging."""
        return {
            'images': len(self.image_urls),
            'colors': len(self.colors),
            'descriptions': len(self.descriptions),
            'prices': len(self.prices),
            'excluded': len(self.excluded),
        }


@dataclass
class MergeSummary:
    """Counters reported at the end of a merge run."""
    products: int = 0            # OutputRows built
    rows_written: int = 0        # Sheet rows emitted (one per colour)
    excluded: int = 0            # Distinct sales products skipped by exclusion
    duplicates: int = 0          # Sales rows ignored because the ID was seen
    colorless_products: int = 0  # Products with no colours (no sheet rows)
