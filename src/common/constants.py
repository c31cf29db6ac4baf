"""
Shared constants for the project.

Fixed values written into every Shopee mass-upload row. Suppliers send no
brand or parcel data, so the marketplace defaults below apply to the whole
catalogue.
"""

# Shopee brand field for unbranded goods
NO_BRAND = "No brand/DD good"

# Parcel weight (kg) and dimensions (cm), kept as text like the template
PACKAGE_WEIGHT = "0.5"
PACKAGE_LENGTH = "20"
PACKAGE_WIDTH = "25"
PACKAGE_HEIGHT = "2"

# The mass-upload template has nine product image slots
MAX_PRODUCT_IMAGES = 9
