"""Shipping method names accepted from external input, mapped to strategy kinds."""

# Canonical kind values map to themselves; the rest are legacy names from the
# storefront payload ("fast", "store") and the old strategy class names.
METHOD_ALIASES = {
    "economy": "economy",
    "economy-saver": "economy",
    "economy_saver": "economy",

    "expedited": "expedited",
    "fast": "expedited",
    "hyper-speed": "expedited",
    "hyper_speed": "expedited",

    "store-pickup": "store-pickup",
    "store_pickup": "store-pickup",
    "store": "store-pickup",
}


def normalize_method(value: str) -> str | None:
    """Map an external method name to a canonical kind value, or None if unknown."""
    return METHOD_ALIASES.get(value.strip().lower())
