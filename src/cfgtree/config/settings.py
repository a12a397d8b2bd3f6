"""Where: src/cfgtree/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - Config defaults remain compatible with data already in existing stores.
Trade-offs: - Validation is limited to simple boundary checks.
"""

from __future__ import annotations

from cfgtree.config.config import (
    CHILD_SEGMENT_DEFAULT,
    RESERVED_PREFIX_DEFAULT,
    Config,
)

app_config = Config.load()

# Storage layout -------------------------------------------------------------

# Properties whose names start with this prefix are store metadata and are
# never removed when a configuration node is rewritten.
_reserved_prefix = app_config.reserved_prefix.strip()
RESERVED_PROPERTY_PREFIX: str = _reserved_prefix or RESERVED_PREFIX_DEFAULT

# Node beneath the configuration root holding every configuration. An empty
# bucket stores configurations directly beneath the root.
CONFIG_BUCKET_NAME: str = app_config.config_bucket.strip("/ ")

# Context nodes carrying this property store their configuration under the
# referenced path instead of beneath themselves.
CONFIG_REF_PROPERTY: str = f"{RESERVED_PROPERTY_PREFIX}configRef"

# Type hint handed to the store when intermediate nodes are created.
DEFAULT_RESOURCE_TYPE: str = "unstructured"


# Naming ---------------------------------------------------------------------

_child_segment = app_config.child_segment.strip("/ ")
CHILD_SEGMENT_NAME: str = _child_segment or CHILD_SEGMENT_DEFAULT

NAMING_STRATEGY: str = app_config.naming_strategy.strip().lower()
REDIRECT_COLLECTION_PARENT: bool = bool(app_config.redirect_collection_parent)


__all__ = [
    "CHILD_SEGMENT_NAME",
    "CONFIG_BUCKET_NAME",
    "CONFIG_REF_PROPERTY",
    "DEFAULT_RESOURCE_TYPE",
    "NAMING_STRATEGY",
    "REDIRECT_COLLECTION_PARENT",
    "RESERVED_PROPERTY_PREFIX",
]
