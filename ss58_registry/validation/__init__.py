"""Validation for the SS58 registry.

Two gates, run in order:
1. Shape — the document parses into records of the entry shape (schema walk)
2. Invariants — cross-record rules such as unique prefixes and networks
"""

REGISTRY_FORMAT_VERSION = "1.0.0"
