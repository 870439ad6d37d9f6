"""SS58 registry — the canonical list of SS58 address-format network prefixes.

The package provides:
- Store: load the registry document and check its shape
- Validation: cross-record invariants (unique prefixes, unique networks, ...)
- Generators: enum table, JSON bundle, type declaration, package manifest
- Build: the driver that writes every generated artifact to disk
"""

__version__ = "1.0.0"
