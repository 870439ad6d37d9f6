"""Generators — derived artifacts of the SS58 registry.

Each target turns a validated registry into file contents:
- enum-table: a Python module with one enum member per network
- json-bundle: the registry as JSON plus ES module and CommonJS wrappers
- type-declaration: ``index.d.ts`` describing the entry shape
- package-manifest-patch: the published ``package.json``
"""

from ss58_registry.generators.generator import generate
from ss58_registry.generators.targets import OutputFile, ReservedPolicy, TargetKind, TargetSpec

__all__ = ["OutputFile", "ReservedPolicy", "TargetKind", "TargetSpec", "generate"]
