from __future__ import annotations


class Ss58RegistryError(Exception):
    """Base class for all registry tooling errors."""


class MalformedRegistryError(Ss58RegistryError, ValueError):
    """Raised when the registry document cannot be read or does not have the entry shape."""

    def __init__(self, path: str, issues: list[str]):
        self.path = path
        self.issues = list(issues)
        details = "; ".join(self.issues)
        super().__init__(f"malformed registry {path}: {details}")


class ValidationError(Ss58RegistryError, ValueError):
    """
    Raised when one or more cross-record invariants are violated.

    Carries every violation found, never just the first one.
    """

    def __init__(self, violations: list):
        self.violations = list(violations)
        super().__init__(f"registry failed validation with {len(self.violations)} violation(s)")


class UnknownTargetError(Ss58RegistryError, ValueError):
    """Raised when a requested artifact kind is not supported by this generator."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"unknown target '{kind}'")


class MissingTargetInputError(Ss58RegistryError, ValueError):
    """Raised when a target needs an input (manifest, template) it was not given."""


class ConfigError(Ss58RegistryError, ValueError):
    """Raised when the build configuration or one of its input files is invalid."""


class UnknownTokenError(Ss58RegistryError, LookupError):
    """Raised when a token symbol is not carried by the requested network."""
