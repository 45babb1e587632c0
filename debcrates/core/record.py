"""Parsed package records and their display order."""

from dataclasses import dataclass, replace
from typing import Dict, Optional, Tuple

from .version import Version


@dataclass(frozen=True)
class Record:
    """One librust package: either a crate itself or a feature metapackage.

    Attributes:
        component_name: Crate name, case preserved
        version: Crate version the package carries
        package_id: Debian package name the record was parsed from
        feature_name: Feature name for metapackages, None for the crate itself
        installed: Installed status (only set through with_installed())
    """
    component_name: str
    version: Version
    package_id: str
    feature_name: Optional[str] = None
    installed: bool = False

    @property
    def is_feature(self) -> bool:
        return self.feature_name is not None

    def sort_key(self) -> Tuple:
        """Return the display sort key.

        Crate name (case-insensitive), then version, then the crate itself
        before its feature metapackages, then feature name (case-sensitive).
        """
        return (
            self.component_name.lower(),
            self.version,
            self.is_feature,
            self.feature_name or '',
        )

    @property
    def title(self) -> str:
        """Text of the first output column."""
        if self.is_feature:
            return f'  deps for feat "{self.feature_name}"'
        return f"{self.component_name} {self.version}"

    @property
    def status(self) -> str:
        """Text of the status column."""
        return "installed" if self.installed else "--"

    def with_installed(self, status: Dict[str, bool]) -> 'Record':
        """Return a copy carrying the installed flag found in status."""
        installed = status.get(self.package_id, False)
        if installed == self.installed:
            return self
        return replace(self, installed=installed)
