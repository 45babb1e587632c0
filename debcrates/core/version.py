"""
Crate version values.

Debian packages of Rust crates carry the upstream semver as the leading part
of the package version ("1.2.3-1", "0.14.2-2+b1"). Only the numeric
major.minor.patch triple is kept; it orders numerically so that 1.9.0 sorts
before 1.10.0.
"""

from dataclasses import dataclass

# Largest component value accepted (unsigned 32-bit)
MAX_COMPONENT = 2 ** 32 - 1


class VersionError(ValueError):
    """Raised when a version string is not a usable major.minor.patch."""


@dataclass(frozen=True, order=True)
class Version:
    """A three-part numeric version, ordered component by component."""
    major: int
    minor: int
    patch: int

    def __post_init__(self):
        for part in (self.major, self.minor, self.patch):
            if part < 0 or part > MAX_COMPONENT:
                raise VersionError(f"version component out of range: {part}")

    @classmethod
    def parse(cls, text: str) -> 'Version':
        """Parse dotted numeric text like "1.2.3".

        Components after the third are ignored ("1.2.3.4" -> 1.2.3).

        Args:
            text: Dotted version string

        Returns:
            Version instance

        Raises:
            VersionError: fewer than three components, or a component that
                is not a plain decimal number
        """
        parts = text.split('.')
        if len(parts) < 3:
            raise VersionError(f"expected major.minor.patch, got {text!r}")

        numbers = []
        for part in parts[:3]:
            # isdecimal() rejects '', '+1', '-1' and ' 1' which int() would take
            if not part.isdecimal() or not part.isascii():
                raise VersionError(f"invalid version component {part!r} in {text!r}")
            numbers.append(int(part))

        return cls(*numbers)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"
