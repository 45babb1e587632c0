"""
Parser for librust package paragraphs from the apt index.

Each paragraph of `apt-cache show` output describes one Debian package.
There is no structured field naming the crate, so the crate (and, for
metapackages, the feature) is recovered from the free-text description.
The descriptions come in several phrasings, matched here from the most
specific to the most generic:

    This package contains the source for the Rust foo crate, packaged ...
    Source code for Debianized Rust crate "foo"
    This metapackage enables feature "bar" for the Rust foo crate, ...
    Rust crate foo - ...

Packages matching none of these fall back to STATIC_MAPPINGS.
"""

import re
from typing import Callable, List, Mapping, Optional, Tuple

from .mappings import STATIC_MAPPINGS
from .record import Record
from .version import Version, VersionError

# (component_name, feature_name)
Match = Tuple[str, Optional[str]]

VERSION_PATTERN = re.compile(r'Version: ([0-9.]*)')

SOURCE_MARKER = 'contains the source for the Rust '
DEBIANIZED_MARKER = 'code for Debianized Rust crate "'
FEATURE_CRATE_MARKER = 'for the Rust '
FEATURE_MARKER = '- feature "'
CRATE_MARKER = 'Rust crate '


class ParseError(ValueError):
    """Raised when a package paragraph cannot be turned into a Record."""


def normalize_description(block: str) -> str:
    """Join a paragraph into one logical line.

    Words broken as "-\\n " by line wrapping are rejoined, then the
    remaining line breaks are dropped (continuation lines keep their
    leading space, so words stay separated).
    """
    return block.replace('-\n ', '-').replace('\n', '')


def extract_package_id(block: str) -> str:
    """Return the package name, i.e. the first token of the paragraph."""
    tokens = block.split(None, 1)
    if not tokens:
        raise ParseError("empty paragraph")
    return tokens[0]


def extract_version(block: str) -> Version:
    """Return the crate version from the "Version: " field.

    Only the leading run of digits and dots is used, so "1.2.3-1" and
    "1.2.3~beta1-2" both give 1.2.3.
    """
    match = VERSION_PATTERN.search(block)
    if not match:
        raise ParseError("no Version field")
    try:
        return Version.parse(match.group(1))
    except VersionError as e:
        raise ParseError(str(e)) from e


def _after(text: str, marker: str) -> Optional[str]:
    """Return the text following the first occurrence of marker, or None."""
    _, found, rest = text.partition(marker)
    return rest if found else None


def _first_word(text: str) -> str:
    return text.split(' ', 1)[0]


def _quoted(text: str) -> str:
    return text.split('"', 1)[0]


def match_source_package(text: str) -> Optional[Match]:
    """Match "... contains the source for the Rust <crate> crate ..."."""
    rest = _after(text, SOURCE_MARKER)
    if rest is None:
        return None
    return _first_word(rest), None


def match_debianized_crate(text: str) -> Optional[Match]:
    """Match '... code for Debianized Rust crate "<crate>" ...'."""
    rest = _after(text, DEBIANIZED_MARKER)
    if rest is None:
        return None
    return _quoted(rest), None


def match_feature_metapackage(text: str) -> Optional[Match]:
    """Match '... feature "<feature>" for the Rust <crate> crate ...'.

    This phrasing is only used by feature metapackages, so a missing
    feature name is an error rather than a non-match.
    """
    rest = _after(text, FEATURE_CRATE_MARKER)
    if rest is None:
        return None
    crate = _first_word(rest.strip())

    feature_rest = _after(text, FEATURE_MARKER)
    if feature_rest is None:
        raise ParseError(f"metapackage of {crate!r} without a feature name")
    return crate, _quoted(feature_rest)


def match_rust_crate(text: str) -> Optional[Match]:
    """Match "Rust crate <crate> ..."."""
    rest = _after(text, CRATE_MARKER)
    if rest is None:
        return None
    return _first_word(rest), None


# Tried in order; earlier phrasings contain substrings of the later ones
MATCHERS: List[Callable[[str], Optional[Match]]] = [
    match_source_package,
    match_debianized_crate,
    match_feature_metapackage,
    match_rust_crate,
]


def match_description(text: str, package_id: str,
                      mappings: Mapping[str, str] = STATIC_MAPPINGS) -> Match:
    """Find the crate and feature named by a normalized description.

    Args:
        text: Normalized paragraph (see normalize_description())
        package_id: Package name, used for the static mapping fallback
        mappings: Package name -> crate name for irregular descriptions

    Returns:
        Tuple of (component_name, feature_name)

    Raises:
        ParseError: a matcher recognized its phrasing but found no usable
            name, or nothing matched and package_id is not mapped
    """
    for matcher in MATCHERS:
        result = matcher(text)
        if result is not None:
            return result

    crate = mappings.get(package_id)
    if crate is None:
        raise ParseError(f"no crate name found for {package_id}")
    return crate, None


def parse_record(block: str, mappings: Mapping[str, str] = STATIC_MAPPINGS) -> Record:
    """Parse one package paragraph into a Record.

    Args:
        block: Paragraph text, starting with the package name
        mappings: Package name -> crate name for irregular descriptions

    Returns:
        Record with installed=False

    Raises:
        ParseError: if the paragraph cannot be parsed
    """
    package_id = extract_package_id(block)
    version = extract_version(block)
    component, feature = match_description(normalize_description(block), package_id, mappings)

    if not component:
        raise ParseError(f"empty crate name for {package_id}")
    if feature is not None and not feature:
        raise ParseError(f"empty feature name for {package_id}")

    return Record(
        component_name=component,
        version=version,
        package_id=package_id,
        feature_name=feature,
    )


def parse_block(block: str, mappings: Mapping[str, str] = STATIC_MAPPINGS) -> Optional[Record]:
    """Parse one package paragraph, returning None if it cannot be parsed.

    Most paragraphs in the index that fail here are simply not crate
    packages, so failures are not reported.
    """
    try:
        return parse_record(block, mappings)
    except ParseError:
        return None
