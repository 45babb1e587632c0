"""
Installed status from the dpkg listing.

`dpkg -l` prints one line per known package, prefixed by a two-letter
state code ("ii" = installed, "rc" = removed but config files remain, ...).
"""

from typing import Dict, Iterable, List

from .config import FAMILY_MARKER, INSTALLED_CODE
from .record import Record


def installed_status(records: Iterable[Record], listing: str,
                     family_marker: str = FAMILY_MARKER,
                     installed_code: str = INSTALLED_CODE) -> Dict[str, bool]:
    """Map each record's package name to its installed status.

    A record counts as installed when its package name appears anywhere in
    an installed line of the listing. This is plain substring matching, so
    "librust-foo-dev" also matches a line for "librust-foo-dev-extra".

    Args:
        records: Parsed records
        listing: Full `dpkg -l` output
        family_marker: Lines not containing this are ignored
        installed_code: State prefix of installed lines

    Returns:
        Dict of package_id -> bool, with an entry for every record
    """
    records = list(records)
    status = {record.package_id: False for record in records}

    for line in listing.splitlines():
        if family_marker not in line:
            continue
        if not line.startswith(installed_code):
            continue
        for record in records:
            if record.package_id in line:
                status[record.package_id] = True

    return status


def mark_installed(records: Iterable[Record], listing: str,
                   family_marker: str = FAMILY_MARKER,
                   installed_code: str = INSTALLED_CODE) -> List[Record]:
    """Return the records with their installed flag set, in the same order."""
    records = list(records)
    status = installed_status(records, listing, family_marker, installed_code)
    return [record.with_installed(status) for record in records]
