"""
Collection pipeline: index text -> sorted records with installed status.
"""

import logging
from typing import Iterable, Iterator, List, Mapping, Optional

from .config import FAMILY_MARKER, INSTALLED_CODE, get_config
from .installed import mark_installed
from .mappings import STATIC_MAPPINGS
from .parser import parse_block
from .record import Record
from .sources import query_index, query_installed

logger = logging.getLogger(__name__)

PACKAGE_DELIMITER = "Package: "


def split_blocks(text: str) -> List[str]:
    """Split index output into one paragraph per package.

    Every paragraph starts with "Package: "; whatever precedes the first
    one is discarded. Paragraphs are stripped and empty ones skipped.
    """
    blocks = []
    for segment in text.split(PACKAGE_DELIMITER)[1:]:
        segment = segment.strip()
        if segment:
            blocks.append(segment)
    return blocks


def parse_blocks(blocks: Iterable[str],
                 mappings: Mapping[str, str] = STATIC_MAPPINGS) -> Iterator[Record]:
    """Yield a Record for every paragraph that can be parsed."""
    for block in blocks:
        record = parse_block(block, mappings)
        if record is not None:
            yield record


def filter_by_name(records: Iterable[Record], term: Optional[str]) -> List[Record]:
    """Keep records whose crate name contains term (case-sensitive).

    No term (None or empty) keeps everything.
    """
    if not term:
        return list(records)
    return [r for r in records if term in r.component_name]


def sort_records(records: Iterable[Record]) -> List[Record]:
    """Return records in display order (see Record.sort_key())."""
    return sorted(records, key=Record.sort_key)


def collect(index_text: str, listing_text: str, search_term: Optional[str] = None,
            mappings: Mapping[str, str] = STATIC_MAPPINGS,
            family_marker: str = FAMILY_MARKER,
            installed_code: str = INSTALLED_CODE) -> List[Record]:
    """Turn raw tool outputs into the final list of records.

    Args:
        index_text: `apt-cache show` output
        listing_text: `dpkg -l` output
        search_term: Optional substring filter on crate names
        mappings: Package name -> crate name for irregular descriptions
        family_marker: Listing lines without it are ignored
        installed_code: State prefix of installed listing lines

    Returns:
        Sorted list of records with installed status
    """
    blocks = split_blocks(index_text)
    records = list(parse_blocks(blocks, mappings))
    logger.debug(f"Parsed {len(records)} records from {len(blocks)} paragraphs")

    records = filter_by_name(records, search_term)
    if search_term:
        logger.debug(f"{len(records)} records match {search_term!r}")

    records = mark_installed(records, listing_text, family_marker, installed_code)
    return sort_records(records)


def inventory(search_term: Optional[str] = None, config: Optional[dict] = None) -> List[Record]:
    """Query the system and return the sorted records.

    Raises:
        ToolError: if either external tool cannot be launched
    """
    config = config or get_config()
    index_text = query_index(config)
    listing_text = query_installed(config)
    return collect(
        index_text,
        listing_text,
        search_term=search_term,
        family_marker=config['family_marker'],
        installed_code=config['installed_code'],
    )
