"""
Package names whose descriptions cannot be parsed.

Some packages never mention their crate name in a recognizable phrase, or
don't mention it at all. They are mapped by hand here; hopefully the
descriptions become more regular over time and entries can be dropped.
"""

from types import MappingProxyType

STATIC_MAPPINGS = MappingProxyType({
    'librust-aho-corasick-dev': 'aho-corasick',
    'librust-capstone-dev': 'capstone',
    'librust-darling-core-0.14-dev': 'darling_core',
    'librust-darling-core-dev': 'darling_core',
    'librust-darling-macro-dev': 'darling_macro',
    'librust-darling-macro-0.14-dev': 'darling_macro',
    'librust-notify-debouncer-mini-dev': 'notify-debouncer-mini',
    'librust-zstd-sys-dev': 'zstd-sys',
})
