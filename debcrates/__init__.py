"""
debcrates - Inventory of Debian-packaged Rust crates

Reads the apt package index and the dpkg status listing to show:
- which crate and version each librust-*-dev package carries
- which feature metapackages exist for that crate version
- which of them are installed
"""

__version__ = "0.1.0"
