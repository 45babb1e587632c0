"""Tests for CLI"""

import pytest

from debcrates.cli import main as cli_main
from debcrates.cli.main import EXIT_OK, EXIT_TOOL_FAILURE, create_parser, main
from debcrates.core.pipeline import collect
from debcrates.core.sources import ToolError


INDEX = (
    "Package: libfoo-dev\n"
    "Version: 1.2.3-1\n"
    "Description: This package contains the source for the Rust foo crate...\n"
)


class TestParser:
    """Tests for argument parser."""

    def test_version_flag(self):
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(['--version'])

    def test_no_arguments(self):
        args = create_parser().parse_args([])
        assert args.search_term is None
        assert args.verbose is False

    def test_search_term(self):
        args = create_parser().parse_args(['serde'])
        assert args.search_term == 'serde'

    def test_global_flags(self):
        args = create_parser().parse_args(['--verbose', '--nocolor', 'foo'])
        assert args.verbose is True
        assert args.nocolor is True
        assert args.search_term == 'foo'

    def test_single_positional(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(['foo', 'bar'])


class TestMain:
    """Tests for main()."""

    def test_prints_table(self, monkeypatch, capsys):
        seen = {}

        def fake_inventory(search_term=None):
            seen['term'] = search_term
            return collect(INDEX, "")

        monkeypatch.setattr(cli_main, 'inventory', fake_inventory)
        assert main(['--nocolor']) == EXIT_OK
        assert capsys.readouterr().out == "foo 1.2.3  --         libfoo-dev\n"
        assert seen['term'] is None

    def test_passes_search_term(self, monkeypatch, capsys):
        seen = {}

        def fake_inventory(search_term=None):
            seen['term'] = search_term
            return []

        monkeypatch.setattr(cli_main, 'inventory', fake_inventory)
        assert main(['--nocolor', 'serde']) == EXIT_OK
        assert seen['term'] == 'serde'
        assert capsys.readouterr().out == ""

    def test_tool_failure(self, monkeypatch, capsys):
        def fake_inventory(search_term=None):
            raise ToolError('apt-cache', 'command not found')

        monkeypatch.setattr(cli_main, 'inventory', fake_inventory)
        assert main(['--nocolor']) == EXIT_TOOL_FAILURE
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "cannot run 'apt-cache'" in captured.err


class TestDashSearchTerm:
    """Tests for search terms that start with a dash."""

    SYS_INDEX = (
        "Package: librust-zstd-sys-dev\n"
        "Version: 2.0.9-1\n"
        "Description: Rust crate zstd-sys - Rust source code\n"
        "Package: librust-zstd-dev\n"
        "Version: 0.13.0-1\n"
        "Description: Rust crate zstd - Rust source code\n"
    )

    def test_dash_term_filters(self, monkeypatch, capsys):
        seen = {}

        def fake_inventory(search_term=None):
            seen['term'] = search_term
            return collect(self.SYS_INDEX, "", search_term)

        monkeypatch.setattr(cli_main, 'inventory', fake_inventory)
        assert main(['--nocolor', '-sys']) == EXIT_OK
        assert seen['term'] == '-sys'
        assert capsys.readouterr().out == "zstd-sys 2.0.9  --         librust-zstd-sys-dev\n"

    def test_double_dash_escape(self):
        args = cli_main.parse_args(create_parser(), ['--', '-sys'])
        assert args.search_term == '-sys'

    def test_dash_term_with_positional_rejected(self):
        with pytest.raises(SystemExit):
            cli_main.parse_args(create_parser(), ['foo', '-sys'])

    def test_two_dash_words_rejected(self):
        with pytest.raises(SystemExit):
            cli_main.parse_args(create_parser(), ['-sys', '-derive'])
