"""Tests for table display"""

from debcrates.cli import colors
from debcrates.cli.display import format_table, print_table
from debcrates.core.record import Record
from debcrates.core.version import Version


def make(name, version, package_id, feature=None, installed=False):
    return Record(
        component_name=name,
        version=Version.parse(version),
        package_id=package_id,
        feature_name=feature,
        installed=installed,
    )


RECORDS = [
    make("serde", "1.0.188", "librust-serde-dev", installed=True),
    make("serde", "1.0.188", "librust-serde+derive-dev", feature="derive"),
]


class TestFormatTable:
    """Tests for format_table()."""

    def test_columns(self):
        assert format_table(RECORDS) == [
            "serde 1.0.188             installed  librust-serde-dev",
            '  deps for feat "derive"  --         librust-serde+derive-dev',
        ]

    def test_single_row(self):
        record = make("foo", "1.2.3", "libfoo-dev")
        assert format_table([record]) == ["foo 1.2.3  --         libfoo-dev"]

    def test_empty(self):
        assert format_table([]) == []

    def test_colored_alignment(self):
        colors._colors_enabled = True
        try:
            lines = format_table(RECORDS, status_color=colors.status)
        finally:
            colors._colors_enabled = False
        plain = format_table(RECORDS)
        for colored_line, plain_line in zip(lines, plain):
            stripped = colored_line
            for code in colors._COLORS.values():
                stripped = stripped.replace(code, '')
            assert stripped == plain_line
        assert '\033[92minstalled\033[0m' in lines[0]

    def test_print_table(self, capsys):
        print_table(RECORDS)
        out = capsys.readouterr().out
        assert out.splitlines() == format_table(RECORDS)


class TestColors:
    """Tests for color initialization."""

    def test_nocolor(self):
        colors.init(nocolor=True)
        assert not colors.enabled()
        assert colors.status("installed") == "installed"

    def test_no_color_env(self, monkeypatch):
        monkeypatch.setenv('NO_COLOR', '1')
        colors.init()
        assert not colors.enabled()

    def test_not_a_tty(self, monkeypatch):
        monkeypatch.delenv('NO_COLOR', raising=False)

        class Pipe:
            def isatty(self):
                return False

        colors.init(stream=Pipe())
        assert not colors.enabled()

    def test_tty(self, monkeypatch):
        monkeypatch.delenv('NO_COLOR', raising=False)

        class Tty:
            def isatty(self):
                return True

        colors.init(stream=Tty())
        try:
            assert colors.enabled()
            assert colors.status("--") == "\033[2m--\033[0m"
        finally:
            colors.init(nocolor=True)
