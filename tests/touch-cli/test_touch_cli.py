"""CLI integration tests for the touch command."""

from datetime import date

import pytest
from click.testing import CliRunner

from headertouch import __version__
from headertouch.cli import main

CONFIG = """\
SET author = "Alice"
<type .all>
<file>
<type .py>
<prepend>
<date>
<append>
author: <author>
<raw>
import sys
"\\n"
def main():
    pass
<type .c>
<raw>
int main(void) { return 0; }
"""


@pytest.fixture
def cli(tmp_path, monkeypatch):
    """CliRunner rooted at tmp_path."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TOUCH_CONFIG", raising=False)
    return CliRunner()


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "touch.conf"
    path.write_text(CONFIG, encoding="utf-8")
    return path


def _invoke(runner, *args, **kwargs):
    return runner.invoke(main, list(args), **kwargs)


class TestInformational:

    def test_version(self, cli):
        result = _invoke(cli, "--version")

        assert result.exit_code == 0
        assert result.output == f"touch {__version__}\n"

    def test_help_shows_usage_and_config_path(self, cli, config_file):
        result = _invoke(cli, "--help", "--config", str(config_file))

        assert result.exit_code == 0
        assert result.output.startswith("Usage: touch FILE\n")
        assert str(config_file) in result.output

    def test_missing_filename(self, cli):
        result = _invoke(cli)

        assert result.exit_code == 1
        assert "Error: No file name provided" in result.output
        assert "Usage: touch FILE" in result.output


class TestCreateFile:

    def test_python_file_gets_header_and_raw_code(self, tmp_path, cli, config_file):
        result = _invoke(cli, "--config", str(config_file), "main.py")

        assert result.exit_code == 0, result.output
        today = date.today().strftime("%Y-%m-%d")
        assert (tmp_path / "main.py").read_text(encoding="utf-8") == (
            f"# DATE: {today}\n"
            "# FILE: main.py\n"
            "# author: Alice\n"
            "\n"
            "import sys\n"
            "\n"
            "def main():\n"
            "pass\n"
        )

    def test_raw_code_of_other_types_is_not_used(self, tmp_path, cli, config_file):
        result = _invoke(cli, "--config", str(config_file), "lib.rs")

        assert result.exit_code == 0
        assert (tmp_path / "lib.rs").read_text(encoding="utf-8") == "// FILE: lib.rs\n"

    def test_config_from_environment(self, tmp_path, cli, config_file):
        result = _invoke(cli, "x.sh", env={"TOUCH_CONFIG": str(config_file)})

        assert result.exit_code == 0
        assert (tmp_path / "x.sh").read_text(encoding="utf-8") == "# FILE: x.sh\n"

    def test_missing_config_creates_empty_file(self, tmp_path, cli):
        missing = tmp_path / "none.conf"

        result = _invoke(cli, "--config", str(missing), "empty.py")

        assert result.exit_code == 0
        assert f"Error: Could not open configuration file {missing}" in result.output
        assert (tmp_path / "empty.py").read_text(encoding="utf-8") == ""

    def test_config_errors_are_reported_but_file_is_written(self, tmp_path, cli):
        conf = tmp_path / "bad.conf"
        conf.write_text("SET nothing\nstray\n<type .txt>\nok\n", encoding="utf-8")

        result = _invoke(cli, "--config", str(conf), "notes.txt")

        assert result.exit_code == 0
        assert "Error: Invalid SET command syntax: SET nothing" in result.output
        assert "Error: Option stray is not inside a type block" in result.output
        assert (tmp_path / "notes.txt").read_text(encoding="utf-8") == "// ok\n"

    def test_uncreatable_target_fails(self, tmp_path, cli, config_file):
        result = _invoke(cli, "--config", str(config_file), "no/such/dir/a.py")

        assert result.exit_code == 1
        assert "Error: Could not create file no/such/dir/a.py" in result.output

    def test_debug_traces_lines(self, cli, config_file):
        result = _invoke(cli, "--config", str(config_file), "--debug", "lib.rs")

        assert result.exit_code == 0
        assert "Created file of type .rs: lib.rs" in result.output
        assert "// FILE: lib.rs" in result.output


class TestOverwrite:

    def test_confirmed_overwrite_replaces_content(self, tmp_path, cli, config_file):
        target = tmp_path / "lib.rs"
        target.write_text("old content\n", encoding="utf-8")

        result = _invoke(cli, "--config", str(config_file), "lib.rs", input="y\noverwrite\n")

        assert result.exit_code == 0
        assert "Error: File lib.rs already exists" in result.output
        assert target.read_text(encoding="utf-8") == "// FILE: lib.rs\n"

    def test_declined_overwrite_leaves_file(self, tmp_path, cli, config_file):
        target = tmp_path / "lib.rs"
        target.write_text("old content\n", encoding="utf-8")

        result = _invoke(cli, "--config", str(config_file), "lib.rs", input="n\n")

        assert result.exit_code == 1
        assert "Aborting file creation..." in result.output
        assert target.read_text(encoding="utf-8") == "old content\n"

    def test_wrong_phrase_leaves_file(self, tmp_path, cli, config_file):
        target = tmp_path / "lib.rs"
        target.write_text("old content\n", encoding="utf-8")

        result = _invoke(cli, "--config", str(config_file), "lib.rs", input="y\nplease\n")

        assert result.exit_code == 1
        assert target.read_text(encoding="utf-8") == "old content\n"


class TestExtraArguments:

    def test_only_first_file_is_created(self, tmp_path, cli, config_file):
        result = _invoke(cli, "--config", str(config_file), "a.rs", "b.rs")

        assert result.exit_code == 0
        assert (tmp_path / "a.rs").read_text(encoding="utf-8") == "// FILE: a.rs\n"
        assert not (tmp_path / "b.rs").exists()

    def test_dash_prefixed_name_is_a_file(self, tmp_path, cli, config_file):
        result = _invoke(cli, "--config", str(config_file), "-notes.txt")

        assert result.exit_code == 0
        assert (tmp_path / "-notes.txt").read_text(encoding="utf-8") == "// FILE: -notes.txt\n"
