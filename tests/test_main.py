"""Tests for the checker entry point and logging setup."""

import logging
from collections.abc import Iterator
from io import StringIO
from pathlib import Path

import pytest

from cymbol.args import Args
from cymbol.cli import EXIT_INVALID, EXIT_OK, EXIT_UNREADABLE
from cymbol.config import CONFIG_DIR, CONFIG_FILE
from cymbol.log import init_logging
from cymbol.main import main, run

DUPLICATE_SOURCE = "int x;\nint x;\n"


@pytest.fixture
def work_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty directory with an empty home directory."""
    work = tmp_path / "work"
    work.mkdir()
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.chdir(work)
    monkeypatch.setenv("HOME", str(home))
    return work


@pytest.fixture
def root_logger() -> Iterator[logging.Logger]:
    """Root logger, restored after the test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


def _run(args: Args) -> int | str | None:
    with pytest.raises(SystemExit) as exc_info:
        run(args)
    return exc_info.value.code


# =============================================================================
# run Tests
# =============================================================================


@pytest.mark.usefixtures("root_logger")
class TestRun:
    """Test run() from parsed arguments to exit code."""

    def test_version(self, work_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """--version prints the version and exits 0 without checking."""
        assert _run(Args(version=True, file=work_dir / "missing.cymbol")) == 0
        assert capsys.readouterr().out.startswith("cymbol ")

    def test_valid_file(self, work_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A valid file exits 0."""
        path = work_dir / "ok.cymbol"
        path.write_text("int f() { return 1; }\n")
        assert _run(Args(file=path)) == EXIT_OK
        assert capsys.readouterr().out == f"{path}: valid (1 function, 2 scopes)\n"

    def test_missing_file(self, work_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """An unreadable file exits 2."""
        assert _run(Args(file=work_dir / "missing.cymbol")) == EXIT_UNREADABLE
        assert "cannot read" in capsys.readouterr().out

    def test_reads_stdin_without_file(
        self,
        work_dir: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Without a file argument the program is read from standard input."""
        monkeypatch.setattr("sys.stdin", StringIO("void f() { g(); }\n"))
        assert _run(Args()) == EXIT_INVALID
        output = capsys.readouterr().out
        assert output.startswith("error[E0002]: no such function: g\n")
        assert output.endswith("\n<stdin>: 1 error\n")

    def test_redefinition_flag(self, work_dir: Path) -> None:
        """--redefinition is passed to the analyzer."""
        path = work_dir / "dup.cymbol"
        path.write_text(DUPLICATE_SOURCE)
        assert _run(Args(file=path)) == EXIT_INVALID
        assert _run(Args(file=path, redefinition="overwrite")) == EXIT_OK

    def test_output_format_flag(
        self,
        work_dir: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """--output-format json switches to JSON output."""
        path = work_dir / "dup.cymbol"
        path.write_text(DUPLICATE_SOURCE)
        assert _run(Args(file=path, output_format="json")) == EXIT_INVALID
        output = capsys.readouterr().out
        assert output.startswith("{\n")
        assert '"code": "E0003"' in output

    def test_local_config_and_cli_priority(self, work_dir: Path) -> None:
        """The local config applies unless the command line overrides it."""
        config_dir = work_dir / CONFIG_DIR
        config_dir.mkdir()
        (config_dir / CONFIG_FILE).write_text('redefinition = "overwrite"\n')
        path = work_dir / "dup.cymbol"
        path.write_text(DUPLICATE_SOURCE)
        assert _run(Args(file=path)) == EXIT_OK
        assert _run(Args(file=path, redefinition="error")) == EXIT_INVALID

    def test_scopes_and_dot(self, work_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """--scopes and --dot add the scope tree and the call graph."""
        path = work_dir / "calls.cymbol"
        path.write_text("void f() { f(); }\n")
        assert _run(Args(file=path, scopes=True, dot=True)) == EXIT_OK
        output = capsys.readouterr().out
        assert "globals" in output
        assert "  f -> f;\n}\n" in output


@pytest.mark.usefixtures("root_logger")
class TestMain:
    """Test main() parsing the command line."""

    def test_command_line(
        self,
        work_dir: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Flags on the command line reach the checker."""
        path = work_dir / "dup.cymbol"
        path.write_text(DUPLICATE_SOURCE)
        monkeypatch.setattr(
            "sys.argv",
            ["cymbol", str(path), "--redefinition", "overwrite", "--output-format", "json"],
        )
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == EXIT_OK
        assert '"valid": true' in capsys.readouterr().out


# =============================================================================
# init_logging Tests
# =============================================================================


class TestInitLogging:
    """Test logging setup."""

    def test_quiet_adds_no_console_handler(
        self,
        work_dir: Path,
        root_logger: logging.Logger,
    ) -> None:
        """Without --verbose no debug handler is attached."""
        before = list(root_logger.handlers)
        init_logging(Args())
        added = [h for h in root_logger.handlers if h not in before]
        assert not any(h.level == logging.DEBUG for h in added)

    def test_verbose_adds_debug_handler(
        self,
        work_dir: Path,
        root_logger: logging.Logger,
    ) -> None:
        """--verbose attaches a DEBUG stream handler to the root logger."""
        before = list(root_logger.handlers)
        init_logging(Args(verbose=True))
        added = [h for h in root_logger.handlers if h not in before]
        assert any(
            isinstance(h, logging.StreamHandler) and h.level == logging.DEBUG for h in added
        )
        assert root_logger.level == logging.DEBUG

    def test_third_party_handlers_cleared(
        self,
        work_dir: Path,
        root_logger: logging.Logger,
    ) -> None:
        """Handlers on other libraries' loggers are removed."""
        other = logging.getLogger("lark.example")
        other.addHandler(logging.NullHandler())
        init_logging(Args())
        assert other.handlers == []
