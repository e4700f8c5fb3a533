"""Integration tests for GopherShell."""

import pytest

from gopher_shell.config import Config
from gopher_shell.shell import GopherShell

from conftest import ScriptedReader


class TestGopherShell:
    """Integration tests for GopherShell."""

    @pytest.fixture
    def make_shell(self, session, navigator, interpreter, pager):
        """Build a shell reading the given input lines."""

        def factory(lines, config=None):
            reader = ScriptedReader(lines)
            config = config or Config(rc_files=[])
            return GopherShell(session, navigator, interpreter, reader, pager, config), reader

        return factory

    def test_prompt_shows_location(self, make_shell, navigator):
        """The prompt shows the current history head."""
        shell, _ = make_shell([])
        assert shell.prompt() == "()> "
        shell.handle_line("open example.org/1/docs")
        assert shell.prompt() == "(example.org:70/1/docs)> "

    def test_home_opened_at_start(self, make_shell, session):
        """The configured home hole is opened at startup."""
        shell, _ = make_shell([], Config(home="gopher://example.org", rc_files=[]))
        shell.run()
        assert len(session.menu) == 6

    def test_unreachable_home_reported(self, make_shell, pager, session):
        """A failing home hole is reported and the shell continues."""
        shell, reader = make_shell(["set alive yes"], Config(home="nowhere.invalid", rc_files=[]))
        shell.run()
        assert any("cannot connect" in line for line in pager.echoed)
        assert session.variables.get("alive") == "yes"

    def test_number_shortcut_navigates(self, make_shell, session):
        """A menu number opens that item directly."""
        shell, _ = make_shell(["open example.org", "2"])
        shell.run()
        assert session.current_location().path == "/docs"

    def test_number_shortcut_error_reported(self, make_shell, pager):
        """Errors from the shortcut are shown, not raised."""
        shell, _ = make_shell(["open example.org", "6"])
        shell.run()
        assert "error: no handler for type `h`" in pager.echoed

    def test_unknown_number_is_command(self, make_shell, errors):
        """Numbers not in the menu are evaluated as commands."""
        shell, _ = make_shell(["42"])
        shell.run()
        assert "unknown command `42`" in str(errors[0])

    def test_submenu_and_back(self, make_shell, session):
        """Entering a submenu and going back restores the menu."""
        shell, _ = make_shell(["open example.org", "2", "back"])
        shell.run()
        assert session.current_location().path == ""
        assert len(session.history) == 1
        assert session.menu.find(2).name == "Documents"

    def test_quit_stops_loop(self, make_shell, session):
        """quit ends the loop before later lines."""
        shell, reader = make_shell(["quit", "set after yes"])
        shell.run()
        assert session.variables.get("after") is None
        assert reader.answers == ["set after yes"]

    def test_end_of_input_stops_loop(self, make_shell, pager):
        """The loop ends at end of input."""
        shell, reader = make_shell(["help"])
        shell.run()
        assert reader.prompts[-1] == "()> "
        assert pager.echoed[0] == GopherShell.BANNER

    def test_rc_file_loaded(self, make_shell, session, tmp_path):
        """rc files are evaluated at startup."""
        rc = tmp_path / "gopher_shell.conf"
        rc.write_text('alias b "back"\ntype g "display %f"\nbookmarks home example.org\n')
        shell, _ = make_shell([], Config(rc_files=[str(rc)]))
        shell.run()
        assert session.aliases.get("b") == "back"
        assert session.typehandlers.get("g") == "display %f"
        assert session.bookmarks.find(1).name == "home"

    def test_rc_errors_name_file(self, make_shell, errors, tmp_path):
        """Errors in rc files include the file name and line."""
        rc = tmp_path / "bad.conf"
        rc.write_text("set a 1\nnonsense\n")
        shell, _ = make_shell([])
        assert shell.load_rc_file(rc) is True
        assert str(errors[0]) == f"unknown command `nonsense` in file `{rc}` at line 2"

    def test_missing_rc_file_skipped(self, make_shell, tmp_path):
        """Missing rc files are skipped."""
        shell, _ = make_shell([])
        assert shell.load_rc_file(tmp_path / "absent.conf") is False

    def test_quit_in_rc_file(self, make_shell, tmp_path, reader):
        """quit in an rc file ends the shell before the loop."""
        rc = tmp_path / "quit.conf"
        rc.write_text("quit\n")
        shell, shell_reader = make_shell(["show"], Config(rc_files=[str(rc)]))
        shell.run()
        assert shell_reader.prompts == []
