"""Pytest configuration and fixtures."""

import os
import tempfile

import pytest

from gopher_shell.core import CommandInterpreter, MenuRenderer, Navigator, Session
from gopher_shell.errors import GopherConnectionError
from gopher_shell.interfaces import Downloader, LineReader, Pager, ProcessLauncher


ROOT_MENU = (
    "iWelcome to the test hole\t\terror.host\t1\r\n"
    "1Documents\t/docs\texample.org\t70\r\n"
    "0About\t/about.txt\texample.org\t70\r\n"
    "9Archive\t/files/archive.tgz\texample.org\t70\r\n"
    "7Search\t/search\texample.org\t70\r\n"
    "hHomepage\tURL:http://example.org\texample.org\t70\r\n"
    ".\r\n"
).encode()

DOCS_MENU = (
    "1Back to root\t/\texample.org\t70\r\n"
    "0Readme\t/docs/readme.txt\texample.org\t70\r\n"
    ".\r\n"
).encode()

SEARCH_RESULTS = (
    "0Result one\t/r/1\texample.org\t70\r\n"
    ".\r\n"
).encode()


class FakeDownloader(Downloader):
    """Serves canned responses keyed by (host, port, path, query)."""

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.calls = []
        self.temp_files = []

    def add(self, path, body, host="example.org", port="70", query=None):
        self.responses[(host, port, path, query)] = body

    def download(self, selector, query=None):
        self.calls.append((selector.host, selector.port, selector.path, query))
        key = (selector.host, selector.port, selector.path, query)
        if key not in self.responses:
            raise GopherConnectionError(f"cannot connect to `{selector.host}`:`{selector.port}`")
        return self.responses[key]

    def download_to_temp(self, selector):
        data = self.download(selector)
        fd, filename = tempfile.mkstemp(prefix="gopher_shell_test.")
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        self.temp_files.append(filename)
        return filename


class ScriptedReader(LineReader):
    """Returns prepared answers, then end of input."""

    def __init__(self, answers=None):
        self.answers = list(answers or [])
        self.prompts = []

    def read_line(self, prompt=""):
        self.prompts.append(prompt)
        if not self.answers:
            return None
        return self.answers.pop(0)


class RecordingPager(Pager):
    """Collects everything shown to the user."""

    def __init__(self):
        self.echoed = []
        self.paged = []

    def echo(self, text):
        self.echoed.append(text)

    def page(self, text):
        self.paged.append(text)

    @property
    def output(self):
        return "\n".join(self.echoed + self.paged)


class RecordingLauncher(ProcessLauncher):
    """Records commands instead of running them."""

    def __init__(self, result=True, on_run=None):
        self.commands = []
        self.result = result
        self.on_run = on_run

    def run(self, command):
        self.commands.append(command)
        if self.on_run:
            self.on_run(command)
        return self.result


@pytest.fixture
def downloader():
    """A downloader serving a small example hole."""
    fake = FakeDownloader()
    fake.add("", ROOT_MENU)
    fake.add("/", ROOT_MENU)
    fake.add("/docs", DOCS_MENU)
    fake.add("/about.txt", b"About this hole\r\nSecond line\r\n.\r\n")
    fake.add("/docs/readme.txt", b"Read me\n")
    fake.add("/files/archive.tgz", b"\x1f\x8b\x08binary")
    fake.add("/search", SEARCH_RESULTS, query="gopher")
    return fake


@pytest.fixture
def reader():
    return ScriptedReader()


@pytest.fixture
def pager():
    return RecordingPager()


@pytest.fixture
def launcher():
    return RecordingLauncher()


@pytest.fixture
def session(tmp_path):
    """A fresh session saving downloads to a temporary directory."""
    return Session.create(download_directory=str(tmp_path))


@pytest.fixture
def navigator(session, downloader, reader, pager, launcher):
    return Navigator(session, downloader, reader, pager, launcher, MenuRenderer())


@pytest.fixture
def errors():
    """List collecting errors reported by the interpreter."""
    return []


@pytest.fixture
def interpreter(session, navigator, pager, errors):
    return CommandInterpreter(session, navigator, pager, on_error=errors.append)
