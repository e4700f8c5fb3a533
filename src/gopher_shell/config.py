"""Configuration handling for the Gopher shell."""

from dataclasses import dataclass, field
from pathlib import Path
import yaml


# the pager keeps one line for its prompt
MIN_LINES = 2
MIN_COLUMNS = 1


def _default_rc_files() -> list[str]:
    return ["~/.gopher_shell.conf", "gopher_shell.conf"]


def _terminal_size(terminal: dict, key: str, default: int, minimum: int) -> int:
    value = terminal.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise ValueError(f"terminal.{key} must be an integer >= {minimum}, got {value!r}")
    return value


@dataclass
class Config:
    """Configuration settings for the Gopher shell.

    Attributes:
        home: Selector URL opened at startup (the home hole).
        download_directory: Default directory for saved files.
        rc_files: Command files evaluated at startup, in order.
        lines: Terminal height used by the pager.
        columns: Terminal width used by the pager and menus.
    """

    home: str | None = None
    download_directory: str = "~"
    rc_files: list[str] = field(default_factory=_default_rc_files)
    lines: int = 24
    columns: int = 80

    def get_rc_paths(self) -> list[Path]:
        """Get rc files as expanded Path objects."""
        return [Path(name).expanduser() for name in self.rc_files]


def load_config(path: str | Path) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Config object with loaded values.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If the terminal size is not usable.
    """
    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    # Extract sections
    client = data.get("client") or {}
    terminal = data.get("terminal") or {}

    rc_files = client.get("rc_files")

    return Config(
        home=client.get("home", Config.home),
        download_directory=client.get("download_directory", Config.download_directory),
        rc_files=list(rc_files) if rc_files is not None else _default_rc_files(),
        lines=_terminal_size(terminal, "lines", Config.lines, MIN_LINES),
        columns=_terminal_size(terminal, "columns", Config.columns, MIN_COLUMNS),
    )
