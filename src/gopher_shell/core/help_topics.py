"""Help texts shown by the help command."""

HELP_TOPICS = {
    "alias": """Syntax:
    ALIAS [<name>] [<value>]

Description:
    Without arguments show all aliases, with <name> show one alias.
    With <value> define the command <name> which executes <value>.
    Example: alias b "back"
    Arguments typed after an alias are ignored.""",
    "back": """Syntax:
    BACK

Description:
    Go back in history.""",
    "bookmarks": """Syntax:
    BOOKMARKS [<filter>|<item-id>]

Description:
    Show all defined bookmarks, or those matching <filter>.
    If <item-id> is specified, navigate to the given <item-id> from bookmarks.


Syntax:
    BOOKMARKS <name> <url>

Description:
    Define a new bookmark with the given <name> and <url>.""",
    "handlers": """Type handlers define the command executed for a selector type.
    Example: type g "display %f"
    Format specifiers:
        %h - hostname
        %p - port
        %s - selector
        %n - name
        %f - temporary file (selector will be downloaded)
        %% - escape %""",
    "help": """Syntax:
    HELP [<topic>]

Description:
    Show all help topics or the help text for a specific <topic>.""",
    "history": """Syntax:
    HISTORY [<filter>|<item-id>]

Description:
    Show the current history, or the entries matching <filter>.
    If <item-id> is specified, navigate to the given <item-id> from history.""",
    "open": """Syntax:
    OPEN <url>

Description:
    Opens the given <url>, for example gopher://example.org/1/.""",
    "quit": """Syntax:
    QUIT

Description:
    Quit the gopher client.""",
    "save": """Syntax:
    SAVE <item-id>

Description:
    Saves the given <item-id> from the menu to the disk.
    You will be asked for a filename.""",
    "see": """Syntax:
    SEE <item-id>

Description:
    Show the full gopher URL for the menu selector id.""",
    "set": """Syntax:
    SET [<name>] [<value>]

Description:
    If no <name> is given it will show all variables.
    When <name> is given it will show this specific variable.
    If <value> is specified the variable will have this value.
    When the variable does not exist the variable will be created.
    Variables are used in commands as $name.
    download_directory is where binary files are saved by default.""",
    "show": """Syntax:
    SHOW [<filter>]

Description:
    Show the current gopher menu. If a <filter> is specified, it will
    show all selectors containing the <filter> in name or path.""",
    "type": """Syntax:
    TYPE [<name>] [<value>]

Description:
    Show or define the handler command for selector type <name>.
    See `help handlers` for the format specifiers.""",
}


def format_columns(names: list[str], per_row: int = 5, width: int = 13) -> str:
    """Lay out names in fixed-width columns."""
    rows = []
    for start in range(0, len(names), per_row):
        row = names[start : start + per_row]
        rows.append(" ".join(f"{name:<{width}}" for name in row).rstrip())
    return "\n".join(rows)
