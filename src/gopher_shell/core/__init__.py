"""Core components for the Gopher shell."""

from .selector import Selector, SelectorList
from .variables import Variable, VariableStore
from .protocol import parse_selector, parse_selector_list, render_selector
from .session import Session
from .menu_renderer import MenuRenderer
from .paginator import Paginator
from .tokenizer import Tokenizer
from .navigator import Navigator
from .interpreter import CommandInterpreter

__all__ = [
    "Selector",
    "SelectorList",
    "Variable",
    "VariableStore",
    "parse_selector",
    "parse_selector_list",
    "render_selector",
    "Session",
    "MenuRenderer",
    "Paginator",
    "Tokenizer",
    "Navigator",
    "CommandInterpreter",
]
