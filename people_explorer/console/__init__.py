"""
people_explorer.console - Interactive terminal UI
==================================================

- ConsoleIO: stdin/stdout wrapper
- DisplayService: box-drawn lists, detail card, panels
- GlobalSearchHandler / AdvancedFilterHandler: criteria prompts
- PersonDetailsHandler: detail view
- PeopleExplorer: main loop

"""

from people_explorer.console.display import DisplayService, center_text, pad_right
from people_explorer.console.explorer import PeopleExplorer
from people_explorer.console.handlers import (
    AdvancedFilterHandler,
    GlobalSearchHandler,
    PersonDetailsHandler,
)
from people_explorer.console.io import ConsoleIO

__all__ = [
    "ConsoleIO",
    "DisplayService",
    "center_text",
    "pad_right",
    "GlobalSearchHandler",
    "AdvancedFilterHandler",
    "PersonDetailsHandler",
    "PeopleExplorer",
]
