"""
people_explorer - Run as module

Usage: python -m people_explorer
"""

import logging
import sys
from typing import Optional

from people_explorer.console import (
    AdvancedFilterHandler,
    ConsoleIO,
    DisplayService,
    GlobalSearchHandler,
    PeopleExplorer,
    PersonDetailsHandler,
)
from people_explorer.core import ConnectionContext, ODataServiceSettings, configure_logging, validate_settings
from people_explorer.people import PeopleRepository, PersonService


def build_explorer(conn: ConnectionContext, console: Optional[ConsoleIO] = None) -> PeopleExplorer:
    """Wire the explorer and its collaborators onto an open connection."""
    console = console or ConsoleIO()
    display = DisplayService(console)
    person_service = PersonService(PeopleRepository(conn.get_service()))

    return PeopleExplorer(
        console=console,
        person_service=person_service,
        display=display,
        search_handler=GlobalSearchHandler(console),
        filter_handler=AdvancedFilterHandler(console),
        details_handler=PersonDetailsHandler(console, person_service, display),
        page_size=conn.settings.default_page_size,
    )


def main() -> int:
    """Run the interactive People Explorer."""
    try:
        settings = ODataServiceSettings.from_env()
    except ValueError as exc:
        print("Configuration validation failed:", file=sys.stderr)
        print(f"  - {exc}", file=sys.stderr)
        return 1

    result = validate_settings(settings)
    if not result.is_valid:
        print("Configuration validation failed:", file=sys.stderr)
        for error in result.errors:
            print(f"  - {error}", file=sys.stderr)
        return 1

    logger = configure_logging(settings.log_level, settings.log_dir)
    logger.info("Application starting against %s", settings.base_url)

    try:
        with ConnectionContext(settings) as conn:
            build_explorer(conn).run()
        logger.info("Application exiting normally")
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception:
        logger.critical("Application failed", exc_info=True)
        print("Application failed; see the log for details.", file=sys.stderr)
        return 1
    finally:
        logging.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())
