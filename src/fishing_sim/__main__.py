from pathlib import Path
import logging
import os
import sys

from dotenv import load_dotenv
from rich.logging import RichHandler

# Ensure the src directory is on sys.path when running as a script
_SRC_DIR = Path(__file__).resolve().parents[1]
if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))

from fishing_sim.presentation.cli import main as cli_main

load_dotenv()


def _configure_logging() -> None:
    level_name = os.getenv("FISHING_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"
    level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def _print_help_surface() -> None:
    print("\nHelp:")
    print("- Commands: locations, species, cast (run with --help for options).")
    print("- Startup issues: verify FISHING_DATABASE_URL or unset it to use in-memory mode.")


def main() -> int:
    _configure_logging()
    try:
        return cli_main(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nSession ended.")
        return 130
    except Exception as exc:
        print("An unexpected error occurred. The session closed safely.")
        print(f"Reason: {exc}")
        _print_help_surface()
        return 1


if __name__ == "__main__":
    sys.exit(main())
