"""Interactive menu for loading, displaying and sorting bids."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Dict, Iterable, Optional, TextIO

from .config import AppConfig, load_config, validate_strip_char
from .io import load_bids
from .models import BidStore
from .reporting import format_timing, write_bids
from .sorting import quick_sort, selection_sort
from .timing import timed

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/config.yaml")

MENU = (
    "Menu:",
    "  1. Load Bids",
    "  2. Display All Bids",
    "  3. Selection Sort All Bids",
    "  4. Quick Sort All Bids",
    "  9. Exit",
)
EXIT_CHOICE = 9


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Load a bid export and sort it by title")
    parser.add_argument("csv_path", nargs="?", type=Path, help="Path to the bid CSV file")
    parser.add_argument("--config", type=Path, help="Path to YAML configuration")
    parser.add_argument("--strip-char", help="Character removed from amounts before parsing")
    parser.add_argument("--chunk-size", type=int, help="Chunk size for CSV ingestion")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, WARNING)")
    return parser


class MenuSession:
    """Owns the bid store for one run of the menu."""

    def __init__(self, config: AppConfig, stdin: TextIO, stdout: TextIO) -> None:
        self.config = config
        self.stdin = stdin
        self.stdout = stdout
        self.bids: BidStore = []
        self._actions: Dict[int, Callable[[], None]] = {
            1: self.load,
            2: self.display,
            3: self.selection_sort,
            4: self.quick_sort,
        }

    def run(self) -> None:
        while True:
            self._print(*MENU)
            self.stdout.write("Enter choice: ")
            self.stdout.flush()

            line = self.stdin.readline()
            if not line:
                self._print()
                break

            try:
                choice = int(line.strip())
            except ValueError:
                self._print(f"Invalid choice: {line.strip()!r}")
                continue

            if choice == EXIT_CHOICE:
                break
            action = self._actions.get(choice)
            if action is None:
                logger.debug("Ignoring unknown menu choice %d", choice)
                continue
            action()

        self._print("Good bye.")

    def load(self) -> None:
        config = self.config
        with timed("load") as stats:
            try:
                bids = load_bids(
                    config.csv_path,
                    config.columns,
                    strip_char=config.parsing.strip_char,
                    chunk_size=config.chunk_size,
                    encoding=config.parsing.encoding,
                )
            except Exception as exc:
                logger.exception("Failed to load bids: %s", exc)
                return
        self.bids = bids
        self._print(f"{len(self.bids)} bids read")
        self._print(*format_timing(stats))

    def display(self) -> None:
        write_bids(self.bids, self.stdout)

    def selection_sort(self) -> None:
        self._sort("selection sort", selection_sort)

    def quick_sort(self) -> None:
        self._sort("quick sort", lambda bids: quick_sort(bids, 0, len(bids) - 1))

    def _sort(self, label: str, sorter: Callable[[BidStore], None]) -> None:
        with timed(label) as stats:
            sorter(self.bids)
        logger.info("Sorted %d bids with %s", len(self.bids), label)
        self._print(f"{len(self.bids)} bids sorted")
        self._print(*format_timing(stats))

    def _print(self, *lines: str) -> None:
        if not lines:
            print(file=self.stdout)
        for line in lines:
            print(line, file=self.stdout)


def main(
    argv: Optional[Iterable[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    try:
        config = _load_app_config(args.config)
        _apply_overrides(config, args)
    except Exception as exc:
        logger.error("Failed to load configuration: %s", exc)
        return 1

    session = MenuSession(config, stdin or sys.stdin, stdout or sys.stdout)
    session.run()
    return 0


def _load_app_config(path: Optional[Path]) -> AppConfig:
    if path is not None:
        return load_config(path)
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    return AppConfig()


def _apply_overrides(config: AppConfig, args: argparse.Namespace) -> None:
    if args.csv_path:
        config.csv_path = _resolve_override_path(args.csv_path)

    if args.strip_char is not None:
        config.parsing.strip_char = validate_strip_char(args.strip_char)

    if args.chunk_size is not None:
        if args.chunk_size <= 0:
            raise ValueError("--chunk-size must be a positive integer")
        config.chunk_size = args.chunk_size


def _resolve_override_path(path: Path) -> Path:
    path = Path(path).expanduser()
    if path.is_absolute():
        return path
    return (Path.cwd() / path).resolve()


if __name__ == "__main__":  # pragma: no cover - manual execution entry point
    raise SystemExit(main())
