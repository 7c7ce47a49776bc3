"""CLI entrypoint for the strands puzzle layout tool."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from wordstrands.core.constants import (
    DEFAULT_COLS,
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_MAX_BACKTRACKS,
    DEFAULT_ROWS,
    DEFAULT_TIME_LIMIT_MS,
    GridShape,
)
from wordstrands.core.exceptions import StrandsError
from wordstrands.core.models import PuzzleDraft
from wordstrands.data.normalization import clean_word
from wordstrands.engine.layout import LayoutConfig, LayoutEngine, LoggingLayoutObserver
from wordstrands.engine.validator import PuzzleValidator
from wordstrands.utils.logger import configure_logging, get_logger
from wordstrands.utils.pretty import pretty_print_layout


LOGGER = get_logger("wordstrands.cli")


def parse_words_file(path: Path) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""
    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Lay out a spangram and theme words onto a strands puzzle grid",
    )
    parser.add_argument("--spangram", type=str, required=True, help="The edge-spanning word")
    parser.add_argument("--words", nargs="+", metavar="WORD", help="Theme words")
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one theme word per line (# comments and blank lines ignored)",
    )
    parser.add_argument("--rows", type=int, default=DEFAULT_ROWS, help="Grid height in cells")
    parser.add_argument("--cols", type=int, default=DEFAULT_COLS, help="Grid width in cells")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=DEFAULT_MAX_ATTEMPTS,
        help="Maximum number of fresh layout attempts",
    )
    parser.add_argument(
        "--max-backtracks",
        type=int,
        default=DEFAULT_MAX_BACKTRACKS,
        help="Alternative placements tried per word before an attempt is abandoned",
    )
    parser.add_argument(
        "--time-limit-ms",
        type=float,
        default=DEFAULT_TIME_LIMIT_MS,
        help="Wall-clock limit in milliseconds for the whole layout run",
    )
    parser.add_argument(
        "--prune",
        action="store_true",
        help="Discard placements that leave free regions too small for any remaining word",
    )
    parser.add_argument("--title", type=str, default="", help="Puzzle title for the JSON output")
    parser.add_argument("--author", type=str, default="", help="Puzzle author for the JSON output")
    parser.add_argument("--theme-clue", type=str, default="", help="Theme clue for the JSON output")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    raw_words: List[str] = []
    if args.words:
        raw_words.extend(args.words)
    if args.words_file:
        raw_words.extend(parse_words_file(args.words_file))
    spangram = clean_word(args.spangram)
    if not spangram:
        parser.error("--spangram must contain at least one letter")
    theme_words: List[str] = []
    for raw in raw_words:
        word = clean_word(raw)
        if not word:
            parser.error(f"theme word {raw!r} must contain at least one letter")
        theme_words.append(word)

    try:
        shape = GridShape(rows=args.rows, cols=args.cols)
        config = LayoutConfig(
            shape=shape,
            max_backtracks=args.max_backtracks,
            max_attempts=args.max_attempts,
            time_limit_ms=args.time_limit_ms,
            seed=args.seed,
            prune_stranded_regions=args.prune,
        )
    except ValueError as exc:
        parser.error(str(exc))

    engine = LayoutEngine(config, observer=LoggingLayoutObserver())
    try:
        result = engine.layout(spangram, theme_words)
    except StrandsError as exc:
        LOGGER.error("Layout failed: %s", exc)
        return 1

    pretty_print_layout(result, spangram, theme_words, shape=shape, stream=sys.stderr)

    draft = PuzzleDraft.from_layout(
        result,
        spangram,
        theme_words,
        title=args.title,
        author=args.author,
        theme_clue=args.theme_clue,
    )
    validation = PuzzleValidator(shape).validate(draft)
    payload: Dict[str, Any] = draft.to_jsonable()
    payload["layout"] = result.to_jsonable()
    payload["attempts"] = result.attempts
    payload["validation"] = validation.messages

    output_text = json.dumps(payload, ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
