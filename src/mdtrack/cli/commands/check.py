"""Check and examples commands for mdtrack CLI."""

import sys
from pathlib import Path

from ...blocks import EXAMPLES, find_tracker_blocks, parse_sections, parse_tracker
from ...core.config import Config
from ...core.exceptions import ConfigError
from ...render import render_error


def handle_check(args, config: Config) -> None:
    """Handle check command.

    Validates every tracker in a note's progress-tracker blocks, or in a
    raw block file when it has none.

    Args:
        args: Parsed command arguments.
        config: Application configuration.

    Raises:
        ConfigError: If any tracker is invalid.
    """
    if args.file == "-":
        text = sys.stdin.read()
    else:
        text = Path(args.file).read_text(encoding=config.encoding)

    blocks = [block.text for block in find_tracker_blocks(text)] or [text]

    invalid = 0
    for block_number, block_text in enumerate(blocks, start=1):
        parsed = parse_sections(block_text)
        for tracker_number, section in enumerate(parsed.sections, start=1):
            name = f"Block {block_number}, tracker {tracker_number}"
            try:
                tracker = parse_tracker(section, parsed.block, config.default_period)
            except ConfigError as e:
                invalid += 1
                print(f"✗ {name}")
                print(render_error(e))
                continue
            label = f" ({tracker.label})" if tracker.label else ""
            print(f"✓ {name}: {tracker.type.value}, {tracker.mode} mode{label}")

    if invalid:
        raise ConfigError(f"{invalid} invalid tracker(s)")


def handle_examples(args, config: Config) -> None:
    """Print the documented example blocks.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    for name, text in EXAMPLES.items():
        print(f"# {name}")
        print("```progress-tracker")
        print(text)
        print("```")
        print()
