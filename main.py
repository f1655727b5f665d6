#!/usr/bin/env python3
"""
Command-line interface for the max finder.

Reads one line of whitespace-separated integers from stdin and prints the
largest one. stdout carries only the result; diagnostics go to stderr.
"""

import sys
import argparse
from pathlib import Path
import os

# Add project root to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from config.logging_config import setup_logging
from config.settings import LOG_LEVELS, Settings
from modules.pipeline.pipeline import create_pipeline

__version__ = '1.0.0'


# ============================================================================
# COLOR CODES FOR TERMINAL OUTPUT
# ============================================================================

class Colors:
    """ANSI color codes for terminal output."""
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'


def print_error(message: str):
    """Print error message to stderr."""
    if sys.stderr.isatty():
        print(f"{Colors.FAIL}{message}{Colors.ENDC}", file=sys.stderr)
    else:
        print(message, file=sys.stderr)


# ============================================================================
# COMMAND-LINE ARGUMENT PARSING
# ============================================================================

def parse_arguments(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Print the largest of the integers on one line of stdin",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  echo "3 7 2 9 4" | find-max
  echo "-10 -20 -3" | python main.py --verbose
        """
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log progress to stderr'
    )

    parser.add_argument(
        '--log-level',
        type=str.upper,
        choices=LOG_LEVELS,
        help='Explicit log level (DEBUG, INFO, WARNING, ...); overrides --verbose'
    )

    parser.add_argument(
        '--version', '-v',
        action='version',
        version=f'find-max v{__version__}'
    )

    return parser.parse_args(argv)


# ============================================================================
# MAIN ENTRY POINT
# ============================================================================

def run(argv=None, stdin=None, stdout=None) -> int:
    """
    Run the program once.

    Errors are not caught here; they propagate to the caller.

    Returns:
        Exit code (0 on success)
    """
    args = parse_arguments(argv)
    settings = Settings(verbose=True) if args.verbose else Settings()
    setup_logging(settings, level=args.log_level)

    if stdin is None:
        # raw bytes; the pipeline decodes with settings.input_encoding
        stdin = getattr(sys.stdin, 'buffer', sys.stdin)
    stdout = stdout or sys.stdout

    pipeline = create_pipeline(settings)
    result = pipeline.run(stdin)

    print(result.value, file=stdout)
    return 0


def main():
    """Main entry point."""
    try:
        sys.exit(run())

    except KeyboardInterrupt:
        print_error("\nInterrupted by user.")
        sys.exit(130)

    except Exception as e:
        print_error(f"Fatal Error: {type(e).__name__}: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    # Ensure errors are visible
    os.environ['PYTHONUNBUFFERED'] = '1'
    main()
