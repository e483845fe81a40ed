"""Command-line entry point for the dining philosophers simulation."""

import sys
from typing import Optional, Sequence

from .args import ArgumentError, UsageError, parse_settings
from .simulation import Simulation

_THREAD_ERROR_MESSAGE = "Error when creating threads.\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulation with the given arguments and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_settings(args)
    except (UsageError, ArgumentError) as error:
        sys.stdout.write(str(error))
        return error.exit_code
    try:
        Simulation(settings).run()
    except RuntimeError:
        sys.stdout.write(_THREAD_ERROR_MESSAGE)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())