"""Command-line entry point of the dining philosophers simulation."""

import sys
from typing import Optional, Sequence

from philo.config import InputError, parse_settings
from philo.simulation import run_simulation


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the arguments, run the simulation and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_settings(args)
    except InputError as exc:
        print(exc)
        return 1
    try:
        run_simulation(settings, sys.stdout)
    except RuntimeError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())