"""Print a derived unit from the default registry: ``python -m unitfold [--unit V]``."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from unitfold.core.utils import format_dim

_log = logging.getLogger("unitfold")


def setup_logging(verbose: bool = False) -> None:
    """Set up logging for the command line driver."""
    if logging.root.handlers:  # already configured by the host
        return

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unitfold",
        description="Show the structure of a unit from the default registry.",
    )
    parser.add_argument("--unit", default="V", help="unit symbol or alias (default: V)")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    # Import after logging is configured so bootstrap records are visible.
    from unitfold.units.registry import DEFAULT_REGISTRY

    try:
        unit = DEFAULT_REGISTRY.get(args.unit)
    except ValueError as e:
        parser.error(str(e))

    _log.debug("Resolved %r to %r", args.unit, unit.name)
    print(repr(unit))
    print(f"dimension: {format_dim(unit.dimension)}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
