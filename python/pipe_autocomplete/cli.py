"""`autocomplete` command: build IDE files for autocomplete.

Usage:
    pipe-autocomplete [--output DIR] [--module NAME ...] [--include-private] [--verbose]
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from .catalog import ModuleCatalog
from .exceptions import AutocompleteError
from .generate import generate
from .options import OPTIONS, configure

__all__ = ['COMMAND_NAME', 'COMMAND_DESCRIPTION', 'build_parser', 'main']

COMMAND_NAME = 'autocomplete'
COMMAND_DESCRIPTION = 'Build IDE files for autocomplete'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=COMMAND_NAME, description=COMMAND_DESCRIPTION)
    return configure(parser)


def _default(name: str):
    return next(spec.default for spec in OPTIONS if spec.name == name)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    modules = list(dict.fromkeys(args.module or _default('module')))
    catalog = ModuleCatalog(modules, include_private=args.include_private)

    try:
        path = generate(args.output, catalog=catalog)
    except AutocompleteError as exc:
        print(f'error: {exc.diagnostic()}', file=sys.stderr)
        return 1

    print(f'Wrote {path}')
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
