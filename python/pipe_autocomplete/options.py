"""Option table for the `autocomplete` command."""

from __future__ import annotations

import argparse
import enum
from dataclasses import dataclass
from typing import Any

from .generate import DEFAULT_OUTPUT_DIR

__all__ = ['OptionKind', 'OptionSpec', 'OPTIONS', 'configure']


class OptionKind(enum.Enum):
    OPTIONAL = 'optional'
    FLAG = 'flag'
    REPEATABLE = 'repeatable'


@dataclass(frozen=True)
class OptionSpec:
    name: str
    alias: str | None
    kind: OptionKind
    description: str
    default: Any = None

    def add_to(self, parser: argparse.ArgumentParser) -> None:
        flags = [f'--{self.name}']
        if self.alias is not None:
            flags.append(f'-{self.alias}' if len(self.alias) == 1 else f'--{self.alias}')

        kwargs: dict[str, Any] = {'help': self.description}
        if self.kind is OptionKind.FLAG:
            kwargs['action'] = 'store_true'
        elif self.kind is OptionKind.REPEATABLE:
            kwargs['action'] = 'append'
            kwargs['metavar'] = self.name.upper()
        else:
            kwargs['default'] = self.default
            kwargs['metavar'] = self.name.upper()
        parser.add_argument(*flags, **kwargs)


OPTIONS: tuple[OptionSpec, ...] = (
    OptionSpec('output', 'out', OptionKind.OPTIONAL, 'Output directory', DEFAULT_OUTPUT_DIR),
    OptionSpec(
        'module',
        'm',
        OptionKind.REPEATABLE,
        'Module whose functions are advertised (repeatable, default: builtins)',
        ('builtins',),
    ),
    OptionSpec('include-private', None, OptionKind.FLAG, 'Also advertise names starting with an underscore'),
    OptionSpec('verbose', 'v', OptionKind.FLAG, 'Log each pipeline step'),
)


def configure(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    for spec in OPTIONS:
        spec.add_to(parser)
    return parser
