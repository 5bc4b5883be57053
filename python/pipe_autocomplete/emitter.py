"""Renders declaration tags as a `.pyi` stub for `pipe.Pipe`."""

from __future__ import annotations

from collections.abc import Iterable

from .builder import DeclarationTag, TagKind

__all__ = ['HOST_CLASS', 'HOST_MODULE', 'ArtifactEmitter']

HOST_CLASS = 'Pipe'
HOST_MODULE = 'pipe'

INDENT = '    '

FILE_HEADER = (
    '# type: ignore',
    '# ruff: noqa',
    '"""This file was automatically generated.',
    '',
    f'Autocomplete hints for :class:`{HOST_MODULE}.{HOST_CLASS}`.',
    '',
    '@license MIT',
    '@noinspection ALL',
    '"""',
    '',
    'from typing import Any',
    '',
    'from typing_extensions import Self',
    '',
    f"__all__ = ['{HOST_CLASS}']",
    '',
    '',
)

CLASS_SUPPRESSIONS = (
    '@noinspection PyUnresolvedReferences',
    '@noinspection PyMethodParameters',
)


def _escape(text: str) -> str:
    """Keep `text` from closing the raw class docstring."""
    return text.replace('"""', '""\\"')


class ArtifactEmitter:
    """Renders tags into stub text without dropping or reordering any."""

    return_type = f'{HOST_CLASS} | Self'
    property_type = 'Any'
    member_sigil = '.'

    def render_tag(self, tag: DeclarationTag) -> str:
        if tag.kind is TagKind.METHOD:
            return f'@method {self.return_type} {tag.name}({tag.signature or ""})'
        return f'@property-read {self.property_type} {self.member_sigil}{tag.name}'

    def emit(self, tags: Iterable[DeclarationTag]) -> str:
        lines = list(FILE_HEADER)
        lines.append(f'class {HOST_CLASS}:')
        lines.append(f'{INDENT}r"""')
        for suppression in CLASS_SUPPRESSIONS:
            lines.append(f'{INDENT}{suppression}')
        for tag in tags:
            lines.append(f'{INDENT}{_escape(self.render_tag(tag))}')
        lines.append(f'{INDENT}"""')
        return '\n'.join(lines) + '\n'
