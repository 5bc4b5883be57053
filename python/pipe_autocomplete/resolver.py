"""Name resolution strategies.

A resolver maps a member name used on `pipe.Pipe` to the name of the function
it dispatches to. Resolvers must be total and pure: any string in, a string out.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = ['Resolver', 'AsIs']


@runtime_checkable
class Resolver(Protocol):
    def resolve(self, name: str) -> str: ...


class AsIs:
    """Pass-through resolver, returns the name unchanged."""

    def resolve(self, name: str) -> str:
        return name

    def __repr__(self) -> str:
        return 'AsIs()'
