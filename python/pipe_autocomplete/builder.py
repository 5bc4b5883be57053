"""Turns a callable catalog into the ordered list of declaration tags."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from .catalog import CallableCatalog
from .variants import VariantFormatter

__all__ = ['PROPERTY_ARITY_LIMIT', 'TagKind', 'DeclarationTag', 'DeclarationBuilder']

logger = logging.getLogger(__name__)

# A bare attribute access can pass at most the piped value, so only callables
# with fewer required parameters than this are exposed as properties.
PROPERTY_ARITY_LIMIT = 2


class TagKind(enum.Enum):
    METHOD = 'method'
    PROPERTY_READ = 'property-read'


@dataclass(frozen=True)
class DeclarationTag:
    """One hint line in the generated stub."""

    kind: TagKind
    name: str
    signature: str | None = None

    @classmethod
    def method(cls, name: str, signature: str) -> DeclarationTag:
        return cls(TagKind.METHOD, name, signature)

    @classmethod
    def property_read(cls, name: str) -> DeclarationTag:
        return cls(TagKind.PROPERTY_READ, name)


class DeclarationBuilder:
    """Builds declaration tags from a catalog.

    For each callable, in catalog order:

    - every variant not yet declared as a method becomes a method tag;
    - if the callable has fewer than two required parameters, every variant not
      yet declared as a property becomes a property-read tag.

    Methods and properties are deduplicated independently, so a name can be
    declared as both.
    """

    def __init__(self, catalog: CallableCatalog) -> None:
        self.catalog = catalog
        self.formatter = VariantFormatter()

    def build(self) -> tuple[DeclarationTag, ...]:
        tags: list[DeclarationTag] = []
        methods: set[str] = set()
        properties: set[str] = set()
        callables = 0

        for descriptor in self.catalog.enumerate():
            callables += 1
            signature = descriptor.signature
            variants = self.formatter.variants(descriptor)

            for name in variants:
                if name in methods:
                    continue
                methods.add(name)
                tags.append(DeclarationTag.method(name, signature))

            if descriptor.required_count < PROPERTY_ARITY_LIMIT:
                for name in variants:
                    if name in properties:
                        continue
                    properties.add(name)
                    tags.append(DeclarationTag.property_read(name))

        logger.debug(
            'built %d tags (%d methods, %d properties) from %d callables',
            len(tags),
            len(methods),
            len(properties),
            callables,
        )
        return tuple(tags)
