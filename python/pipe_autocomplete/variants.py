"""Member-name variants for a callable.

Each callable is advertised under its raw name and, when different, under a
camel-cased spelling (`str_replace` -> `strReplace`).
"""

from __future__ import annotations

from .catalog import CallableDescriptor

__all__ = ['WORD_DELIMITERS', 'camelize', 'VariantFormatter']

WORD_DELIMITERS = ('-', '_')


def camelize(name: str) -> str:
    """Collapse `-`/`_` delimited words into lower camel case.

    Only the first character of each word is upper-cased; the rest of the word
    is kept as written, so `get_HTTP_code` becomes `getHTTPCode`.
    """
    for delimiter in WORD_DELIMITERS:
        name = name.replace(delimiter, ' ')
    words = [word[:1].upper() + word[1:] for word in name.split(' ')]
    result = ''.join(words)
    return result[:1].lower() + result[1:]


class VariantFormatter:
    """Produces the names a callable is declared under, raw name first.

    Derivation is purely lexical and never consults a `Resolver`; name
    resolution belongs to runtime dispatch, not to the stub.
    """

    def variants(self, descriptor: CallableDescriptor) -> list[str]:
        raw = descriptor.name
        names = [raw]
        camel = camelize(raw)
        if camel != raw:
            names.append(camel)
        return names
