"""Callable catalogs: where the functions advertised on `pipe.Pipe` come from.

A catalog yields one `CallableDescriptor` per unqualified callable identifier.
Identifiers are trimmed of leading `.` separators; anything still containing a
separator afterwards is a qualified name and is never yielded.

`ModuleCatalog` reflects live module namespaces (by default `builtins`), while
`StaticCatalog` takes an explicit mapping so callers (and tests) can inject a
fixed snapshot.
"""

from __future__ import annotations

import enum
import importlib
import inspect
import logging
import re
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .exceptions import EnumerationFailure, ReflectionFailure

__all__ = [
    'NAMESPACE_SEPARATOR',
    'ParameterKind',
    'ParameterDescriptor',
    'CallableDescriptor',
    'CallableCatalog',
    'ModuleCatalog',
    'StaticCatalog',
    'describe',
    'parse_doc_signature',
]

logger = logging.getLogger(__name__)

NAMESPACE_SEPARATOR = '.'

# Rendered default for optional parameters documented without a value, e.g. `[, default]`.
UNSPECIFIED_DEFAULT = '...'

_DOC_CALL_RE = re.compile(r'\s*([A-Za-z_][A-Za-z0-9_]*)\(')


class ParameterKind(enum.Enum):
    POSITIONAL_ONLY = 'positional-only'
    POSITIONAL_OR_KEYWORD = 'positional-or-keyword'
    VAR_POSITIONAL = 'var-positional'
    KEYWORD_ONLY = 'keyword-only'
    VAR_KEYWORD = 'var-keyword'

    @classmethod
    def from_inspect(cls, kind: inspect._ParameterKind) -> ParameterKind:
        return cls[kind.name]


@dataclass(frozen=True)
class ParameterDescriptor:
    """One parameter of a callable, as it should appear in a stub signature."""

    name: str
    position: int
    required: bool
    default: str | None = None
    kind: ParameterKind = ParameterKind.POSITIONAL_OR_KEYWORD
    annotation: str | None = None

    def render(self) -> str:
        """Returns the declared textual form, e.g. `*args` or `base: int = 10`."""
        text = self.name
        if self.kind is ParameterKind.VAR_POSITIONAL:
            text = f'*{text}'
        elif self.kind is ParameterKind.VAR_KEYWORD:
            text = f'**{text}'
        if self.annotation is not None:
            text = f'{text}: {self.annotation}'
        if self.default is not None:
            text += f' = {self.default}' if self.annotation is not None else f'={self.default}'
        return text

    @classmethod
    def from_inspect(cls, param: inspect.Parameter, position: int) -> ParameterDescriptor:
        variadic = param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
        has_default = param.default is not inspect.Parameter.empty
        return cls(
            name=param.name,
            position=position,
            required=not variadic and not has_default,
            default=repr(param.default) if has_default else None,
            kind=ParameterKind.from_inspect(param.kind),
            annotation=None
            if param.annotation is inspect.Parameter.empty
            else inspect.formatannotation(param.annotation),
        )


@dataclass(frozen=True)
class CallableDescriptor:
    """An unqualified callable identifier and its parameters."""

    name: str
    parameters: tuple[ParameterDescriptor, ...] = ()

    @property
    def required_count(self) -> int:
        return sum(1 for param in self.parameters if param.required)

    @property
    def signature(self) -> str:
        """Parameters rendered in position order, joined with `', '`."""
        ordered = sorted(self.parameters, key=lambda param: param.position)
        return ', '.join(param.render() for param in ordered)


def _split_doc_parameters(text: str) -> list[tuple[str, bool]] | None:
    """Split the text after `name(` into `(token, optional)` pairs.

    Stops at the closing parenthesis of the call. Tokens that start inside
    `[...]` are optional. Commas inside quotes or nested brackets do not split.
    Returns None when the parenthesis is never closed.
    """
    tokens: list[tuple[str, bool]] = []
    current: list[str] = []
    optional: bool | None = None
    quote: str | None = None
    depth = 0
    brackets = 0

    def flush() -> None:
        token = ''.join(current).strip()
        if token:
            tokens.append((token, bool(optional)))

    for char in text:
        if quote is not None:
            current.append(char)
            if char == quote:
                quote = None
            continue
        if char in '\'"':
            quote = char
        elif char in '({':
            depth += 1
        elif char in ')}':
            if depth == 0:
                flush()
                return tokens
            depth -= 1
        elif depth == 0 and char == '[':
            brackets += 1
            continue
        elif depth == 0 and char == ']':
            brackets -= 1
            continue
        elif depth == 0 and char == ',':
            flush()
            current = []
            optional = None
            continue

        if optional is None and not char.isspace():
            optional = brackets > 0
        current.append(char)
    return None


def parse_doc_signature(name: str, doc: str | None) -> tuple[ParameterDescriptor, ...] | None:
    """Read parameters from a docstring's first line, e.g. `getattr(object, name[, default])`.

    C builtins without `__text_signature__` document their call form this
    way. Returns None when the first line is not a call of `name` or a
    parameter cannot be read.
    """
    lines = (doc or '').strip().splitlines()
    if not lines:
        return None
    first_line = lines[0]
    match = _DOC_CALL_RE.match(first_line)
    if match is None or match.group(1) != name:
        return None
    tokens = _split_doc_parameters(first_line[match.end() :])
    if tokens is None:
        return None

    parameters: list[ParameterDescriptor] = []
    keyword_only = False
    for token, optional in tokens:
        if token == '/':
            continue
        if token == '*':
            keyword_only = True
            continue
        if token == '...':
            # `value, ...` documents a variadic positional parameter
            if not parameters or parameters[-1].kind is not ParameterKind.POSITIONAL_ONLY:
                return None
            previous = parameters.pop()
            parameters.append(
                ParameterDescriptor(previous.name, previous.position, False, kind=ParameterKind.VAR_POSITIONAL)
            )
            keyword_only = True
            continue

        position = len(parameters)
        if token.startswith('**'):
            param = ParameterDescriptor(token[2:], position, False, kind=ParameterKind.VAR_KEYWORD)
        elif token.startswith('*'):
            param = ParameterDescriptor(token[1:], position, False, kind=ParameterKind.VAR_POSITIONAL)
            keyword_only = True
        else:
            param_name, sep, default = (part.strip() for part in token.partition('='))
            if not sep and optional:
                default = UNSPECIFIED_DEFAULT
            kind = ParameterKind.KEYWORD_ONLY if keyword_only else ParameterKind.POSITIONAL_ONLY
            param = ParameterDescriptor(param_name, position, not default, default or None, kind)
        if not param.name.isidentifier():
            return None
        parameters.append(param)
    return tuple(parameters)


def describe(name: str, obj: Any) -> CallableDescriptor:
    """Reflect `obj` into a `CallableDescriptor` named `name`.

    Uses `inspect.signature`. Callables without signature metadata (common for
    C builtins such as `getattr` or `max`) fall back to the call form on the
    first line of their docstring.

    Raises:
        ReflectionFailure: If the parameters cannot be introspected.
    """
    try:
        signature = inspect.signature(obj)
    except TypeError as exc:
        raise ReflectionFailure(name, str(exc)) from exc
    except ValueError as exc:
        doc_name = getattr(obj, '__name__', name)
        parameters = parse_doc_signature(doc_name, inspect.getdoc(obj))
        if parameters is None:
            raise ReflectionFailure(name, str(exc)) from exc
        logger.debug('signature of %r read from its docstring', name)
        return CallableDescriptor(name, parameters)

    try:
        parameters = tuple(
            ParameterDescriptor.from_inspect(param, position)
            for position, param in enumerate(signature.parameters.values())
        )
    except Exception as exc:
        raise ReflectionFailure(name, f'{type(exc).__name__}: {exc}') from exc
    return CallableDescriptor(name, parameters)


class CallableCatalog:
    """Base class for catalogs.

    Subclasses implement `identifiers()`; `enumerate()` applies the separator
    trimming and filtering, then reflects each callable.
    """

    def identifiers(self) -> Iterable[tuple[str, Any]]:
        """Yield `(raw_identifier, value)` pairs in catalog order."""
        raise NotImplementedError

    def describe(self, name: str, value: Any) -> CallableDescriptor:
        return describe(name, value)

    def enumerate(self) -> Iterator[CallableDescriptor]:
        """Yield a fresh descriptor for every unqualified identifier."""
        for raw, value in self.identifiers():
            name = raw.lstrip(NAMESPACE_SEPARATOR)
            if NAMESPACE_SEPARATOR in name:
                logger.debug('skipping qualified identifier %r', raw)
                continue
            yield self.describe(name, value)

    def __iter__(self) -> Iterator[CallableDescriptor]:
        return self.enumerate()


class ModuleCatalog(CallableCatalog):
    """Catalog of the routines defined in one or more module namespaces.

    Names are sorted within each module and modules are visited in the order
    given, so the enumeration is stable across runs of the same interpreter.
    """

    def __init__(self, modules: Sequence[str] = ('builtins',), *, include_private: bool = False) -> None:
        self.modules = tuple(modules)
        self.include_private = include_private

    def identifiers(self) -> Iterator[tuple[str, Any]]:
        for module_name in self.modules:
            try:
                module = importlib.import_module(module_name)
            except Exception as exc:
                raise EnumerationFailure(
                    f'cannot import module {module_name!r}: {type(exc).__name__}: {exc}'
                ) from exc

            namespace = vars(module)
            names = sorted(namespace)
            if not self.include_private:
                names = [name for name in names if not name.startswith('_')]
            routines = [name for name in names if inspect.isroutine(namespace[name])]
            logger.debug('module %r provides %d routines', module_name, len(routines))
            for name in routines:
                yield name, namespace[name]

    def __repr__(self) -> str:
        return f'ModuleCatalog(modules={list(self.modules)!r})'


class StaticCatalog(CallableCatalog):
    """Catalog built from an explicit mapping.

    Values are either callables, reflected with `inspect`, or ready-made
    sequences of `ParameterDescriptor`. Mapping order is catalog order.
    """

    def __init__(self, entries: Mapping[str, Callable[..., Any] | Sequence[ParameterDescriptor]]) -> None:
        self.entries = dict(entries)

    def identifiers(self) -> Iterator[tuple[str, Any]]:
        yield from self.entries.items()

    def describe(self, name: str, value: Any) -> CallableDescriptor:
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes)) and not callable(value):
            if not all(isinstance(param, ParameterDescriptor) for param in value):
                raise ReflectionFailure(name, 'parameter list must contain ParameterDescriptor values')
            return CallableDescriptor(name, tuple(value))
        return super().describe(name, value)

    def __repr__(self) -> str:
        return f'StaticCatalog(<{len(self.entries)} entries>)'
