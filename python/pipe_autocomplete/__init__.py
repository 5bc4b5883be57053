"""Autocomplete stub generator for the `pipe.Pipe` dynamic-dispatch pipeline.

Example::

    from pipe_autocomplete import generate

    path = generate('resources')  # writes resources/.pycharm.autocomplete.pyi
"""

from .builder import DeclarationBuilder, DeclarationTag, TagKind
from .catalog import (
    CallableCatalog,
    CallableDescriptor,
    ModuleCatalog,
    ParameterDescriptor,
    ParameterKind,
    StaticCatalog,
)
from .emitter import ArtifactEmitter
from .exceptions import AutocompleteError, EnumerationFailure, ReflectionFailure, WriteFailure
from .generate import AUTOCOMPLETE_FILENAME, DEFAULT_OUTPUT_DIR, generate, write_artifact
from .resolver import AsIs, Resolver
from .variants import VariantFormatter, camelize

__version__ = '0.1.0'

__all__ = [
    '__version__',
    'generate',
    'write_artifact',
    'AUTOCOMPLETE_FILENAME',
    'DEFAULT_OUTPUT_DIR',
    'Resolver',
    'AsIs',
    'CallableCatalog',
    'ModuleCatalog',
    'StaticCatalog',
    'CallableDescriptor',
    'ParameterDescriptor',
    'ParameterKind',
    'VariantFormatter',
    'camelize',
    'DeclarationBuilder',
    'DeclarationTag',
    'TagKind',
    'ArtifactEmitter',
    'AutocompleteError',
    'EnumerationFailure',
    'ReflectionFailure',
    'WriteFailure',
]
