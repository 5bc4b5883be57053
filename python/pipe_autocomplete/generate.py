"""Generate the autocomplete stub and write it to disk."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path

from .builder import DeclarationBuilder
from .catalog import CallableCatalog, ModuleCatalog
from .emitter import ArtifactEmitter
from .exceptions import WriteFailure

__all__ = ['AUTOCOMPLETE_FILENAME', 'DEFAULT_OUTPUT_DIR', 'generate', 'write_artifact']

logger = logging.getLogger(__name__)

# Dot-prefixed so IDEs and tools treat it as a generated hint file, not source.
AUTOCOMPLETE_FILENAME = '.pycharm.autocomplete.pyi'

# Relative to the current working directory.
DEFAULT_OUTPUT_DIR = Path('resources')

Writer = Callable[[Path, str], None]


def write_artifact(path: Path, content: str) -> None:
    """Write `content` to `path` in one step, replacing any existing file.

    The text goes to a sibling temporary file which is then renamed over the
    target, so a failed run never leaves a partial stub behind.

    Raises:
        WriteFailure: If the file cannot be written.
    """
    tmp_path = path.with_name(f'{path.name}.tmp')
    try:
        tmp_path.write_text(content, encoding='utf-8')
        os.replace(tmp_path, path)
    except OSError as exc:
        tmp_path.unlink(missing_ok=True)
        raise WriteFailure(path, exc.strerror or str(exc)) from exc


def generate(
    output_dir: str | os.PathLike[str] = DEFAULT_OUTPUT_DIR,
    *,
    catalog: CallableCatalog | None = None,
    emitter: ArtifactEmitter | None = None,
    writer: Writer = write_artifact,
) -> Path:
    """Build the stub from `catalog` and write it into `output_dir`.

    Arguments:
        output_dir: Directory the stub is written to; it must already exist.
        catalog: Source of callables, defaults to the `builtins` module.
        emitter: Renders the tags, defaults to `ArtifactEmitter()`.
        writer: Sink called exactly once with `(path, text)`.

    Returns:
        The path of the written stub.

    Raises:
        AutocompleteError: If enumeration, reflection or writing fails. Nothing
            is written unless every tag was built.
    """
    if catalog is None:
        catalog = ModuleCatalog()
    if emitter is None:
        emitter = ArtifactEmitter()

    tags = DeclarationBuilder(catalog).build()
    content = emitter.emit(tags)

    path = Path(output_dir) / AUTOCOMPLETE_FILENAME
    writer(path, content)
    logger.info('wrote %d declarations to %s', len(tags), path)
    return path
