"""Translation source loading interface and implementations.

Defines the contract for discovering translation documents and provides a
filesystem loader for TOML and YAML sources.
"""

import re
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator, Optional

import yaml

from translatable.errors import DocumentSyntaxError, SourceReadError
from translatable.logging import get_module_logger
from translatable.models import SourceDocument

logger = get_module_logger()

TOML_SUFFIXES = frozenset({".toml"})
YAML_SUFFIXES = frozenset({".yml", ".yaml"})
DOCUMENT_SUFFIXES = TOML_SUFFIXES | YAML_SUFFIXES

# tomllib reports positions only in its message: "... (at line 3, column 7)"
_TOML_POSITION = re.compile(r"\(at line (\d+), column (\d+)\)")


class _TranslationYAMLLoader(yaml.SafeLoader):
    """SafeLoader that reads only true/false as booleans.

    Keys such as ``no`` (Norwegian) or ``on`` stay strings.
    """


_BOOL_TAG = "tag:yaml.org,2002:bool"
_TranslationYAMLLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_TranslationYAMLLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


class TranslationLoader(ABC):
    """Abstract base for translation source loaders.

    Implementations yield one SourceDocument per translation source.
    """

    @abstractmethod
    def iter_documents(self) -> Iterator[SourceDocument]:
        """Lazily yield every translation document.

        Raises:
            SourceReadError: If a source cannot be read.
            DocumentSyntaxError: If a source cannot be parsed.
        """
        pass


class FileTranslationLoader(TranslationLoader):
    """Loader for a directory tree of TOML/YAML translation documents.

    The directory is expected to contain only translation documents; any
    other file is reported as an error. Sub-directories and the file stem
    become the document's path segments (``ui/menu.toml`` -> ``("ui", "menu")``).

    Attributes:
        root: Directory containing the translation documents.
    """

    def __init__(self, root: Path):
        self.root = Path(root)

    def iter_documents(self) -> Iterator[SourceDocument]:
        if not self.root.is_dir():
            raise SourceReadError(
                f"Translations directory not found: {self.root}", path=self.root
            )

        logger.info("loading_translation_sources", root=str(self.root))

        for file_path in self._walk(self.root):
            relative = file_path.relative_to(self.root)
            if file_path.suffix.lower() not in DOCUMENT_SUFFIXES:
                raise SourceReadError(
                    f"Unsupported file in translations directory: {relative}. "
                    f"Expected one of {', '.join(sorted(DOCUMENT_SUFFIXES))}",
                    path=file_path,
                )

            segments = relative.parent.parts + (relative.stem,)
            yield SourceDocument(
                path=relative,
                segments=tuple(segments),
                data=self._parse(file_path, relative),
            )

    def _walk(self, directory: Path) -> Iterator[Path]:
        try:
            entries = sorted(directory.iterdir())
        except OSError as e:
            raise SourceReadError(
                f"Failed to read directory {directory}: {e}", path=directory
            ) from e

        for entry in entries:
            if entry.is_dir():
                yield from self._walk(entry)
            else:
                yield entry

    def _parse(self, file_path: Path, relative: Path):
        try:
            contents = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("source_read_error", file=str(relative), error=str(e))
            raise SourceReadError(f"Failed to read {relative}: {e}", path=file_path) from e

        if file_path.suffix.lower() in TOML_SUFFIXES:
            return _parse_toml(contents, relative)
        return _parse_yaml(contents, relative)


def _parse_toml(contents: str, relative: Path) -> dict:
    try:
        return tomllib.loads(contents)
    except tomllib.TOMLDecodeError as e:
        line: Optional[int] = getattr(e, "lineno", None)
        column: Optional[int] = getattr(e, "colno", None)
        reason = getattr(e, "msg", None) or str(e)
        if line is None:
            match = _TOML_POSITION.search(str(e))
            if match:
                line, column = int(match.group(1)), int(match.group(2))
                reason = _TOML_POSITION.sub("", reason).strip()
        logger.error("toml_parse_error", file=str(relative), error=str(e))
        raise DocumentSyntaxError(relative, reason, line, column) from e


def _parse_yaml(contents: str, relative: Path):
    try:
        return yaml.load(contents, Loader=_TranslationYAMLLoader)
    except yaml.YAMLError as e:
        line = column = None
        mark = getattr(e, "problem_mark", None)
        if mark is not None:
            line, column = mark.line + 1, mark.column + 1
        reason = getattr(e, "problem", None) or str(e)
        logger.error("yaml_parse_error", file=str(relative), error=str(e))
        raise DocumentSyntaxError(relative, reason, line, column) from e


def load_documents(root: Path) -> list[SourceDocument]:
    """Load every translation document under a directory.

    Args:
        root: Translations directory.

    Returns:
        SourceDocuments in directory walk order.
    """
    return list(FileTranslationLoader(root).iter_documents())
