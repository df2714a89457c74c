"""Translation tree models.

Defines the node types of the translation tree, the merge configuration
enums, the loader's intermediate records and the query input markers.

A tree is built from two node kinds:
- Group: segment name -> child node.
- Leaf: Language -> TemplateString.

Both are frozen and their mappings read-only, so a built tree can be shared
by any number of concurrent readers.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Union

from translatable.languages import Language
from translatable.templating import TemplateString


class SeekMode(str, Enum):
    """Order applied to translation sources before they are merged."""

    ALPHABETICAL = "alphabetical"
    UNALPHABETICAL = "unalphabetical"


class TranslationOverlap(str, Enum):
    """Policy for a (path, language) pair defined by more than one source.

    OVERWRITE keeps the last value merged, IGNORE keeps the first.
    """

    OVERWRITE = "overwrite"
    IGNORE = "ignore"


@dataclass(frozen=True)
class Leaf:
    """Translation object: one template per language.

    Attributes:
        translations: Language -> TemplateString (read-only).
    """

    translations: Mapping[Language, TemplateString] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(
            self, "translations", MappingProxyType(dict(self.translations))
        )

    def get(self, language: Language) -> "TemplateString | None":
        return self.translations.get(language)

    @property
    def languages(self) -> frozenset[Language]:
        return frozenset(self.translations)


@dataclass(frozen=True)
class Group:
    """Nesting object: named children, each a Group or a Leaf.

    Attributes:
        children: Segment name -> Node (read-only).
    """

    children: Mapping[str, "Node"] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "children", MappingProxyType(dict(self.children)))

    def get(self, segment: str) -> "Node | None":
        return self.children.get(segment)


Node = Union[Group, Leaf]

# The root Group produced by merging every source.
TranslationTree = Group


@dataclass(frozen=True)
class SourceDocument:
    """A parsed translation document, before structural validation.

    Attributes:
        path: Path relative to the translations root.
        segments: Sub-directories and file stem of ``path``.
        data: Generic nested value produced by the document parser.
    """

    path: Path
    segments: tuple[str, ...]
    data: Any


@dataclass(frozen=True)
class SourceTree:
    """A structurally validated translation document.

    Attributes:
        path: Path relative to the translations root.
        segments: Sub-directories and file stem of ``path``.
        root: Top-level Group of the document.
    """

    path: Path
    segments: tuple[str, ...]
    root: Group


@dataclass(frozen=True)
class Static:
    """Marks a query input as known before any query executes."""

    value: Any


@dataclass(frozen=True)
class Dynamic:
    """Marks a query input as only known when the query executes."""

    value: Any
