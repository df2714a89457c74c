"""Merging of per-document trees into one translation tree.

Sources are ordered once by relative path (ascending for
``alphabetical``, descending for ``unalphabetical``) and folded left to
right. Groups are unioned recursively and translations are unioned per
language; when two sources define the same (path, language) pair the
overlap policy decides the winner. A path that is a group in one source and
a translation in another cannot be reconciled and aborts the merge.
"""

from typing import Iterable, Sequence

from translatable.errors import MergeConflictError
from translatable.logging import get_module_logger
from translatable.models import (
    Group,
    Leaf,
    Node,
    SeekMode,
    SourceTree,
    TranslationOverlap,
    TranslationTree,
)

logger = get_module_logger()


def order_sources(sources: Iterable[SourceTree], seek_mode: SeekMode) -> list[SourceTree]:
    """Sort sources by case-insensitive relative path according to seek mode."""
    return sorted(
        sources,
        key=lambda source: source.path.as_posix().lower(),
        reverse=seek_mode == SeekMode.UNALPHABETICAL,
    )


def merge_nodes(
    existing: Node,
    incoming: Node,
    overlap: TranslationOverlap,
    path: tuple[str, ...] = (),
) -> Node:
    """Merge two nodes found at the same path.

    Args:
        existing: Node already accumulated.
        incoming: Node from the source being merged.
        overlap: Policy for duplicate (path, language) pairs.
        path: Path of both nodes, for error messages.

    Returns:
        A new node; neither input is modified.

    Raises:
        MergeConflictError: If one node is a Group and the other a Leaf.
    """
    match existing, incoming:
        case Group(), Group():
            children = dict(existing.children)
            for name, child in incoming.children.items():
                if name in children:
                    children[name] = merge_nodes(
                        children[name], child, overlap, path + (name,)
                    )
                else:
                    children[name] = child
            return Group(children)

        case Leaf(), Leaf():
            translations = dict(existing.translations)
            for language, template in incoming.translations.items():
                if language in translations and overlap == TranslationOverlap.IGNORE:
                    logger.debug(
                        "translation_overlap_ignored",
                        path=".".join(path),
                        language=language.value,
                    )
                    continue
                if language in translations:
                    logger.debug(
                        "translation_overlap_overwritten",
                        path=".".join(path),
                        language=language.value,
                    )
                translations[language] = template
            return Leaf(translations)

        case _:
            logger.error("translation_merge_conflict", path=".".join(path))
            raise MergeConflictError(
                path,
                f"{type(existing).__name__.lower()} merged with "
                f"{type(incoming).__name__.lower()}",
            )


def merge_groups(
    trees: Sequence[Group], overlap: TranslationOverlap
) -> TranslationTree:
    """Fold groups left to right into one tree, without reordering."""
    merged = Group()
    for tree in trees:
        merged = merge_nodes(merged, tree, overlap)
    return merged


def _namespaced(source: SourceTree) -> Group:
    node: Group = source.root
    for segment in reversed(source.segments):
        node = Group({segment: node})
    return node


def merge_sources(
    sources: Iterable[SourceTree],
    seek_mode: SeekMode = SeekMode.ALPHABETICAL,
    overlap: TranslationOverlap = TranslationOverlap.OVERWRITE,
    namespaced: bool = False,
) -> TranslationTree:
    """Merge validated documents into the translation tree.

    Args:
        sources: Validated documents, in any order.
        seek_mode: Ordering applied before merging.
        overlap: Policy for duplicate (path, language) pairs.
        namespaced: Nest each document under its path segments instead of
            merging it at the root.

    Returns:
        The merged tree.

    Raises:
        MergeConflictError: If sources disagree on a node kind.
    """
    ordered = order_sources(sources, seek_mode)
    trees = [_namespaced(source) if namespaced else source.root for source in ordered]
    tree = merge_groups(trees, overlap)

    logger.info(
        "translation_sources_merged",
        source_count=len(ordered),
        seek_mode=seek_mode.value,
        overlap=overlap.value,
        namespaced=namespaced,
    )
    return tree
