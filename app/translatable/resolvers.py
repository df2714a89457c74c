"""Path resolution against the translation tree.

A path is walked one segment at a time: every segment but the last must
land on a Group, the last must land on a Leaf. Resolution never mutates the
tree and is safe to run concurrently.
"""

from typing import Iterable, Union

from translatable.errors import LanguageNotAvailable, PathNotFound
from translatable.languages import Language
from translatable.models import Group, Leaf, TranslationTree
from translatable.templating import TemplateString

PathLike = Union[str, Iterable[str]]


def normalize_path(path: PathLike) -> tuple[str, ...]:
    """Convert a dotted string or a sequence of segments into a path tuple.

    Examples:
        normalize_path("greetings.formal")       # ("greetings", "formal")
        normalize_path(["greetings", "formal"])  # ("greetings", "formal")

    Raises:
        PathNotFound: If the input is neither a string nor an iterable of
            strings (for instance None or a number).
    """
    if isinstance(path, str):
        return tuple(path.split(".")) if path else ()
    try:
        segments = tuple(path)
    except TypeError as e:
        raise PathNotFound((), f"{path!r} is not a translation path") from e
    for segment in segments:
        if not isinstance(segment, str):
            raise PathNotFound(
                tuple(map(str, segments)),
                f"Path segment {segment!r} is not a string",
            )
    return segments


def resolve_path(tree: TranslationTree, path: PathLike) -> Leaf:
    """Find the translation object at a path.

    Args:
        tree: Merged translation tree.
        path: Dotted string or sequence of segments.

    Returns:
        The Leaf at the path.

    Raises:
        PathNotFound: If a segment is missing, a translation is reached
            before the path ends, or the path ends on a group.
    """
    segments = normalize_path(path)
    if not segments:
        raise PathNotFound(segments)

    node = tree
    for segment in segments:
        match node:
            case Group():
                child = node.get(segment)
                if child is None:
                    raise PathNotFound(segments)
                node = child
            case Leaf():
                raise PathNotFound(segments)

    match node:
        case Leaf():
            return node
        case Group():
            raise PathNotFound(segments)


def resolve_translation(
    leaf: Leaf, language: Language, path: PathLike = ()
) -> TemplateString:
    """Select one language from a translation object.

    Args:
        leaf: Translation object.
        language: Validated language.
        path: Path of the object, for error messages.

    Returns:
        The language's template.

    Raises:
        LanguageNotAvailable: If the object has no entry for the language.
    """
    template = leaf.get(language)
    if template is None:
        raise LanguageNotAvailable(language, normalize_path(path))
    return template
