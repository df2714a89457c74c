"""Translation template parsing and rendering.

A translation string may hold placeholders (``{name}``) and escaped braces
(``{{`` and ``}}``). Templates are parsed once, when the translation tree is
built, into literal text and placeholder tokens; rendering only walks the
parsed parts and never fails.

Rendering rules:
- ``{name}`` is replaced by ``str(value)`` when ``name`` is supplied.
- ``{name}`` is kept verbatim, braces included, when it is not.
- ``{{`` renders ``{`` and ``}}`` renders ``}``.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union


class TemplateError(ValueError):
    """Raised when a translation string holds a malformed placeholder.

    Attributes:
        position: Index in the string where the problem was found.
    """

    def __init__(self, message: str, position: int):
        super().__init__(message)
        self.position = position


@dataclass(frozen=True)
class Placeholder:
    """A placeholder token inside a template.

    Attributes:
        name: Identifier between the braces.
        start: Index of the opening brace in the original string.
        end: Index just past the closing brace.
    """

    name: str
    start: int
    end: int

    @property
    def text(self) -> str:
        """The placeholder as written, braces included."""
        return "{" + self.name + "}"


Part = Union[str, Placeholder]


@dataclass(frozen=True)
class TemplateString:
    """An immutable translation string with its parsed placeholders.

    Attributes:
        original: The string exactly as written in the source.
        parts: Literal text (escapes collapsed) and placeholders, in order.
    """

    original: str
    parts: tuple[Part, ...]

    @classmethod
    def parse(cls, raw: str) -> "TemplateString":
        """Parse a translation string.

        Args:
            raw: String as written in the translation source.

        Returns:
            TemplateString instance.

        Raises:
            TemplateError: If a brace is never closed or a placeholder name
                is not a valid identifier.
        """
        parts: list[Part] = []
        literal: list[str] = []
        i = 0
        length = len(raw)

        while i < length:
            char = raw[i]
            if char == "{":
                if raw.startswith("{{", i):
                    literal.append("{")
                    i += 2
                    continue
                close = raw.find("}", i + 1)
                if close == -1:
                    raise TemplateError(f"Found unclosed brace at index {i}", i)
                name = raw[i + 1 : close]
                if not name.isidentifier():
                    raise TemplateError(
                        f"Found template with key '{name}' which is an invalid identifier",
                        i,
                    )
                if literal:
                    parts.append("".join(literal))
                    literal = []
                parts.append(Placeholder(name=name, start=i, end=close + 1))
                i = close + 1
            elif char == "}" and raw.startswith("}}", i):
                literal.append("}")
                i += 2
            else:
                literal.append(char)
                i += 1

        if literal:
            parts.append("".join(literal))
        return cls(original=raw, parts=tuple(parts))

    @property
    def placeholders(self) -> tuple[Placeholder, ...]:
        return tuple(part for part in self.parts if isinstance(part, Placeholder))

    @property
    def placeholder_names(self) -> frozenset[str]:
        return frozenset(placeholder.name for placeholder in self.placeholders)

    @property
    def is_static(self) -> bool:
        """True when rendering always yields the original string unchanged."""
        return len(self.parts) == 0 or (
            len(self.parts) == 1 and self.parts[0] == self.original
        )

    def render(self, substitutions: Optional[Mapping[str, Any]] = None) -> str:
        """Render the template; see module docstring for the rules."""
        return render(self, substitutions)

    def __str__(self) -> str:
        return self.original


def render(
    template: TemplateString, substitutions: Optional[Mapping[str, Any]] = None
) -> str:
    """Substitute placeholders in a parsed template.

    Args:
        template: Parsed translation string.
        substitutions: Placeholder name -> value; values are rendered with str().

    Returns:
        The rendered string. Placeholders without a substitution are kept
        verbatim.
    """
    if template.is_static:
        return template.original

    substitutions = substitutions or {}
    rendered = []
    for part in template.parts:
        match part:
            case Placeholder(name=name) if name in substitutions:
                rendered.append(str(substitutions[name]))
            case Placeholder():
                rendered.append(part.text)
            case str():
                rendered.append(part)
    return "".join(rendered)
