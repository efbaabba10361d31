"""Record domain value objects.

Status and link kind are open vocabularies: a closed set of known values plus
verbatim text for anything else. Historical documents use inconsistent words
(``Superceded``, ``Draft``, ``Rejected``), so coercion from text never fails.
"""

from enum import StrEnum
from typing import Any

from pydantic import field_validator

from adrs.domain.shared.model.value import RootValueObject, ValueObject


class StatusKind(StrEnum):
    PROPOSED = "proposed"
    ACCEPTED = "accepted"
    DEPRECATED = "deprecated"
    SUPERSEDED = "superseded"

    @property
    def display(self) -> str:
        return self.value.capitalize()


class LinkType(StrEnum):
    SUPERSEDES = "supersedes"
    SUPERSEDED_BY = "superseded-by"
    AMENDS = "amends"
    AMENDED_BY = "amended-by"
    RELATES_TO = "relates-to"

    @property
    def display(self) -> str:
        return self.value.replace("-", " ").capitalize()


_STATUS_WORDS: dict[str, StatusKind] = {kind.value: kind for kind in StatusKind}
_STATUS_WORDS["superceded"] = StatusKind.SUPERSEDED  # adr-tools misspelling

_LINK_WORDS: dict[str, LinkType] = {t.display.lower(): t for t in LinkType}
_LINK_WORDS.update({phrase.replace(" ", ""): t for phrase, t in list(_LINK_WORDS.items())})


def _normalize_phrase(text: str) -> str:
    return " ".join(text.replace("-", " ").replace("_", " ").lower().split())


class RecordStatus(RootValueObject[StatusKind | str]):
    """Lifecycle status of a record.

    Known statuses are stored as ``StatusKind``; any other text is kept
    verbatim. ``str()`` gives the canonical display name for known statuses
    and the original text otherwise.

    Example:
        >>> RecordStatus("SUPERCEDED").kind
        <StatusKind.SUPERSEDED: 'superseded'>
        >>> str(RecordStatus("Draft"))
        'Draft'
    """

    @field_validator("root", mode="before")
    @classmethod
    def _coerce(cls, v: Any) -> Any:
        if isinstance(v, StatusKind):
            return v
        if v is None:
            return ""
        text = str(v)
        return _STATUS_WORDS.get(text.strip().lower(), text)

    @property
    def kind(self) -> StatusKind | None:
        """The known status, or None for custom text."""
        return self.root if isinstance(self.root, StatusKind) else None

    @property
    def is_custom(self) -> bool:
        return self.kind is None

    @property
    def is_blank(self) -> bool:
        """True for a custom status holding only whitespace."""
        return self.is_custom and not self.root.strip()

    @property
    def canonical(self) -> str:
        """Serialized form: lower-case name for known statuses, verbatim text otherwise."""
        kind = self.kind
        return kind.value if kind is not None else self.root

    def __str__(self) -> str:
        kind = self.kind
        return kind.display if kind is not None else self.root


class LinkKind(RootValueObject[LinkType | str]):
    """Kind of relationship a link expresses.

    Accepts ``"Superseded by"``, ``"superseded-by"``, ``"superseded_by"`` and
    ``"supersededby"`` alike. Unknown kinds are kept verbatim.
    """

    @field_validator("root", mode="before")
    @classmethod
    def _coerce(cls, v: Any) -> Any:
        if isinstance(v, LinkType):
            return v
        text = "" if v is None else str(v)
        return _LINK_WORDS.get(_normalize_phrase(text), text)

    @property
    def link_type(self) -> LinkType | None:
        """The known link type, or None for a custom tag."""
        return self.root if isinstance(self.root, LinkType) else None

    @property
    def is_custom(self) -> bool:
        return self.link_type is None

    @property
    def canonical(self) -> str:
        link_type = self.link_type
        return link_type.value if link_type is not None else self.root

    def __str__(self) -> str:
        link_type = self.link_type
        return link_type.display if link_type is not None else self.root


class Link(ValueObject):
    """A directed, typed reference from one record to another by number.

    The target is not checked against the collection here; dangling targets
    are reported by the doctor.
    """

    target: int
    kind: LinkKind
    description: str | None = None
