"""Markdown body splitting shared by both document formats."""

_HEADING = "## "
_FENCES = ("```", "~~~")

BODY_SECTIONS = ("context", "decision", "consequences")


def split_sections(lines: list[str], *, respect_fences: bool = False) -> dict[str, str]:
    """Split body lines on second-level headings.

    Returns a mapping of lower-cased heading name to the trimmed text under it.
    A repeated heading keeps its last occurrence. Text before the first
    heading is dropped. With ``respect_fences`` set, headings inside fenced
    code blocks are treated as ordinary text.
    """
    sections: dict[str, str] = {}
    current: str | None = None
    buffer: list[str] = []
    in_fence = False

    for line in lines:
        if respect_fences and line.lstrip().startswith(_FENCES):
            in_fence = not in_fence
        elif not in_fence and line.startswith(_HEADING):
            if current is not None:
                sections[current] = "\n".join(buffer).strip()
            current = line[len(_HEADING) :].strip().lower()
            buffer = []
            continue
        buffer.append(line)

    if current is not None:
        sections[current] = "\n".join(buffer).strip()
    return sections
