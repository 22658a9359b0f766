"""Paragraph buffering shared by the projects and extracurricular parsers."""


def split_paragraphs(text: str) -> list[list[str]]:
    """
    Group consecutive non-blank lines into paragraphs.

    A blank line closes the current paragraph; a trailing paragraph is
    closed at the end of input. Lines are stripped.
    """
    paragraphs: list[list[str]] = []
    buffer: list[str] = []

    for raw in text.splitlines():
        line = raw.strip()
        if line:
            buffer.append(line)
        elif buffer:
            paragraphs.append(buffer)
            buffer = []

    if buffer:
        paragraphs.append(buffer)

    return paragraphs
