"""
Resume canonicalization via a text-generation service.

Raw extracted text is reorganized by the model into a fixed seven-header
layout, then known model artifacts (markdown emphasis, placeholders,
explanatory notes, header variants) are cleaned from the reply.
"""

import re
import unicodedata

from resumecraft.exceptions import EmptyCanonicalization
from resumecraft.nlp.patterns import (
    BOLD_MARKER_PATTERN,
    CANONICAL_HEADER_PATTERNS,
    DASH_BULLET_PATTERN,
    EXCESS_NEWLINES_PATTERN,
    EXPLANATORY_LINE_PATTERN,
    HEADING_MARKER_PATTERN,
    PLACEHOLDER_PATTERN,
    TRAILING_SPACE_PATTERN,
)
from resumecraft.services.generation import GenerationService
from resumecraft.utils.logger import LoggerMixin

SYSTEM_PROMPT = """You are a résumé parser. Rewrite the résumé text you are given using exactly these section headers, each on its own line and followed by a colon:

CONTACT:
Full name, email, phone, location, LinkedIn profile, website or GitHub, one per line.

SKILLS:
Skills separated by commas. Put a category before a colon when the source groups them, e.g. "Languages: Python, Go".

WORK EXPERIENCE:
For each job: a line "Job Title at Company", then a line "Location | MMM YYYY - MMM YYYY" (use "Present" for an ongoing job), then one bullet line per responsibility or achievement. Separate jobs with a blank line.

EDUCATION:
For each entry: a line "Degree, School", then a line "MMM YYYY - MMM YYYY", then any details. Separate entries with a blank line.

PROJECTS:
For each project: the project name on its own line, then its description. Add "Link: URL" when the source has one. Separate projects with a blank line.

EXTRACURRICULAR:
For each activity: a line "Role at Organization", then its description. Separate activities with a blank line.

LANGUAGES:
Language (Proficiency), Language (Proficiency)

Rules:
1. Use only the headers above, spelled exactly as shown and followed by a colon.
2. Do not use bold, italics, headings or any other markdown.
3. Do not write placeholders in square brackets or explanatory notes.
4. Do not invent anything that is not in the original text.
5. Keep a header with empty content when the résumé has nothing for that section.
6. Keep all factual content and drop duplicated information.
7. Write every date as a three-letter month and a four-digit year, e.g. "Oct 2022".
8. Start every list item and job responsibility with "• ".
"""

USER_PROMPT_TEMPLATE = "Reorganize this résumé text using the exact format:\n\n{text}"

_INVISIBLE_CHARS = {
    "\u00a0": " ",  # Non-breaking space
    "\u00ad": "",  # Soft hyphen
    "\ufeff": "",  # BOM
    "\u200b": "",  # Zero-width space
    "\t": " ",
}

_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def normalize_raw_text(text: str) -> str:
    """Normalize extracted text before it is sent to the model."""
    if not text:
        return ""

    text = unicodedata.normalize("NFKC", text)
    for old, new in _INVISIBLE_CHARS.items():
        text = text.replace(old, new)

    text = _CONTROL_CHARS.sub("", text)
    text = text.replace("\r\n", "\n").replace("\r", "\n")

    lines = [line.strip() for line in text.split("\n")]
    text = EXCESS_NEWLINES_PATTERN.sub("\n\n", "\n".join(lines))
    return text.strip()


def clean_canonical_text(text: str) -> str:
    """
    Remove known model artifacts from a canonicalized reply.

    Steps run in a fixed order: emphasis and heading markers, bracketed
    placeholders, Note:/Important: lines, bare header lines rewritten to
    the literal header plus colon, dash and asterisk bullets turned into
    "•", trailing spaces, runs of blank lines, outer whitespace.
    """
    cleaned = BOLD_MARKER_PATTERN.sub("", text)
    cleaned = HEADING_MARKER_PATTERN.sub("", cleaned)
    cleaned = PLACEHOLDER_PATTERN.sub("", cleaned)
    cleaned = EXPLANATORY_LINE_PATTERN.sub("", cleaned)

    for header, pattern in CANONICAL_HEADER_PATTERNS:
        cleaned = pattern.sub(f"{header}:", cleaned)

    cleaned = DASH_BULLET_PATTERN.sub("• ", cleaned)
    cleaned = TRAILING_SPACE_PATTERN.sub("", cleaned)
    cleaned = EXCESS_NEWLINES_PATTERN.sub("\n\n", cleaned)
    return cleaned.strip()


class Canonicalizer(LoggerMixin):
    """Reorganizes raw resume text into the canonical header layout."""

    def __init__(self, service: GenerationService):
        self.service = service

    async def canonicalize(self, raw_text: str) -> str:
        """
        Canonicalize raw text with one generation request.

        Generation errors and cancellation propagate unchanged; there is
        no retry here.

        Raises:
            EmptyCanonicalization: If the cleaned reply is blank
        """
        prepared = normalize_raw_text(raw_text)
        self.logger.info(f"Canonicalizing {len(prepared)} characters of resume text")

        reply = await self.service.generate(
            SYSTEM_PROMPT, USER_PROMPT_TEMPLATE.format(text=prepared)
        )

        canonical = clean_canonical_text(reply)
        if not canonical:
            self.logger.error("Generation service returned an empty canonicalization")
            raise EmptyCanonicalization("Canonicalization produced no text")

        self.logger.debug(f"Canonical text has {len(canonical.splitlines())} lines")
        return canonical
