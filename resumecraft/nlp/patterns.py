"""
Named regular expressions shared by the canonicalizer, section splitter
and entity parsers.

Extraction behavior depends on the exact edge cases of these patterns
(two-digit years, "Present" in any case, international phone numbers),
so every pattern here has its own unit tests.
"""

import re
from typing import Final

from resumecraft.utils.constants import CANONICAL_HEADERS


# =============================================================================
# Dates
# =============================================================================

MONTH: Final[str] = (
    r"(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?|"
    r"aug(?:ust)?|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)"
)

# "Jan 2020", "Sept. 2019", "Mar '19", "03/2019", "3/19", "2016"
DATE_TOKEN: Final[str] = (
    rf"(?:\b{MONTH}\.?\s*'?(?:\d{{4}}|\d{{2}})\b"
    r"|\b\d{1,2}/(?:\d{4}|\d{2})\b"
    r"|\b(?:19|20)\d{2}\b)"
)

ONGOING_TOKEN: Final[str] = r"(?:\bpresent\b|\bcurrent\b)"

# "Jan 2020 - Present", "03/2019-06/2021", "Jun 2018 – Dec 2019", "2016 to 2020"
DATE_RANGE_PATTERN: Final[re.Pattern] = re.compile(
    rf"(?P<start>{DATE_TOKEN})\s*(?:[-–—]|\bto\b)\s*(?P<end>{DATE_TOKEN}|{ONGOING_TOKEN})",
    re.IGNORECASE,
)

YEAR_PATTERN: Final[re.Pattern] = re.compile(r"\b(?:19|20)\d{2}\b")


# =============================================================================
# Contact
# =============================================================================

EMAIL_PATTERN: Final[re.Pattern] = re.compile(
    r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}"
)

# Candidate phone numbers; callers keep the first with 7-15 digits
PHONE_PATTERN: Final[re.Pattern] = re.compile(
    r"(?<![\w+])(?:\+\d{1,3}[ \t.-]?)?(?:\(\d{1,4}\)[ \t.-]?)?\d{2,4}(?:[ \t.-]?\d{2,4}){1,4}(?!\w)"
)
PHONE_MIN_DIGITS: Final[int] = 7
PHONE_MAX_DIGITS: Final[int] = 15

PROFILE_DOMAIN: Final[str] = "linkedin"

# Tried in order; the first hit wins
LINKEDIN_PATTERNS: Final[tuple[re.Pattern, ...]] = (
    re.compile(r"(?:https?://)?(?:www\.)?linkedin\.com/in/[A-Za-z0-9_-]+", re.IGNORECASE),
    re.compile(r"(?:https?://)?(?:www\.)?linkedin\.com/[A-Za-z0-9_-]+", re.IGNORECASE),
)

GITHUB_PATTERN: Final[re.Pattern] = re.compile(
    r"(?:https?://)?(?:www\.)?github\.com/[A-Za-z0-9._-]+", re.IGNORECASE
)

URL_PATTERN: Final[re.Pattern] = re.compile(r"\bhttps?://[^\s]+", re.IGNORECASE)


# =============================================================================
# Section headers
# =============================================================================

# Header spellings recognized by the section splitter, canonical and raw.
# Spaces stand for any run of horizontal whitespace.
HEADER_SPELLINGS: Final[tuple[str, ...]] = (
    "CONTACT", "PERSONAL INFORMATION", "PERSONAL DETAILS",
    "SUMMARY", "PROFILE",
    "SKILLS", "TECHNICAL SKILLS",
    "WORK EXPERIENCE", "PROFESSIONAL EXPERIENCE", "EMPLOYMENT HISTORY", "EMPLOYMENT", "EXPERIENCE",
    "EDUCATION", "ACADEMIC BACKGROUND",
    "PROJECTS",
    "EXTRACURRICULAR", "EXTRACURRICULAR ACTIVITIES", "ACTIVITIES",
    "LANGUAGES",
    "OTHER", "MISCELLANEOUS", "ADDITIONAL INFORMATION", "ADDITIONAL INFO",
    "KONTAKT", "PERS(?:Ö|OE)NLICHE DATEN",
    "ZUSAMMENFASSUNG", "KURZPROFIL", "PROFIL", "(?:Ü|UE)BER MICH",
    "BERUFSERFAHRUNG", "BERUFLICHE ERFAHRUNG", "ARBEITSERFAHRUNG", "BERUFLICHER WERDEGANG", "WERDEGANG",
    "AUSBILDUNG", "STUDIUM", "BILDUNG", "AKADEMISCHER HINTERGRUND",
    "PROJEKTE",
    "AKTIVIT(?:Ä|AE)TEN", "EHRENAMT", "VEREINE",
    "F(?:Ä|AE)HIGKEITEN", "KENNTNISSE", "KOMPETENZEN",
    "SPRACHEN",
    "SONSTIGES", "SONSTIGE ANGABEN", "WEITERE ANGABEN",
)


def _spaced(spelling: str) -> str:
    return spelling.replace(" ", r"[ \t]+")


SECTION_HEADER_PATTERN: Final[re.Pattern] = re.compile(
    r"^[ \t]*(?P<header>"
    + "|".join(_spaced(s) for s in HEADER_SPELLINGS)
    + r")[ \t]*:?[ \t]*$",
    re.IGNORECASE | re.MULTILINE,
)

# One pattern per canonical header: a bare header line, any case, colon optional
CANONICAL_HEADER_PATTERNS: Final[tuple[tuple[str, re.Pattern], ...]] = tuple(
    (
        header,
        re.compile(rf"^[ \t]*{_spaced(header)}[ \t]*:?[ \t]*$", re.IGNORECASE | re.MULTILINE),
    )
    for header in CANONICAL_HEADERS
)


# =============================================================================
# Canonicalizer clean-up
# =============================================================================

BOLD_MARKER_PATTERN: Final[re.Pattern] = re.compile(r"\*\*|__")
HEADING_MARKER_PATTERN: Final[re.Pattern] = re.compile(r"^[ \t]*#{1,6}[ \t]*", re.MULTILINE)
PLACEHOLDER_PATTERN: Final[re.Pattern] = re.compile(r"\[[^\]\n]*\]")
EXPLANATORY_LINE_PATTERN: Final[re.Pattern] = re.compile(
    r"^[ \t]*(?:note|important)\s*:.*$|^[ \t]*skills are categorized.*$",
    re.IGNORECASE | re.MULTILINE,
)
DASH_BULLET_PATTERN: Final[re.Pattern] = re.compile(r"^[ \t]*[-*][ \t]+", re.MULTILINE)
TRAILING_SPACE_PATTERN: Final[re.Pattern] = re.compile(r"[ \t]+$", re.MULTILINE)
EXCESS_NEWLINES_PATTERN: Final[re.Pattern] = re.compile(r"\n{3,}")


# =============================================================================
# Entity fields
# =============================================================================

BULLET_CHARS: Final[str] = "•‣◦⁃∙*"

# A leading list marker: bullet glyph, asterisk, or a hyphen followed by space
BULLET_PREFIX_PATTERN: Final[re.Pattern] = re.compile(
    rf"^\s*(?:[{BULLET_CHARS}]|-(?=\s))\s*"
)

# Bullet glyphs, asterisks, and hyphens not joining two word characters
SKILL_SPLIT_PATTERN: Final[re.Pattern] = re.compile(
    rf"[{BULLET_CHARS}]|(?<!\w)-|-(?!\w)"
)

# Field separators inside an entry header line; hyphens only when spaced
FIELD_SEPARATOR_PATTERN: Final[re.Pattern] = re.compile(r"\s*[,|–—]\s*|\s+-\s+")

# "Software Engineer at Acme", "BSc Physics from ETH Zurich"
ENTRY_CONNECTOR_PATTERN: Final[re.Pattern] = re.compile(r"\s+(?:at|from)\s+", re.IGNORECASE)

DEGREE_HINT_PATTERN: Final[re.Pattern] = re.compile(
    r"\b(?:b\.?\s?sc|m\.?\s?sc|b\.?\s?a|m\.?\s?a|b\.?\s?eng|m\.?\s?eng|b\.?\s?tech|m\.?\s?tech"
    r"|bachelor|master|ph\.?\s?d|doctor(?:ate)?|diplom[a]?|mba|associate|abitur|degree)\b",
    re.IGNORECASE,
)

LANGUAGE_TOKEN_PATTERN: Final[re.Pattern] = re.compile(
    r"^(?P<name>.+?)\s*\((?P<proficiency>.+?)\)"
)

# "German: C1", "English - Native", "French – Basic"
LANGUAGE_PAIR_PATTERN: Final[re.Pattern] = re.compile(
    r"^(?P<name>.+?)\s*(?::|\s[-–—]\s)\s*(?P<proficiency>.+)$"
)

LINK_LINE_PATTERN: Final[re.Pattern] = re.compile(
    r"^(?:link|url|website)\s*:\s*(?P<url>\S+)", re.IGNORECASE
)
