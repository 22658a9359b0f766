"""
Contact information parser for resumes.

Extracts name, email, phone, location and profile links from the
contact section of canonical resume text.
"""

from dataclasses import dataclass
from typing import Optional

from resumecraft.nlp.patterns import (
    EMAIL_PATTERN,
    GITHUB_PATTERN,
    LINKEDIN_PATTERNS,
    PHONE_MAX_DIGITS,
    PHONE_MIN_DIGITS,
    PHONE_PATTERN,
    PROFILE_DOMAIN,
    URL_PATTERN,
)
from resumecraft.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ContactInfo:
    """Contact information extracted from a resume. Every field may be absent."""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None
    website: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not any(
            (self.name, self.email, self.phone, self.location, self.linkedin, self.github, self.website)
        )


class ContactParser:
    """Parser for extracting contact information from a contact section."""

    # Tokens that disqualify a line from being a name or a location
    LINK_TOKENS = ("@", PROFILE_DOMAIN, "github", "http")

    def parse(self, section_text: str) -> ContactInfo:
        """
        Parse contact information from a contact section.

        Args:
            section_text: Body of the contact section

        Returns:
            ContactInfo with whatever could be found
        """
        if not section_text or not section_text.strip():
            return ContactInfo()

        lines = [line.strip() for line in section_text.splitlines() if line.strip()]
        linkedin = self._extract_linkedin(section_text)
        github = self._extract_github(section_text)

        return ContactInfo(
            name=self._extract_name(lines),
            email=self._extract_email(section_text),
            phone=self._extract_phone(section_text),
            location=self._extract_location(lines),
            linkedin=linkedin,
            github=github,
            website=self._extract_website(section_text),
        )

    def _extract_email(self, text: str) -> Optional[str]:
        match = EMAIL_PATTERN.search(text)
        return match.group(0) if match else None

    def _extract_phone(self, text: str) -> Optional[str]:
        """Return the first phone-like match with a plausible digit count."""
        for match in PHONE_PATTERN.finditer(text):
            candidate = match.group(0).strip()
            digits = sum(ch.isdigit() for ch in candidate)
            if PHONE_MIN_DIGITS <= digits <= PHONE_MAX_DIGITS:
                return candidate
        return None

    def _extract_linkedin(self, text: str) -> Optional[str]:
        for pattern in LINKEDIN_PATTERNS:
            match = pattern.search(text)
            if match:
                return self._with_scheme(match.group(0))
        return None

    def _extract_github(self, text: str) -> Optional[str]:
        match = GITHUB_PATTERN.search(text)
        return self._with_scheme(match.group(0)) if match else None

    def _extract_website(self, text: str) -> Optional[str]:
        """First http(s) URL that is neither a LinkedIn nor a GitHub link."""
        for match in URL_PATTERN.finditer(text):
            url = match.group(0).rstrip(".,;)")
            lowered = url.lower()
            if "linkedin.com" in lowered or "github.com" in lowered:
                continue
            return url
        return None

    def _extract_location(self, lines: list[str]) -> Optional[str]:
        """First line with a comma that is not an email or link line."""
        for line in lines:
            if "," in line and not self._has_link_token(line):
                return line
        return None

    def _extract_name(self, lines: list[str]) -> Optional[str]:
        """The first line, or the second one if the first is disqualified."""
        for line in lines[:2]:
            if not self._has_link_token(line):
                return line
        return None

    def _has_link_token(self, line: str) -> bool:
        lowered = line.lower()
        return any(token in lowered for token in self.LINK_TOKENS)

    @staticmethod
    def _with_scheme(url: str) -> str:
        if url.lower().startswith("http"):
            return url
        return "https://" + url
