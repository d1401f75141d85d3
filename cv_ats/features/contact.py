from __future__ import annotations

import re

from cv_ats.schemas import ContactDetails

_EMAIL_RE = re.compile(r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}", re.IGNORECASE)
_PHONE_RE = re.compile(r"(?:\+?\d{1,3}[-. ]?)?\(?\d{2,4}\)?[-. ]?\d{3,4}[-. ]?\d{3,4}")
_LINKEDIN_RE = re.compile(r"linkedin\.com/[A-Za-z0-9/_-]+", re.IGNORECASE)
_WEBSITE_RE = re.compile(r"https?://(?:www\.)?[A-Za-z0-9._-]+\.[A-Za-z]{2,}", re.IGNORECASE)
_LOCATION_RE = re.compile(r"\b[A-Z][A-Za-z.'-]+(?: [A-Z][A-Za-z.'-]+){0,2}, ?[A-Z][A-Za-z]+\b")
_NAME_RE = re.compile(r"^[A-Za-z ,.'-]{4,40}$")
_YEAR_RUN_RE = re.compile(r"^(?:(?:19|20)\d{2}[-. ]?)+$")


def _first_match(pattern: re.Pattern[str], text: str) -> str | None:
    match = pattern.search(text)
    if match is None:
        return None
    value = match.group(0).strip()
    return value or None


def extract_email(text: str) -> str | None:
    return _first_match(_EMAIL_RE, text)


def extract_phone(text: str) -> str | None:
    # Every accepted shape carries at least eight digits; runs of years are not phones.
    for match in _PHONE_RE.finditer(text):
        candidate = match.group(0).strip()
        if not _YEAR_RUN_RE.match(candidate):
            return candidate
    return None


def extract_linkedin(text: str) -> str | None:
    value = _first_match(_LINKEDIN_RE, text)
    if value is None:
        return None
    return f"https://{value}"


def extract_website(text: str) -> str | None:
    return _first_match(_WEBSITE_RE, text)


def extract_location(text: str) -> str | None:
    return _first_match(_LOCATION_RE, text)


def looks_like_name(line: str) -> bool:
    return bool(_NAME_RE.match(line))


def extract_name(text: str) -> str | None:
    """Only the first line is ever considered; later lines are too ambiguous."""
    first_line = text.split("\n", 1)[0].strip()
    if first_line and looks_like_name(first_line):
        return first_line
    return None


def extract_contact_details(text: str) -> ContactDetails:
    return ContactDetails(
        name=extract_name(text),
        email=extract_email(text),
        phone=extract_phone(text),
        location=extract_location(text),
        linkedin=extract_linkedin(text),
        website=extract_website(text),
    )
