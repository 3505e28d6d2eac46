"""
Culture - Language/region identifiers used as resolution parameters

A culture is identified by a tag such as "de-DE". Cultures form a chain used
by resource stores for fallback resolution:

    de-DE -> de -> (invariant)

The invariant culture has an empty name and is the root of every chain.
"""

import locale
import logging
import os
import re
from dataclasses import dataclass
from typing import Iterator, Optional, Union

from ..constants import AMBIENT_LOCALE_VARS, INVARIANT_CULTURE_NAME

logger = logging.getLogger(__name__)

# language[-Script][-REGION][-variant...]
_TAG_PATTERN = re.compile(
    r"^(?P<language>[A-Za-z]{2,3})"
    r"(?:-(?P<script>[A-Za-z]{4}))?"
    r"(?:-(?P<region>[A-Za-z]{2}|\d{3}))?"
    r"(?P<variants>(?:-[A-Za-z0-9]{5,8})*)$"
)


def normalize_tag(tag: str) -> str:
    """
    Normalize a culture tag to its canonical form.

    Accepts "_" as separator (POSIX style). Language is lower-cased,
    script title-cased and region upper-cased.

    Args:
        tag: Raw culture tag (e.g. "de_de", "DE-DE", "zh-hant-tw")

    Returns:
        Canonical tag (e.g. "de-DE"), or "" for the invariant culture

    Raises:
        ValueError: If the tag is not a valid culture tag
    """
    tag = tag.strip().replace("_", "-")
    if tag == INVARIANT_CULTURE_NAME:
        return INVARIANT_CULTURE_NAME

    match = _TAG_PATTERN.match(tag)
    if match is None:
        raise ValueError(f"Invalid culture tag: {tag!r}")

    parts = [match.group("language").lower()]
    if match.group("script"):
        parts.append(match.group("script").title())
    if match.group("region"):
        parts.append(match.group("region").upper())
    if match.group("variants"):
        parts.extend(v.lower() for v in match.group("variants").strip("-").split("-"))
    return "-".join(parts)


@dataclass(frozen=True)
class CultureInfo:
    """
    Immutable culture identifier.

    Equality and hashing are by normalized tag, so CultureInfo("de_de")
    equals CultureInfo("de-DE").

    Usage:
        culture = CultureInfo("de-DE")
        culture.parent            # CultureInfo("de")
        list(culture.fallback_chain())  # [de-DE, de, invariant]
    """
    name: str = INVARIANT_CULTURE_NAME

    def __post_init__(self):
        object.__setattr__(self, "name", normalize_tag(self.name))

    @classmethod
    def invariant(cls) -> "CultureInfo":
        """Get the invariant (default) culture."""
        return cls(INVARIANT_CULTURE_NAME)

    @classmethod
    def current_ui_culture(cls) -> "CultureInfo":
        """
        Detect the ambient UI culture of the process.

        Environment variables are checked first (LANGUAGE, LC_ALL,
        LC_MESSAGES, LANG), then the locale module. Anything that cannot
        be parsed yields the invariant culture.
        """
        for var in AMBIENT_LOCALE_VARS:
            value = os.environ.get(var)
            if not value:
                continue
            # LANGUAGE may hold a priority list ("de_DE:en")
            culture = _culture_from_locale_name(value.split(":")[0])
            if culture is not None:
                return culture

        try:
            lang, _encoding = locale.getlocale()
        except ValueError:
            lang = None

        if lang:
            culture = _culture_from_locale_name(lang)
            if culture is not None:
                return culture

        return cls.invariant()

    @classmethod
    def coerce(cls, value: Union["CultureInfo", str]) -> "CultureInfo":
        """Build a CultureInfo from a tag string, or return it unchanged."""
        if isinstance(value, CultureInfo):
            return value
        if isinstance(value, str):
            return cls(value)
        raise TypeError(f"Expected CultureInfo or str, got {type(value).__name__}")

    @property
    def is_invariant(self) -> bool:
        return self.name == INVARIANT_CULTURE_NAME

    @property
    def is_neutral(self) -> bool:
        """True for a language-only culture such as "de"."""
        return not self.is_invariant and "-" not in self.name

    @property
    def language(self) -> str:
        return self.name.split("-", 1)[0]

    @property
    def parent(self) -> "CultureInfo":
        """
        Get the parent culture.

        "zh-Hant-TW" -> "zh-Hant" -> "zh" -> invariant. The invariant
        culture is its own parent.
        """
        if self.is_invariant:
            return self
        if "-" not in self.name:
            return CultureInfo.invariant()
        return CultureInfo(self.name.rsplit("-", 1)[0])

    def fallback_chain(self) -> Iterator["CultureInfo"]:
        """Yield this culture and its ancestors, ending with invariant."""
        culture = self
        while True:
            yield culture
            if culture.is_invariant:
                return
            culture = culture.parent

    def __str__(self) -> str:
        return self.name


def _culture_from_locale_name(value: str) -> Optional[CultureInfo]:
    """Convert a POSIX locale name ("de_DE.UTF-8@euro") to a culture."""
    name = value.split(".", 1)[0].split("@", 1)[0].strip()
    if name in ("C", "POSIX"):
        return CultureInfo.invariant()
    try:
        return CultureInfo(name)
    except ValueError:
        logger.debug(f"Ignoring unparsable locale name: {value!r}")
        return None
