"""
URL slugs for catalog entities.
Lowercase ASCII words joined by single hyphens: "Computer Science & Engg." -> "computer-science-engg".
"""

import re
import unicodedata

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(value: str) -> str:
    """
    Build a slug from a display name.

    Accents are folded to ASCII; every run of other characters becomes one hyphen;
    leading and trailing hyphens are dropped. Empty or blank input gives "".
    """
    if not value:
        return ""
    folded = unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
    return _NON_ALNUM.sub("-", folded.lower()).strip("-")
