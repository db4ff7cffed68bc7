from __future__ import annotations
import re
import string
from typing import List

_LEADING_ARTICLE = re.compile(r"^(the|a|an)\s+", re.IGNORECASE)
_STRIP = string.punctuation + string.whitespace + "“”‘’"
# short lower-case words are often acronyms typed lazily ("usa", "nato")
_ACRONYM_MAX_LEN = 5


def capitalize_title(title: str) -> str:
    """Upper-case the first character the way Wikipedia titles are stored."""
    return title[:1].upper() + title[1:]


def cooked_titles(title: str) -> List[str]:
    """
    Return the textual forms of *title* worth looking up, best first:
    the trimmed title, the title without surrounding punctuation, the
    title without a leading English article, and for short lower-case
    words the all-caps acronym.
    """
    forms: List[str] = []

    def add(form: str) -> None:
        form = form.strip()
        if form and form not in forms:
            forms.append(form)

    trimmed = title.strip()
    add(trimmed)
    bare = trimmed.strip(_STRIP)
    add(bare)
    add(_LEADING_ARTICLE.sub("", bare, count=1))
    if bare.isalpha() and bare.islower() and len(bare) <= _ACRONYM_MAX_LEN:
        add(bare.upper())
    return forms
