"""
Word helpers for identifier suggestions: camelCase splitting and English
plural forms. Heuristic element names come from container names
(``names`` -> ``name``), type-based names from class names
(``ArrayList`` -> ``arrayList``, ``list``).
"""

import re
from typing import List, Optional

_CAMEL_WORD = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|\d+")

_IRREGULAR_PLURALS = {
    "child": "children",
    "person": "people",
    "man": "men",
    "woman": "women",
    "foot": "feet",
    "tooth": "teeth",
    "mouse": "mice",
    "index": "indices",
    "matrix": "matrices",
    "vertex": "vertices",
    "axis": "axes",
    "analysis": "analyses",
    "criterion": "criteria",
    "bus": "buses",
    "leaf": "leaves",
    "life": "lives",
    "knife": "knives",
    "wife": "wives",
    "half": "halves",
    "shelf": "shelves",
    "wolf": "wolves",
    "thief": "thieves",
}
_IRREGULAR_SINGULARS = {plural: single for single, plural in _IRREGULAR_PLURALS.items()}

# Container-ish suffixes stripped before unpluralizing a variable name
_CONTAINER_SUFFIXES = ("List", "Set", "Array", "Collection", "Stream", "Iterable", "Queue")

_VOWELS = "aeiou"

# "-us"/"-ias" singulars whose plural only adds "es" (statuses, viruses, aliases);
# other "-uses" words (clauses, houses) just drop the "s"
_LATIN_ES_ENDINGS = ("tuses", "ruses", "nuses", "puses", "iases")


def split_camel_case(name: str) -> List[str]:
    """``ArrayList`` -> ``['Array', 'List']``; ``URLConnection`` -> ``['URL', 'Connection']``"""
    return _CAMEL_WORD.findall(name)


def decapitalize(word: str) -> str:
    if not word:
        return word
    if word.isupper():
        return word.lower()
    return word[0].lower() + word[1:]


def with_article(word: str) -> str:
    """``boolean`` -> ``aBoolean``, ``int`` -> ``anInt``; for names that would be keywords"""
    article = "an" if word[:1].lower() in _VOWELS else "a"
    return article + word[:1].upper() + word[1:]


def camel_suffixes(name: str) -> List[str]:
    """
    Suffixes of a class name as variable names, longest first.

    ``ArrayList`` -> ``['arrayList', 'list']``. Suffixes starting with a
    digit are skipped since they are not identifiers.
    """
    words = split_camel_case(name)
    out: List[str] = []
    for i in range(len(words)):
        if words[i][0].isdigit():
            continue
        suffix = decapitalize(words[i]) + "".join(words[i + 1:])
        if suffix not in out:
            out.append(suffix)
    return out


def _split_last_word(name: str):
    words = split_camel_case(name)
    if not words or not name.endswith(words[-1]):
        return "", name
    last = words[-1]
    return name[:len(name) - len(last)], last


def pluralize(word: str) -> str:
    """English plural of the last word of an identifier: ``entry`` -> ``entries``"""
    prefix, last = _split_last_word(word)
    lower = last.lower()
    if lower in _IRREGULAR_PLURALS:
        plural = _IRREGULAR_PLURALS[lower]
        return prefix + (plural.capitalize() if last[0].isupper() else plural)
    if lower.endswith("y") and len(lower) > 1 and lower[-2] not in _VOWELS:
        return prefix + last[:-1] + "ies"
    if lower.endswith(("s", "x", "z", "ch", "sh")):
        return prefix + last + "es"
    return prefix + last + "s"


def unpluralize(word: str) -> Optional[str]:
    """
    Singular of the last word of an identifier, or None if it is not plural.

    ``entries`` -> ``entry``, ``boxes`` -> ``box``, ``class`` -> None.
    """
    prefix, last = _split_last_word(word)
    lower = last.lower()
    if lower in _IRREGULAR_SINGULARS:
        single = _IRREGULAR_SINGULARS[lower]
        return prefix + (single.capitalize() if last[0].isupper() else single)
    if lower.endswith("ies") and len(lower) > 3:
        return prefix + last[:-3] + "y"
    if lower.endswith(("sses", "xes", "zes", "ches", "shes")):
        return prefix + last[:-2]
    if lower.endswith(_LATIN_ES_ENDINGS):
        return prefix + last[:-2]
    if lower.endswith("ss") or lower.endswith("us"):
        return None
    if lower.endswith("s") and len(lower) > 1:
        return prefix + last[:-1]
    return None


def unpluralize_name(name: str) -> Optional[str]:
    """
    Element name for a container variable: ``names`` -> ``name``,
    ``userList`` -> ``user``. None when nothing sensible can be derived.
    """
    for suffix in _CONTAINER_SUFFIXES:
        if name.endswith(suffix) and len(name) > len(suffix):
            return name[:-len(suffix)]
    return unpluralize(name)
