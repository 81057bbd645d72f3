"""
Fonctions utilitaires partagees dans le client TVMaze.

- strip_tags : retrait des balises HTML des resumes TVMaze
- truncate_text : troncature d'un texte avec points de suspension
- truncated_summary : combinaison des deux, utilisee par Show et Episode
"""

import re
from typing import Optional

from tvmaze.utils.constants import DEFAULT_SUMMARY_LENGTH, ELLIPSIS

_TAG_RE = re.compile(r"<[^>]*>")


def strip_tags(text: str) -> str:
    """Retire les balises HTML (`<p>`, `<b>`...) sans toucher au texte."""
    return _TAG_RE.sub("", text)


def truncate_text(text: str, max_length: int = DEFAULT_SUMMARY_LENGTH) -> str:
    """
    Tronque un texte a max_length caracteres suivis de "...".

    Un texte deja tronque avec la meme limite reste identique: ses
    max_length premiers caracteres sont inchanges.
    """
    if len(text) <= max_length:
        return text
    return text[:max_length] + ELLIPSIS


def truncated_summary(
    summary: Optional[str],
    max_length: int = DEFAULT_SUMMARY_LENGTH,
) -> Optional[str]:
    """
    Resume en texte brut, tronque apres retrait des balises.

    Retourne None si le resume est absent ou vide.
    """
    if not summary:
        return None
    return truncate_text(strip_tags(summary), max_length)
