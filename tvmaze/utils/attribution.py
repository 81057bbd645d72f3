"""
Chaines d'attribution TVMaze.

Les donnees TVMaze sont publiees sous licence CC BY-SA 4.0: toute
application qui les affiche doit citer la source.
"""

from tvmaze.utils.constants import LICENSE_NAME, LICENSE_URL, TVMAZE_NAME, TVMAZE_SITE_URL


def attribution_text() -> str:
    """Attribution en texte brut."""
    return f"Data provided by {TVMAZE_NAME} ({TVMAZE_SITE_URL})"


def attribution_html() -> str:
    """Attribution avec lien HTML."""
    return f'Data provided by <a href="{TVMAZE_SITE_URL}">{TVMAZE_NAME}</a>'


def attribution_markdown() -> str:
    """Attribution avec lien Markdown."""
    return f"Data provided by [{TVMAZE_NAME}]({TVMAZE_SITE_URL})"


def detailed_attribution_html() -> str:
    """Attribution HTML mentionnant la licence."""
    return (
        f'Data provided by <a href="{TVMAZE_SITE_URL}">{TVMAZE_NAME}</a>, '
        f'licensed under <a href="{LICENSE_URL}">{LICENSE_NAME}</a>'
    )
