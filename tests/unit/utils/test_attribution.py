"""
Tests pour les chaines d'attribution TVMaze.
"""

from tvmaze.utils.attribution import (
    attribution_html,
    attribution_markdown,
    attribution_text,
    detailed_attribution_html,
)


def test_attribution_text():
    assert attribution_text() == "Data provided by TVMaze (https://www.tvmaze.com)"


def test_attribution_markdown():
    assert attribution_markdown() == "Data provided by [TVMaze](https://www.tvmaze.com)"


def test_attribution_html():
    html = attribution_html()
    assert html.startswith("Data provided by")
    assert '<a href="https://www.tvmaze.com">TVMaze</a>' in html


def test_detailed_attribution_mentions_license():
    html = detailed_attribution_html()
    assert "Data provided by" in html
    assert "https://www.tvmaze.com" in html
    assert "CC BY-SA 4.0" in html
    assert "creativecommons.org" in html
