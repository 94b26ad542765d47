"""Tests for table layout (render/tables.py).

Rendering runs with ``color=False`` so output is plain text and line
lengths equal visible widths.  Border lines are the ones starting with
a box-drawing character; the sources warning caption sits below them.
"""

from __future__ import annotations

import pytest

from getnews.core.constants import (
    ARTICLES_HEADER,
    FOOTER_LINK,
    HELP_TEXT,
    WARNING_TEXT,
)
from getnews.core.models import Article, DisplayOptions, Source
from getnews.render.tables import (
    format_articles,
    format_help,
    format_sources,
    locale_compare,
    select_articles,
    sort_articles,
    source_column_widths,
)

BOX_CHARS = "┌├└│"


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

def _source(**overrides: str) -> Source:
    defaults = {
        "id": "bbc-news",
        "name": "BBC News",
        "description": "Use BBC News for up-to-the-minute news and analysis.",
        "url": "http://www.bbc.co.uk/news",
    }
    defaults.update(overrides)
    return Source(**defaults)


def _article(title: str, section: str = "", **overrides: str) -> Article:
    defaults = {
        "title": title,
        "description": f"About {title}.",
        "url": f"https://goo.gl/{title.lower().replace(' ', '-')}",
        "section": section,
    }
    defaults.update(overrides)
    return Article(**defaults)


def _table_lines(output: str) -> list[str]:
    return [line for line in output.split("\n") if line and line[0] in BOX_CHARS]


def _flatten(output: str) -> str:
    """Strip borders and join cell text so wrapped phrases can be searched."""
    cleaned = output
    for char in "│┌┐└┘├┤┬┴┼─":
        cleaned = cleaned.replace(char, " ")
    return " ".join(cleaned.split())


# ---------------------------------------------------------------------------
# Column widths
# ---------------------------------------------------------------------------

class TestSourceColumnWidths:
    def test_header_label_is_minimum(self) -> None:
        assert source_column_widths([_source(id="ab")], 72) == (8, 61)

    def test_longest_id_plus_padding(self) -> None:
        sources = [_source(id="a"), _source(id="the-wall-street-journal")]
        id_width, description_width = source_column_widths(sources, 72)
        assert id_width == len("the-wall-street-journal") + 2
        assert id_width + description_width + 3 == 72

    def test_empty_sources(self) -> None:
        assert source_column_widths([], 72) == (8, 61)

    def test_description_floor(self) -> None:
        assert source_column_widths([_source()], 5)[1] == 3


# ---------------------------------------------------------------------------
# format_sources
# ---------------------------------------------------------------------------

class TestFormatSources:
    @pytest.mark.parametrize("width", ["70", "72", "100", "140"])
    def test_total_width(self, width: str) -> None:
        output = format_sources([_source(), _source(id="cnn")], {"w": width})
        lines = _table_lines(output)
        assert lines
        assert all(len(line) == int(width) for line in lines)

    def test_default_width(self) -> None:
        lines = _table_lines(format_sources([_source()], {}))
        assert all(len(line) == 72 for line in lines)

    def test_trailing_newline(self) -> None:
        output = format_sources([_source()], {})
        assert output.endswith("\n")
        assert not output.endswith("\n\n")

    def test_headers_and_content(self) -> None:
        output = format_sources([_source()], {"w": "100"})
        assert "Source" in output
        assert "Description" in output
        assert "bbc-news" in output
        assert "BBC News" in output
        assert "http://www.bbc.co.uk/news" in output
        assert "up-to-the-minute news and analysis." in _flatten(output)

    def test_one_row_per_source(self) -> None:
        sources = [_source(id=f"src-{n}") for n in range(4)]
        output = format_sources(sources, {})
        for source in sources:
            assert source.id in output

    @pytest.mark.parametrize("width", ["30", "50", "69"])
    def test_warning_below_threshold(self, width: str) -> None:
        output = format_sources([_source()], {"width": width})
        assert WARNING_TEXT in _flatten(output)

    @pytest.mark.parametrize("width", ["70", "72", "120"])
    def test_no_warning_at_or_above_threshold(self, width: str) -> None:
        output = format_sources([_source()], {"width": width})
        assert "Warning" not in output

    def test_accepts_display_options(self) -> None:
        output = format_sources([_source()], DisplayOptions(width=90))
        assert all(len(line) == 90 for line in _table_lines(output))

    def test_invalid_width_uses_default(self) -> None:
        output = format_sources([_source()], {"w": "-4"})
        assert all(len(line) == 72 for line in _table_lines(output))
        assert "Warning" not in output

    def test_tiny_width_still_renders(self) -> None:
        output = format_sources([_source()], {"w": "3"})
        assert "bbc-news" in output
        id_width, description_width = source_column_widths([_source()], 3)
        expected = id_width + description_width + 3
        assert expected > 3
        assert all(len(line) == expected for line in _table_lines(output))

    def test_plain_output_has_no_escapes(self) -> None:
        assert "\x1b[" not in format_sources([_source()], {})

    def test_color_output_has_escapes(self) -> None:
        output = format_sources([_source()], {}, color=True)
        assert "\x1b[" in output


# ---------------------------------------------------------------------------
# Article ordering
# ---------------------------------------------------------------------------

class TestLocaleCompare:
    def test_equal(self) -> None:
        assert locale_compare("abc", "abc") == 0

    def test_case_insensitive_first(self) -> None:
        assert locale_compare("apple", "Banana") == -1
        assert locale_compare("Banana", "apple") == 1

    def test_lowercase_before_uppercase_on_tie(self) -> None:
        assert locale_compare("a", "A") == -1
        assert locale_compare("A", "a") == 1

    def test_empty_sorts_first(self) -> None:
        assert locale_compare("", "a") == -1


class TestSortArticles:
    def test_comparator_uses_title_against_section(self) -> None:
        """Known-odd ordering: a.title is compared with b.section.

        "Beta" < "zzz" (the other article's section), so Beta sorts
        first even though a title sort would put Alpha first.
        """
        articles = [
            _article("Alpha", section="zzz"),
            _article("Beta", section="aaa"),
        ]
        titles = [a.title for a in sort_articles(articles)]
        assert titles == ["Beta", "Alpha"]

    def test_order_kept_when_title_above_other_section(self) -> None:
        articles = [
            _article("Alpha", section="aaa"),
            _article("Beta", section="zzz"),
        ]
        titles = [a.title for a in sort_articles(articles)]
        assert titles == ["Alpha", "Beta"]

    def test_empty_sections_preserve_input_order(self) -> None:
        articles = [_article("Zebra"), _article("Apple"), _article("Yak")]
        titles = [a.title for a in sort_articles(articles)]
        assert titles == ["Zebra", "Apple", "Yak"]

    def test_does_not_mutate_input(self) -> None:
        articles = [_article("B"), _article("A")]
        sort_articles(articles)
        assert [a.title for a in articles] == ["B", "A"]


class TestSelectArticles:
    def _articles(self) -> list[Article]:
        # Empty sections keep every title "greater", so order is preserved.
        return [_article(f"Story {n}") for n in range(6)]

    def test_defaults_take_all(self) -> None:
        assert len(select_articles(self._articles(), DisplayOptions())) == 6

    def test_index_and_number(self) -> None:
        selected = select_articles(self._articles(), DisplayOptions(index=2, number=3))
        assert [a.title for a in selected] == ["Story 2", "Story 3", "Story 4"]

    def test_number_past_end(self) -> None:
        selected = select_articles(self._articles(), DisplayOptions(index=4, number=10))
        assert [a.title for a in selected] == ["Story 4", "Story 5"]

    def test_index_past_end(self) -> None:
        assert select_articles(self._articles(), DisplayOptions(index=9)) == []


# ---------------------------------------------------------------------------
# format_articles
# ---------------------------------------------------------------------------

class TestFormatArticles:
    def test_total_width(self) -> None:
        output = format_articles([_article("Story")], {"w": "90"})
        assert all(len(line) == 90 for line in _table_lines(output))

    def test_default_width(self) -> None:
        output = format_articles([_article("Story")], {})
        assert all(len(line) == 72 for line in _table_lines(output))

    def test_fixed_rows_present(self) -> None:
        output = format_articles([], {})
        flat = _flatten(output)
        assert ARTICLES_HEADER in output
        assert HELP_TEXT in flat
        assert "Follow @omgimanerd on Twitter and GitHub." in flat
        assert FOOTER_LINK in output

    def test_article_content(self) -> None:
        article = _article(
            "Markets rally",
            description="Stocks climbed sharply on Tuesday after upbeat earnings.",
        )
        flat = _flatten(format_articles([article], {"w": "80"}))
        assert "Markets rally" in flat
        assert "Stocks climbed sharply on Tuesday after upbeat earnings." in flat
        assert article.url in flat

    def test_index_and_number_options(self) -> None:
        articles = [_article(f"Story {n}") for n in range(5)]
        output = format_articles(articles, {"i": "1", "n": "2"})
        assert "Story 1" in output
        assert "Story 2" in output
        assert "Story 0" not in output
        assert "Story 3" not in output

    def test_non_numeric_options_default(self) -> None:
        articles = [_article(f"Story {n}") for n in range(3)]
        output = format_articles(articles, {"i": "x", "n": "all"})
        for n in range(3):
            assert f"Story {n}" in output

    def test_warning_below_threshold(self) -> None:
        output = format_articles([_article("Story")], {"w": "40"})
        assert WARNING_TEXT in _flatten(output)

    def test_no_warning_at_threshold(self) -> None:
        assert "Warning" not in format_articles([_article("Story")], {"w": "70"})

    def test_warning_is_last_row_inside_box(self) -> None:
        output = format_articles([_article("Story")], {"w": "40"})
        lines = output.rstrip("\n").split("\n")
        assert all(line[0] in BOX_CHARS for line in lines)
        assert all(len(line) == 40 for line in lines)
        assert output.index("Follow") < output.index("Warning:")
        assert lines[-1].startswith("└")

    def test_tiny_width_renders_at_minimum(self) -> None:
        output = format_articles([_article("Story")], {"w": "2"})
        assert all(len(line) == 5 for line in _table_lines(output))

    def test_trailing_newline(self) -> None:
        output = format_articles([_article("Story")], {})
        assert output.endswith("\n")
        assert not output.endswith("\n\n")

    def test_input_not_reordered(self) -> None:
        articles = [_article("B", section="a"), _article("A", section="a")]
        format_articles(articles, {})
        assert [a.title for a in articles] == ["B", "A"]


# ---------------------------------------------------------------------------
# format_help
# ---------------------------------------------------------------------------

class TestFormatHelp:
    def test_idempotent(self) -> None:
        assert format_help() == format_help()

    def test_lists_routes(self) -> None:
        output = format_help()
        for route in ("/help", "/sources", "/<query>"):
            assert route in output

    def test_documents_arguments(self) -> None:
        output = format_help()
        for key in ("n=", "page=", "category="):
            assert key in output

    def test_plain_by_default(self) -> None:
        assert "\x1b[" not in format_help()

    def test_fits_help_width(self) -> None:
        assert all(len(line) <= 80 for line in format_help().split("\n"))
