"""Tests for nomibot.sanitizer."""

import pytest

from nomibot.sanitizer import (
    CITATION_CLEANING_STAGES,
    SANITIZE_STAGES,
    clean_citations,
    run_stages,
    sanitize,
)


class TestSanitize:
    def test_markdown_image_removed(self):
        assert sanitize("See ![alt](https://a.com/x.png) here") == "See  here"

    def test_bracketed_url_removed(self):
        assert sanitize("Picture: [https://a.com/x.png]") == "Picture: "

    def test_image_url_segment_removed(self):
        assert sanitize("Answer: hi\nImage URL: https://a.com/x.png") == "Answer: hi\n"

    def test_bare_image_label_removed(self):
        assert sanitize("Image URL: none") == "none"

    def test_page_reference_markdown_link_removed(self):
        assert sanitize("Page Reference URL: [Help](https://a.com/help)") == ""

    def test_page_reference_hyphenated_url_removed(self, spec_answer):
        assert sanitize(spec_answer) == "Answer: Visit our site.\n\n"

    def test_not_available_removed(self):
        assert sanitize("Answer: hi\nImage URL: N/A") == "Answer: hi\n"
        assert sanitize("Page Reference URL: Not available.") == ""

    def test_not_available_keeps_neighbouring_words_apart(self):
        assert sanitize("foo N/A bar") == "foo bar"

    def test_content_from_removed(self):
        assert sanitize("Answer: hi Content from: https://a.com/x") == "Answer: hi "

    def test_content_from_with_dangling_label_removed(self):
        assert sanitize("Page Reference URL:\nContent from: https://a.com/x") == ""

    def test_empty_bullet_lines_removed(self):
        text = "- Answer: Not in the docs.\n- Page Reference URL: N/A\n- Image URL: N/A"
        assert sanitize(text) == "- Answer: Not in the docs.\n"

    def test_model_answer(self, model_answer):
        assert sanitize(model_answer) == (
            "- Answer: You can reset your password from the login page [doc1]. "
            "**Tip:** use a strong password.\n"
        )

    def test_markdown_links_kept(self):
        assert sanitize("Read [the guide](https://a.com/guide).") == "Read [the guide](https://a.com/guide)."

    @pytest.mark.parametrize("text", ["", None])
    def test_empty_input(self, text):
        assert sanitize(text) == ""

    def test_idempotent(self, messy_answers):
        for text in messy_answers:
            once = sanitize(text)
            assert sanitize(once) == once

    def test_labels_never_survive(self, messy_answers):
        for text in messy_answers:
            cleaned = sanitize(text).lower()
            assert "page reference url:" not in cleaned
            assert "image url:" not in cleaned


class TestCleanCitations:
    def test_doc_markers_and_prefix(self):
        assert clean_citations("NomiBot: Answer: Hello [doc1] world[doc23]") == "Hello world"

    def test_headings(self):
        assert clean_citations("## Title\n###### Sub\nBody") == "Title\nSub\nBody"

    def test_line_endings_and_blank_runs(self):
        assert clean_citations("a\r\n\r\n\r\n\r\nb\rc") == "a\n\nb\nc"

    def test_emphasis_markers(self):
        assert clean_citations("**Bold** and *it*") == "Bold and it"

    def test_asterisks_removed_everywhere(self):
        # Lossy: arithmetic loses its operator too.
        assert clean_citations("2 * 3 = 6") == "2 3 = 6"

    def test_bullets(self):
        assert clean_citations("Intro\n- one\n  - two\n-5 degrees") == "Intro\none\ntwo\n-5 degrees"

    def test_repeats_until_stable(self):
        # Stripping "*" creates a new run of three newlines.
        assert clean_citations("a\n*\n\n\nb") == "a\n\nb"

    def test_idempotent(self, messy_answers):
        for text in messy_answers:
            once = clean_citations(text)
            assert clean_citations(once) == once

    def test_none(self):
        assert clean_citations(None) == ""


class TestStages:
    def test_sanitize_order(self):
        assert [stage.name for stage in SANITIZE_STAGES] == [
            "markdown_image",
            "bracketed_url",
            "image_url",
            "page_reference",
            "not_available",
            "content_from",
            "dangling_page_reference",
            "empty_bullets",
        ]

    def test_cleaning_order(self):
        assert [stage.name for stage in CITATION_CLEANING_STAGES] == [
            "doc_markers",
            "answer_prefix",
            "headings",
            "line_endings",
            "blank_runs",
            "emphasis",
            "space_runs",
            "bullets",
        ]

    def test_run_stages_without_stages(self):
        assert run_stages("unchanged", ()) == "unchanged"
