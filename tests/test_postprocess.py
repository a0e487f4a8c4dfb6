"""Tests for nomibot.postprocess."""

import pytest

from nomibot.postprocess import add_step_numbering, is_image_url_line, isolate_first_answer


class TestIsolateFirstAnswer:
    def test_first_block_wins(self):
        assert isolate_first_answer("Answer: First reply.\nAnswer: Second reply.") == "First reply."

    def test_multiline_block(self):
        text = "NomiBot: Answer: Hello\nmore lines\n"
        assert isolate_first_answer(text) == "Hello\nmore lines"

    def test_without_label(self):
        assert isolate_first_answer("Intro text") == "Intro text"

    def test_blank_block_passes_through(self):
        assert isolate_first_answer("Answer:   ") == "Answer:   "

    def test_label_is_case_sensitive(self):
        assert isolate_first_answer("answer: lower") == "answer: lower"

    @pytest.mark.parametrize("text", ["", None])
    def test_empty(self, text):
        assert isolate_first_answer(text) == ""


class TestStepNumbering:
    def test_numbers_lines_after_marker(self):
        text = (
            "Steps to reset:\n"
            "- Open the app\n"
            "- Tap Settings\n"
            "\n"
            "Image URL: https://a.com/s.png\n"
            "3. Done already\n"
            "Confirm"
        )
        assert add_step_numbering(text) == (
            "Steps to reset:\n"
            "1. Open the app\n"
            "2. Tap Settings\n"
            "\n"
            "Image URL: https://a.com/s.png\n"
            "3. Done already\n"
            "3. Confirm"
        )

    def test_lines_before_marker_untouched(self):
        assert add_step_numbering("  Intro  \nSteps:\na") == "  Intro  \nSteps:\n1. a"

    def test_crlf_input(self):
        assert add_step_numbering("Steps:\r\nfirst\r\nsecond\r\n") == "Steps:\n1. first\n2. second"

    @pytest.mark.parametrize("text", ["No marker here\n- a", "Intro\nSteps", "My stepsister\n- a"])
    def test_unchanged(self, text):
        assert add_step_numbering(text) == text

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_blank(self, text):
        assert add_step_numbering(text) == text

    @pytest.mark.parametrize(
        "line, expected",
        [
            ("Image URL: https://a.com/x.png", True),
            ("[https://a.com/x.gif]", True),
            ("See https://a.com/help", True),
            ("Open the app", False),
        ],
    )
    def test_is_image_url_line(self, line, expected):
        assert is_image_url_line(line) is expected
