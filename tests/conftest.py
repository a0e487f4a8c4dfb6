"""
Pytest fixtures for NomiBot tests.
"""

import pytest

from nomibot import ChatConfig


@pytest.fixture
def sample_config():
    """Create a sample ChatConfig."""
    return ChatConfig(
        api_key="test-key",
        endpoint="https://nomi-test.openai.azure.com",
        deployment_name="gpt-4o",
        search_endpoint="https://nomi-test.search.windows.net",
        search_key="search-key",
        index_name="nomi-pages",
    )


@pytest.fixture
def spec_answer():
    """Answer with one page reference and one image line."""
    return (
        "Answer: Visit our site.\n"
        "Page Reference URL: - https://example.com/page\n"
        "Image URL: https://example.com/pic.png"
    )


@pytest.fixture
def model_answer():
    """Answer in the bullet format the support bot prompt asks for."""
    return (
        "- Answer: You can reset your password from the login page [doc1]. "
        "**Tip:** use a strong password.\n"
        "- Page Reference URL: - https://www.nomi.co.uk/help/reset-password\n"
        "- Image URL: https://www.nomi.co.uk/img/reset.png\n"
        "Content from: https://www.nomi.co.uk/help/reset-password"
    )


@pytest.fixture
def messy_answers(spec_answer, model_answer):
    """Assorted shapes seen in model output."""
    return [
        spec_answer,
        model_answer,
        "Answer: Just a plain reply.",
        "Answer: First reply.\nAnswer: Second reply.",
        "- Answer: Not in the docs.\n- Page Reference URL: N/A\n- Image URL: N/A",
        "Answer: See below.\nPage Reference URL:\nContent from: https://www.nomi.co.uk/faq",
        "### Answer: Setup\n![diagram](https://a.com/d.svg)\n[https://a.com/raw.gif]\n"
        "Page Reference URL: [FAQ](https://a.com/faq)",
        "Answer: Check it.\r\n\r\n\r\n\r\npage reference url: - https://a.com/x.png\r\n"
        "IMAGE URL: https://a.com/x.png",
        "",
        "N/A",
    ]
