"""
Azure OpenAI client for retrieval-augmented answers.

Sends the user's question to an Azure OpenAI chat deployment with an Azure AI
Search index attached as data source ("on your data") and returns the raw
answer text. Retries for transient failures are delegated to the OpenAI SDK.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from openai import APIConnectionError as OpenAIConnectionError
from openai import APIStatusError, AzureOpenAI

from .config import ChatConfig
from .exceptions import UpstreamConnectionError, UpstreamResponseError, UpstreamStatusError
from .prompts import FIELDS_MAPPING, SYSTEM_PROMPT


logger = logging.getLogger(__name__)


class AzureChatClient:
    """
    Chat completion client bound to one deployment and one search index.

    Usage:
        client = AzureChatClient(ChatConfig.from_env())
        raw_answer = client.complete("How do I reset my password?")
    """

    def __init__(self, config: ChatConfig, client: Optional[Any] = None):
        """
        Initialize the client.

        Args:
            config: Endpoint, credentials and sampling settings
            client: Pre-built OpenAI-compatible client (tests inject fakes here)
        """
        self.config = config
        if client is None:
            if not config.endpoint or not config.api_key:
                raise ValueError(
                    "Azure OpenAI endpoint and key required. "
                    "Set AZURE_OPENAI_ENDPOINT and AZURE_OPENAI_API_KEY."
                )
            client = AzureOpenAI(
                api_key=config.api_key,
                azure_endpoint=config.endpoint,
                api_version=config.api_version,
                timeout=config.request_timeout,
                max_retries=config.max_retries,
            )
        self.client = client

    def build_data_source(self) -> dict[str, Any]:
        cfg = self.config
        return {
            "type": "azure_search",
            "parameters": {
                "endpoint": cfg.search_endpoint,
                "index_name": cfg.index_name,
                "semantic_configuration": cfg.semantic_configuration,
                "query_type": "vector_semantic_hybrid",
                "in_scope": True,
                "strictness": cfg.strictness,
                "top_n_documents": cfg.top_n_documents,
                "authentication": {"type": "api_key", "key": cfg.search_key},
                "embedding_dependency": {
                    "type": "deployment_name",
                    "deployment_name": cfg.embedding_deployment,
                },
                "fields_mapping": dict(FIELDS_MAPPING),
            },
        }

    def build_messages(self, question: str) -> list[dict[str, str]]:
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": question},
        ]

    def complete(self, question: str) -> str:
        """
        Ask the backend and return the raw answer text.

        Raises:
            UpstreamStatusError: Backend answered with a non-success status
            UpstreamConnectionError: Backend could not be reached
            UpstreamResponseError: Response had no message content
        """
        try:
            response = self.client.chat.completions.create(
                model=self.config.deployment_name,
                messages=self.build_messages(question),
                temperature=self.config.temperature,
                max_tokens=self.config.max_tokens,
                top_p=self.config.top_p,
                frequency_penalty=0,
                presence_penalty=0,
                extra_body={"data_sources": [self.build_data_source()]},
            )
        except APIStatusError as e:
            logger.warning(f"Chat completion failed with HTTP {e.status_code}")
            raise UpstreamStatusError(e.status_code, e.response.text, e) from e
        except OpenAIConnectionError as e:
            logger.warning(f"Chat completion backend unreachable: {e}")
            raise UpstreamConnectionError(e) from e

        return self._parse_content(response)

    def _parse_content(self, response: Any) -> str:
        choices = getattr(response, "choices", None) or []
        if not choices:
            raise UpstreamResponseError("Chat completion returned no choices")

        content = choices[0].message.content
        if content is None:
            raise UpstreamResponseError(
                "Chat completion returned no message content",
                body=str(choices[0].finish_reason or ""),
            )
        return content.strip()
