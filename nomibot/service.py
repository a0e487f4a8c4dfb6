from __future__ import annotations

import logging
import time

from .azure_client import AzureChatClient
from .config import ChatConfig
from .exceptions import UpstreamError, format_error_chain
from .models import AskRequest, AskResponse, ChatResult
from .pipeline import answer


logger = logging.getLogger(__name__)


class ChatService:
    def __init__(self, config: ChatConfig | None = None, client: AzureChatClient | None = None):
        self.config = config or ChatConfig.from_env()
        self.client = client or AzureChatClient(self.config)

    def ask(self, question: str) -> ChatResult:
        started = time.perf_counter()
        try:
            raw_answer = self.client.complete(question)
        except UpstreamError as exc:
            logger.error(f"Backend call failed:\n{format_error_chain(exc)}")
            raise

        result = answer(question, raw_answer)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"Answered in {elapsed_ms:.0f} ms "
            f"(page_reference={bool(result.page_reference_url)}, "
            f"images={len(result.images or [])}, human_ask={result.is_human_ask})"
        )
        return result

    def handle(self, request: AskRequest) -> AskResponse:
        return AskResponse(response=self.ask(request.question))
