from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel


class AskRequest(BaseModel):
    question: str = Field(..., min_length=1)


class ChatResult(BaseModel):
    """Presentation-ready answer returned to the chat widget.

    Serialized with camelCase keys; ``is_human_ask`` leaves the service as
    the literal "yes" or "no".
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    plain_text: str
    html: str
    images: Optional[list[str]] = None
    is_human_ask: bool = False
    page_reference_url: Optional[str] = None

    @field_serializer("is_human_ask")
    def _serialize_is_human_ask(self, value: bool) -> str:
        return "yes" if value else "no"


class AskResponse(BaseModel):
    response: ChatResult
