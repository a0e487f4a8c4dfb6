from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse

from .config import ChatConfig
from .exceptions import ChatError, UpstreamStatusError
from .models import AskRequest, AskResponse
from .service import ChatService


def create_app(config: ChatConfig | None = None, service: ChatService | None = None) -> FastAPI:
    service = service or ChatService(config=config)
    app = FastAPI(
        title="NomiBot Answer Service",
        version="1.0.0",
        description="Support answers from Azure OpenAI, cleaned for chat widgets.",
    )

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.post("/api/chat/ask", response_model=AskResponse)
    def ask(request: AskRequest):
        try:
            return service.handle(request)
        except UpstreamStatusError as exc:
            return PlainTextResponse(exc.body, status_code=400)
        except ChatError as exc:
            raise HTTPException(status_code=500, detail=str(exc)) from exc

    return app
