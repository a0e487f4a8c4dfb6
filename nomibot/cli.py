import argparse
import json
import logging
from pathlib import Path

from dotenv import load_dotenv

from .config import ChatConfig
from .exceptions import UpstreamError
from .logging_config import setup_logging
from .models import AskRequest
from .service import ChatService


def run_server(config: ChatConfig, host: str, port: int) -> None:
    import uvicorn

    from .app import create_app

    uvicorn.run(create_app(config), host=host, port=port)


def print_answer(service: ChatService, question: str) -> None:
    try:
        response = service.handle(AskRequest(question=question))
    except UpstreamError as exc:
        print(exc.body or str(exc))
        return
    print(json.dumps(response.model_dump(by_alias=True), ensure_ascii=False, indent=2))


def run_interactive(service: ChatService) -> None:
    print("NomiBot CLI (Azure OpenAI + Search)")
    print("Type a question, or 'exit' to quit.")

    while True:
        question = input("\n> ").strip()
        if not question:
            continue
        if question.lower() in {"exit", "quit"}:
            break
        print_answer(service, question)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="NomiBot answer service (interactive CLI or API server)."
    )
    parser.add_argument("--serve", action="store_true", help="Run FastAPI server")
    parser.add_argument("--host", default="0.0.0.0", help="Server host")
    parser.add_argument("--port", type=int, default=8000, help="Server port")
    parser.add_argument("--question", help="Answer a single question and exit")
    parser.add_argument("--env-file", default=".env", help="Dotenv file to load")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    args = parser.parse_args()

    load_dotenv(Path(args.env_file))
    config = ChatConfig.from_env()
    setup_logging(
        level=logging.DEBUG if args.debug else logging.INFO,
        log_dir=Path(config.log_dir),
    )

    if args.serve:
        run_server(config, args.host, args.port)
        return

    service = ChatService(config=config)
    if args.question:
        print_answer(service, args.question)
        return
    run_interactive(service)


if __name__ == "__main__":
    main()
