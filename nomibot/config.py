from dataclasses import dataclass
import os


@dataclass
class ChatConfig:
    api_key: str = ""
    endpoint: str = ""
    deployment_name: str = ""
    api_version: str = "2024-03-01-preview"
    search_endpoint: str = ""
    search_key: str = ""
    index_name: str = ""
    embedding_deployment: str = "text-embedding-3-large"
    temperature: float = 0.5
    max_tokens: int = 1000
    top_p: float = 0.9
    strictness: int = 3
    top_n_documents: int = 10
    request_timeout: float = 60.0
    max_retries: int = 2
    log_dir: str = "Logs"

    @property
    def semantic_configuration(self) -> str:
        return f"{self.index_name}-semantic-configuration"

    @classmethod
    def from_env(cls) -> "ChatConfig":
        def _int(name: str, default: int) -> int:
            value = os.environ.get(name)
            return int(value) if value else default

        def _float(name: str, default: float) -> float:
            value = os.environ.get(name)
            return float(value) if value else default

        return cls(
            api_key=os.environ.get("AZURE_OPENAI_API_KEY", cls.api_key),
            endpoint=os.environ.get("AZURE_OPENAI_ENDPOINT", cls.endpoint),
            deployment_name=os.environ.get("AZURE_OPENAI_DEPLOYMENT_NAME", cls.deployment_name),
            api_version=os.environ.get("AZURE_OPENAI_API_VERSION", cls.api_version),
            search_endpoint=os.environ.get("AZURE_SEARCH_ENDPOINT", cls.search_endpoint),
            search_key=os.environ.get("AZURE_SEARCH_KEY", cls.search_key),
            index_name=os.environ.get("AZURE_SEARCH_INDEX_NAME", cls.index_name),
            embedding_deployment=os.environ.get(
                "AZURE_OPENAI_EMBEDDING_DEPLOYMENT", cls.embedding_deployment
            ),
            temperature=_float("NOMIBOT_TEMPERATURE", cls.temperature),
            max_tokens=_int("NOMIBOT_MAX_TOKENS", cls.max_tokens),
            top_p=_float("NOMIBOT_TOP_P", cls.top_p),
            strictness=_int("NOMIBOT_STRICTNESS", cls.strictness),
            top_n_documents=_int("NOMIBOT_TOP_N_DOCUMENTS", cls.top_n_documents),
            request_timeout=_float("NOMIBOT_REQUEST_TIMEOUT", cls.request_timeout),
            max_retries=_int("NOMIBOT_MAX_RETRIES", cls.max_retries),
            log_dir=os.environ.get("NOMIBOT_LOG_DIR", cls.log_dir),
        )
