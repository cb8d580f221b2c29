from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # EVM JSON-RPC (owner() probe + eth_gasPrice). Empty = side reads skipped
    evm_rpc_url: str = ""
    chain_read_timeout_sec: float = 5.0  # per external read, owner probe and gas oracle

    # Risk API
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    api_rate_limit: str = "30/minute"
    api_debug: bool = False  # exposes /api/docs

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False
    log_dir: str = "logs"


settings = Settings()
