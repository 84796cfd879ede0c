from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Data sources (all public, no keys)
    dexscreener_base_url: str = "https://api.dexscreener.com"
    rugcheck_base_url: str = "https://api.rugcheck.xyz/v1"
    solana_rpc_url: str = "https://api.mainnet-beta.solana.com"
    http_timeout_sec: float = 10.0

    # Fixed inter-call delays — public RPC caps are the binding constraint
    holder_report_delay_sec: float = 1.0
    market_search_delay_sec: float = 0.5
    rpc_call_delay_sec: float = 2.5  # before each of balance / signatures / token accounts

    # Holder selection
    max_holders_analyzed: int = 10  # each holder = 3 RPC calls + 7.5s of delays
    signature_limit: int = 20
    min_holder_pct: float = 0.01  # below = dust noise
    max_holder_pct: float = 50.0  # at/above = burn or mint authority, not a holder

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False


settings = Settings()
