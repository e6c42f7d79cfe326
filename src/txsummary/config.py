from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    default_chain: str = "ethereum"
    rpc_url: str = ""  # overrides the chain's default endpoint when set
    rpc_timeout: float = 30.0
    rpc_rate_per_second: float = 5.0
    rpc_burst: int = 2  # requests allowed back to back before rate limiting kicks in
    log_level: str = "WARNING"

    model_config = SettingsConfigDict(env_file=".env", env_prefix="TXSUMMARY_", extra="ignore")


settings = Settings()
