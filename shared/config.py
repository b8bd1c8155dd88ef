"""
Centralized configuration for the Standoff backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings should be namespaced (e.g., STORAGE_*, CHAIN_*).
"""

from functools import lru_cache
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Standoff API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Record store
    storage_backend: Literal["memory", "file"] = "file"
    data_dir: str = "data"

    # Debate rules
    default_duration_hours: float = 24
    max_duration_hours: float = 720
    results_top_n: int = 5

    # Chain coordinates published to clients (contract itself is external)
    chain_id: int = 11155111
    chain_network_name: str = "Ethereum Sepolia"
    chain_rpc_url: str = "https://ethereum-sepolia.publicnode.com"
    chain_block_explorer: str = "https://sepolia.etherscan.io"
    debate_contract_address: str = ""
    debate_token_address: str = ""


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
