"""
Configuration management for ProspectResearch
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application Settings
    app_host: str = "0.0.0.0"
    app_port: int = 8001
    log_level: str = "INFO"

    # Outbound HTTP identity
    user_agent: str = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    )

    # Timeouts (seconds) - each network call gets its own budget
    probe_timeout_seconds: float = 4.0   # /careers, /jobs ... probes
    page_timeout_seconds: float = 5.0    # homepage, mined links, outbound ATS links
    api_timeout_seconds: float = 4.0     # Greenhouse / Lever / Ashby ... JSON APIs
    research_deadline_seconds: float = 30.0  # whole request, must exceed the longest chain

    max_body_bytes: int = 3 * 1024 * 1024

    # Concurrency
    probe_concurrently: bool = True
    max_workers: int = 12

    # Homepage link mining
    max_ats_links: int = 3
    max_careers_links: int = 5

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = Settings()
