import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False
    log_level: str = "INFO"
    rate_limit: str = "60/minute"  # per client, on POST endpoints

    # Discovery (compatibility score) settings
    minimum_match_score: float = 30.0  # postings below this are never shown
    score_tie_window: float = 10.0  # scores closer than this are ordered by distance
    remote_job_type: str = "Remote"

    # Ranking settings
    matrix_workers: int = 1  # threads for the per-candidate scoring step
    max_pool_size: int = 500  # applicants accepted by a single ranking request

    # Candidate enrichment at the document-store boundary
    enrichment_retries: int = 1
    enrichment_retry_delay: float = 0.0  # seconds, doubled per retry

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
