from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Capacity defaults used when a caller doesn't override them per assessment
    available_hours_per_week: float = 10
    hours_per_day: float = 2

    # Blocked items older than this count as stale blockers
    stale_blocker_hours: float = 48

    debug: bool = False

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "FEASIBILITY_",
        "extra": "ignore",
    }


settings = Settings()
