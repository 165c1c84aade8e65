# workforce_planner/config.py
import os


class Settings:
    """
    Very simple settings holder.
    Reads DATABASE_URL and workforce defaults from environment if present,
    otherwise falls back to a local sqlite file and the roster placeholders.
    """

    def __init__(self) -> None:
        self.database_url: str = os.getenv("DATABASE_URL", "sqlite:///./workforce.db")
        self.shift_hours: int = int(os.getenv("WORKFORCE_SHIFT_HOURS", "8"))

        # Used when no StaffAvailability row exists for a forecast date
        self.default_boxme: int = int(os.getenv("WORKFORCE_DEFAULT_BOXME", "150"))
        self.default_seasonal: int = int(os.getenv("WORKFORCE_DEFAULT_SEASONAL", "50"))
        self.default_veteran: int = int(os.getenv("WORKFORCE_DEFAULT_VETERAN", "30"))

        self.seed_data: bool = os.getenv("WORKFORCE_SEED_DATA", "true").lower() == "true"
        self.hiring_alert_window_days: int = int(
            os.getenv("WORKFORCE_HIRING_ALERT_WINDOW_DAYS", "14")
        )

    def default_availability(self) -> dict:
        return {
            "boxme": self.default_boxme,
            "seasonal": self.default_seasonal,
            "veteran": self.default_veteran,
        }


settings = Settings()


def get_settings() -> Settings:
    return settings
