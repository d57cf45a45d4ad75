import os


def _env_int(name: str, default: int) -> int:
    return int(os.environ.get(name, str(default)))


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "change-me"

    # DB settings
    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = _env_int("DB_PORT", 3306)
    DB_NAME = os.environ.get("DB_NAME", "hrms_db")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Dev helpers
    AUTO_INIT_DB = bool(_env_int("AUTO_INIT_DB", 0))
    AUTO_SEED_DB = bool(_env_int("AUTO_SEED_DB", 0))

    # Salary structure; rates stay at their defaults unless set here.
    PAYROLL = {
        "STANDARD_ALLOWANCE": _env_int("PAYROLL_STANDARD_ALLOWANCE", 4167),
        "PROFESSIONAL_TAX": _env_int("PAYROLL_PROFESSIONAL_TAX", 200),
        "TOTAL_WORKING_DAYS": _env_int("PAYROLL_TOTAL_WORKING_DAYS", 30),
    }


def db_config() -> dict:
    return {
        "host": Config.DB_HOST,
        "port": Config.DB_PORT,
        "user": Config.DB_USER,
        "password": Config.DB_PASSWORD,
        "database": Config.DB_NAME,
    }
