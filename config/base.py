import os
import urllib.parse


def build_db_config(default_password: str = "") -> dict:
    return {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", default_password),
        "database": os.getenv("DB_NAME", "user_directory"),
    }


def build_database_uri(db_config: dict) -> str:
    """DATABASE_URL wins; otherwise a MySQL URI for mysql-connector."""
    override = os.getenv("DATABASE_URL")
    if override:
        return override

    # Encode the password so characters like '@' stay safe in the URI
    encoded_password = urllib.parse.quote_plus(db_config["password"])
    return (
        f"mysql+mysqlconnector://{db_config['user']}:{encoded_password}"
        f"@{db_config['host']}:{db_config['port']}/{db_config['database']}"
    )
