from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.user_directory.user_directory.database.bootstrap import init_schema, seed_demo_users
from src.user_directory.user_directory.main import create_app


def main() -> None:
    app = create_app(overrides={"AUTO_INIT_DB": False, "AUTO_SEED_DB": False})
    init_schema(app)
    written = seed_demo_users(app)
    print(f"OK: Seeded {written} demo users")


if __name__ == "__main__":
    main()
