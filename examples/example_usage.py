"""Example: use the service layer directly (no HTTP round-trip).

Controllers are a thin layer; the business rules live in UserService.
"""

from src.user_directory.user_directory.main import create_app


def main():
    app = create_app(overrides={"AUTO_SEED_DB": True})
    container = app.extensions["user_directory"]
    with app.app_context():
        user = container.user_service.get_user_by_email("JANE.DOE@example.com")
        print(user)
        print([u.name for u in container.user_service.find_active_users_by_name("doe")])


if __name__ == "__main__":
    main()
