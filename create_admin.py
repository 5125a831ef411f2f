"""
Script to create (or reset) the administrator account.

If the account exists, its password is reset and its role forced to ADMIN.

Run this script from the project root:
    python create_admin.py
    ADMIN_EMAIL=root@example.com ADMIN_PASSWORD=s3cret python create_admin.py
"""

import os
import sys

# Add project root to Python path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from jobboard.core.database import SessionLocal, init_db
from jobboard.core.security import get_password_hash
from jobboard.crud import user as user_crud
from jobboard.models.profile import Profile
from jobboard.models.user import Gender, User, UserRole

ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@example.com")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "adminpassword123")


def create_admin(db, email: str = ADMIN_EMAIL, password: str = ADMIN_PASSWORD) -> User:
    """Find or create the admin account. Returns the admin user."""
    hashed_password = get_password_hash(password)
    admin = user_crud.get_by_email(db, email)

    if admin is None:
        admin = User(
            email=email.lower(),
            hashed_password=hashed_password,
            name="System Administrator",
            username="admin",
            gender=Gender.OTHER,
            role=UserRole.ADMIN,
            phone_number="0000000000",
            location="Headquarters",
        )
        admin.profile = Profile(skills=[], work_experience=[], job_preferences={}, profile_stats={})
        db.add(admin)
        print("Admin user created.")
    else:
        admin.hashed_password = hashed_password
        admin.role = UserRole.ADMIN
        print("Admin user already exists; password reset and role set to ADMIN.")

    db.commit()
    db.refresh(admin)
    return admin


def main():
    init_db()
    db = SessionLocal()
    try:
        create_admin(db)
        print(f"\n{'='*40}")
        print("Admin credentials:")
        print(f"  Email:    {ADMIN_EMAIL}")
        print(f"  Password: {ADMIN_PASSWORD}")
        print(f"{'='*40}\n")
    except Exception as e:
        db.rollback()
        print(f"\nError creating admin: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
