"""Create or reset a dashboard admin account.

    python scripts/users/create_admin.py admin@nisapoti.com 'S3cret!' --name "Admin"

An existing row with the same email is re-activated and its password reset.
"""

import argparse
import asyncio
import os
import sys
from pathlib import Path

# Add project root to path to import libs
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from dotenv import load_dotenv

# Load env file selected for the run (defaults to .env when ENV_FILE not set)
# MUST be done before importing libs that use get_settings()
project_root = Path(__file__).resolve().parents[2]
env_file = os.environ.get("ENV_FILE", ".env")
load_dotenv(project_root / env_file, override=True)

from sqlalchemy import select

from libs.auth.tokens import hash_password
from libs.db.config import AsyncSessionLocal, engine
from services.admin_service.models import AdminUser


async def create_admin_user(email: str, password: str, name: str) -> None:
    print(f"Connecting to database for {email}...")
    async with AsyncSessionLocal() as session:
        async with session.begin():
            result = await session.execute(
                select(AdminUser).where(AdminUser.email == email)
            )
            admin = result.scalars().first()

            if admin:
                print(f"⚠️ Admin {email} already exists. Resetting password.")
                admin.password_hash = hash_password(password)
                admin.is_active = True
                admin.name = name or admin.name
            else:
                session.add(
                    AdminUser(
                        email=email,
                        name=name,
                        password_hash=hash_password(password),
                        is_active=True,
                    )
                )
                print("✅ Admin record created.")

    await engine.dispose()
    print(f"\n🎉 Admin setup complete! Log in as {email}.")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("email")
    parser.add_argument("password")
    parser.add_argument("--name", default="Admin")
    args = parser.parse_args()
    asyncio.run(create_admin_user(args.email, args.password, args.name))


if __name__ == "__main__":
    main()
