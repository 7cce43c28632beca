# scripts/create_admin.py

import argparse
import asyncio
import sys

from app.db import async_session, create_db_and_tables
from app.crud import admin as admin_crud
from app.schemas.admin import AdminCreate

if sys.platform.startswith('win') and sys.version_info < (3, 10):
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())


async def create_initial_admin(username: str, email: str, password: str, first_name: str, last_name: str) -> bool:
    """Creates the first admin account; does nothing when the username already exists."""
    await create_db_and_tables()

    async with async_session() as session:
        existing = await admin_crud.get_admin_by_identifier(session, username)
        if existing:
            print(f"⚠️  Admin '{username}' already exists. Skipping.")
            return False

        admin = await admin_crud.create_admin(
            session,
            AdminCreate(
                username=username,
                email=email,
                password=password,
                first_name=first_name,
                last_name=last_name,
                role="admin",
                is_active=True,
            ),
        )
        print(f"✅ Created: {admin.username} ({admin.role}) <{admin.email}>")
        print("Please change the password after first login.")
        return True


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create the initial Coffee Shop admin account")
    parser.add_argument("--username", default="admin")
    parser.add_argument("--email", default="admin@coffeeshop.com")
    parser.add_argument("--password", required=True, help="Initial password (min 6 characters)")
    parser.add_argument("--first-name", default="Admin")
    parser.add_argument("--last-name", default="User")

    args = parser.parse_args()
    asyncio.run(
        create_initial_admin(args.username, args.email, args.password, args.first_name, args.last_name)
    )


### Action	Command
#Create admin	python -m scripts.create_admin --password 'change-me-now'
