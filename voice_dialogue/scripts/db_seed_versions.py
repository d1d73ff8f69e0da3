"""
Database Seeder.

Run this script to populate the database with the hardcoded versions
defined in data/hardcoded_versions.py.

Usage:
    python -m voice_dialogue.scripts.db_seed_versions
"""

from sqlmodel import Session, select

from voice_dialogue.data.hardcoded_versions import HARDCODED_VERSIONS
from voice_dialogue.infrastructure.database.connection import engine, init_db
from voice_dialogue.infrastructure.database.tables import VersionDBModel


def seed_versions(bind=None):
    bind = bind or engine

    print("Initializing Database Connection...")

    init_db(bind)

    with Session(bind) as session:
        print(f"Found {len(HARDCODED_VERSIONS)} versions to seed.")

        for version_id, version in HARDCODED_VERSIONS.items():
            print(f"Processing version: {version_id}")

            version_data = version.model_dump(mode="json")

            # Upsert logic: update existing records or insert new ones.
            statement = select(VersionDBModel).where(VersionDBModel.version_id == version_id)
            existing = session.exec(statement).first()

            if existing:
                print("--> Updating existing record.")
                existing.name = version.name
                existing.version_data = version_data
                session.add(existing)
            else:
                print("--> Creating new record.")
                session.add(
                    VersionDBModel(
                        version_id=version_id,
                        name=version.name,
                        version_data=version_data,
                    )
                )

        session.commit()
        print("Versions seeding complete.")


if __name__ == "__main__":
    seed_versions()
