"""
Seed the built-in task types into task_type_registry.
Run: python -m scripts.seed_task_types  (from backend/)

Safe to re-run: existing rows are updated in place.
"""

import asyncio

from taskgate.db.seed_data import BUILTIN_TASK_TYPES
from taskgate.db.session import async_session
from taskgate.repositories.task_types import upsert_task_type


async def seed():
    """Upsert every built-in task type."""
    async with async_session() as session:
        for data in BUILTIN_TASK_TYPES:
            row = await upsert_task_type(session, data)
            print(f"  Upserted task type: {row.id} ({row.display_name})")
        await session.commit()
    print(f"Seeded {len(BUILTIN_TASK_TYPES)} task types.")


if __name__ == "__main__":
    asyncio.run(seed())
