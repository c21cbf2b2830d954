"""Shared test fixtures."""

from __future__ import annotations

import asyncio
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from taskgate.db.models import Base
from taskgate.db.session import build_engine
from taskgate.repositories import task_types
from taskgate.validation.memory_store import InMemoryTaskStore
from taskgate.validation.pipeline import ValidationPipeline
from taskgate.validation.types import TaskTypeConfig

FIXED_NOW = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)

CLEANING_CONFIG: dict[str, Any] = {
    "id": "cleaning",
    "display_name": "Cleaning",
    "description": "Home or office cleaning",
    "category": "home_services",
    "required_fields": [
        "title", "description", "datetime_start", "duration_hours", "budget_usd", "location_zone",
    ],
    "optional_fields": [
        "skills_required", "requirements", "private_address", "private_notes", "private_contact",
    ],
    "field_schemas": {
        "duration_hours": {"type": "number", "min": 1, "max": 12},
        "budget_usd": {"type": "number", "min": 15},
        "skills_required": {
            "type": "array",
            "allowed_values": [
                "standard_clean", "deep_clean", "move_out_clean",
                "laundry", "dishes", "windows", "organizing",
            ],
        },
        "description": {"type": "string", "min_length": 20, "max_length": 1000},
        "title": {"type": "string", "min_length": 5, "max_length": 200},
    },
    "minimum_budget_usd": 15,
    "maximum_duration_hr": 12,
    "prohibited_keywords": [],
    "requires_address": True,
    "is_active": True,
}


class FakeClock:
    """Settable UTC clock."""

    def __init__(self, now: datetime = FIXED_NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


def valid_cleaning_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "task_type": "cleaning",
        "title": "2BR Apartment Standard Clean",
        "description": "Standard cleaning for a two bedroom apartment including kitchen and bathrooms.",
        "location_zone": "District 2, Thu Duc",
        "datetime_start": (FIXED_NOW + timedelta(days=1)).isoformat(),
        "duration_hours": 2,
        "budget_usd": 35,
        "skills_required": ["standard_clean"],
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def cleaning_config() -> TaskTypeConfig:
    return TaskTypeConfig.from_mapping(CLEANING_CONFIG)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store() -> InMemoryTaskStore:
    return InMemoryTaskStore([CLEANING_CONFIG])


@pytest.fixture()
def pipeline(store: InMemoryTaskStore, clock: FakeClock) -> ValidationPipeline:
    return ValidationPipeline(store, clock=clock)


def make_sqlite_session_factory(db_path: Path) -> async_sessionmaker[AsyncSession]:
    """File-backed SQLite database with every table created."""
    engine = build_engine(f"sqlite+aiosqlite:///{db_path}")

    async def _create() -> None:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    asyncio.run(_create())
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def seed_registry(factory: async_sessionmaker[AsyncSession], *rows: dict[str, Any]) -> None:
    async with factory() as session:
        for row in rows:
            await task_types.upsert_task_type(session, row)
        await session.commit()
