"""
Models package: re-exports Base and all models.

Import models here so Alembic's `target_metadata = Base.metadata`
picks up every table automatically.

When adding a new model:
    1. Create `taskgate/db/models/<table_name>.py`
    2. Import it here
"""

from taskgate.db.models.base import Base
from taskgate.db.models.task_type import TaskTypeRegistry
from taskgate.db.models.validation_log import TaskValidationLog

__all__ = [
    "Base",
    "TaskTypeRegistry",
    "TaskValidationLog",
]
