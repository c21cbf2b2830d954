"""
Repositories package: data-access layer.

Each repository file handles all DB operations for one table.
Repositories do NOT handle HTTP concerns or validation logic.

Convention:
    - One file per table (task_types.py, validation_logs.py)
    - All functions accept `AsyncSession` as the first argument
    - Use `flush()` internally; commit/rollback belongs to the caller
      (the `get_db` dependency, or SqlTaskStore's own unit of work)
"""
