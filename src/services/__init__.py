"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases.
They depend on ports (interfaces) from core/, never on concrete
implementations from adapters/.

This layer contains:
- Scheduled user-data sync tasks (import, export, two-way sync)
"""

from src.services.user_data_tasks import (
    SCHEDULED_TASKS,
    ExportUserDataTask,
    ImportUserDataTask,
    SyncUserDataTask,
    UserDataSyncTask,
)

__all__ = [
    "SCHEDULED_TASKS",
    "UserDataSyncTask",
    "ImportUserDataTask",
    "ExportUserDataTask",
    "SyncUserDataTask",
]
