"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority, Status, TaskPatch)
- errors.py: typed failures raised or reported by the store
- task_store.py: JSON-file backed store + query/sort helpers
"""
