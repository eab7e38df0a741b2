"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus)
- errors.py: error taxonomy raised by the store
- task_file.py: flat-text backing file codec
- task_store.py: file-backed, thread-safe TaskStore
- task_api.py: command interface used by presentation layers
"""
