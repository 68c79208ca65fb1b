"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus)
- task_registry.py: the three buckets + the pending -> in progress -> completed moves
- task_codec.py: versioned record format (pure encode/decode)
- task_store.py: flat-file storage with durable writes
- task_api.py: command facade used by the rest of the app
"""
