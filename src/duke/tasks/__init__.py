"""
Task subsystem.

Components:
- task_models.py: task variants (ToDo, Deadline, Event) + date/time parsing
- task_list.py: ordered in-memory list with 1-based item numbers
- task_store.py: plain-text save-file codec and whole-file store
"""
