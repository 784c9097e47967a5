"""
Notekeeper.

- backend/: Note service, API, database, configuration
"""
