"""
Noteful API — Services Layer
=============================

What:  Converts store rows into immutable domain records for the pipelines.
How:   Each service holds a ResourceStore reference (replaceable in tests)
       and receives the session on every call.

Service Inventory:
    - FolderService: list, get, create folders
    - NoteService:   list, get, create, delete notes
"""
