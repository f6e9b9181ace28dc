"""
Noteful API — Routes Package
=============================

Route Inventory:
    - folders.py: GET  /api/folders            (list folders)
                  POST /api/folders            (create folder)
                  GET  /api/folders/{id}       (get folder)
    - notes.py:   GET  /api/notes              (list notes)
                  POST /api/notes              (create note)
                  GET  /api/notes/{id}         (get note)
                  DELETE /api/notes/{id}       (delete note)
    - root.py:    GET  /                       (greeting, behind the gate)
    - health.py:  GET  /health                 (public health check)

Routes stay thin: each one hands the request and a session to a Pipeline
and returns whatever response the pipeline produces.
"""
