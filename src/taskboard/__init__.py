"""
Task and category tracker.

Components:
- tasks/, categories/: records, JSON-backed stores and edit-boundary helpers
- query/engine.py: filter/search/sort/paginate pipeline for the all-tasks view
- views/: calendar membership, ending-soon notifications, Gantt projection, summaries
- core/state.py: application state container with explicit reload steps
- server/app.py: HTTP API over the JSON documents
- client/api_client.py: HTTP client implementing the same store ports
"""

__version__ = "0.3.0"
