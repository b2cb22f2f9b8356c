"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every feature uses (settings,
logging, DB wiring, error mapping). Feature-specific SQL and business rules
live in the feature packages (`projects/`, `history/`, `auth/`).
"""
