"""
Shared, cross-cutting code for the marketplace API.

`core/` holds the small building blocks every feature uses (DB wiring,
errors, logging, bilingual fields). Feature-specific SQL and business rules
live in the feature packages (e.g. `listings/`, `reviews/`).
"""
