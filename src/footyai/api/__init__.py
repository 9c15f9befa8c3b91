"""
FastAPI service for FootyAI.

Exposes endpoints to:
- List supported sports and their market groups.
- Analyze a match and return search-grounded predictions + sources.
"""
