"""
Library catalog service.

Stores book records (name, author, year of publishing, price) and exposes
CRUD, search and statistics operations through a tool surface and a REST API.
"""

__version__ = "1.0.0"
