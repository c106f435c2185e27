import os

server_mode = os.getenv("SERVER_MODE", "development")
"""The operational mode of the server."""

database_url = os.getenv("DATABASE_URL", "sqlite://db.sqlite3")
"""The tortoise connection string for the database."""

port = int(os.getenv("PORT", "8080"))
"""The port the server listens on."""

api_root = "/api/v1"
"""The base url for the api."""
