"""Persistence: database engine/session, ORM models, repositories, migrations."""
