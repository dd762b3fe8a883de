"""Infrastructure layer: SQLAlchemy persistence implementing application ports."""
