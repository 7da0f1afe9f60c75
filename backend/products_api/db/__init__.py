"""Database Metadata — declarative Base shared by models, migrations and test fixtures."""
