"""Settings, database setup, errors and the generic DAO."""
