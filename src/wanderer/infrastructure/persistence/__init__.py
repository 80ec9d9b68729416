"""Persistence layer: database engine, models, repositories and the collection DAO."""
