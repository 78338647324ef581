"""레포지토리 패키지.

Repository package: database query layer.

Contains the repository classes that handle pure database operations.
Each repository extends BaseRepository for generic CRUD and adds the
entity's filter building and lookup queries.
"""
