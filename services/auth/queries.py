"""SQL queries for authentication and user management."""

CREATE_USERS_TABLE = {
    "postgresql": """
        CREATE TABLE IF NOT EXISTS users (
            id SERIAL PRIMARY KEY,
            email TEXT UNIQUE NOT NULL,
            password_hash TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    """,
    "sqlite": """
        CREATE TABLE IF NOT EXISTS users (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            email TEXT UNIQUE NOT NULL,
            password_hash TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    """,
}

# Query to get user by email
GET_USER_BY_EMAIL = """
    SELECT
        id,
        email,
        password_hash,
        created_at
    FROM users
    WHERE email = %s
"""

# Insert relies on the UNIQUE constraint to reject duplicates
INSERT_USER = """
    INSERT INTO users (email, password_hash)
    VALUES (%s, %s)
    RETURNING id, email, password_hash, created_at
"""
