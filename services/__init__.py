"""
QuickHire Services

This package contains the core Python services:
- auth: password hashing, user records, sessions
- jobs: JSearch client and the job search proxy
- dashboard: client-side state, pager and HTTP client
- shared: database, errors and logging building blocks
"""
