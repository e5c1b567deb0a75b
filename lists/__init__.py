"""
Lists app

Reusable per-user libraries: skills (demonstrated by experiences, required
by job requirements) and job tags (labels on jobs).
"""
