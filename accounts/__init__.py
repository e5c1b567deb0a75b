"""
Accounts app

Users, registration, token login and the bearer authentication every other
endpoint runs behind.
"""
