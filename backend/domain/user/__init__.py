"""User domain module.

Users are schema-less documents: the service stores whatever JSON object the
client sends and lets the database assign the identifier.
"""
