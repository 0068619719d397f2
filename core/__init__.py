"""
Domain models, collaborator interfaces and errors.
"""
