"""
Domain layer.

Pure business rules of the vocabulary trainer: dictionary entries, learning
progress, spaced repetition and practice analytics. Nothing in here imports
FastAPI or SQLAlchemy.
"""
