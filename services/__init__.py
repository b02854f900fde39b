"""
services/ - Business Logic Layer
================================
Services validate caller input and apply domain rules
before delegating persistence to the repositories.
"""
