"""
services/ - Business Logic Layer
================================
Services orchestrate repository calls and enforce business rules.
They know nothing about HTTP.
"""
