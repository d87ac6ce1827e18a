"""
Service layer.

Each service wraps one repository and owns the business rules of its
resource: foreign-key checks, the habitability constraint, mapping of
joined rows to nested responses and the translation of missing rows
into ``NotFoundError``.
"""
