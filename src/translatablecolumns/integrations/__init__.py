"""Host framework integrations.

Submodules import their framework lazily on import of the submodule:
    sqlalchemy - SQLAlchemySchema, enable_translation_validation

Python 3.13+.
"""
