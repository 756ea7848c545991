"""
Static learning content: question bank and glossary.
"""

from .store import ContentStore, get_default_store, load_glossary, load_questions

__all__ = [
    "ContentStore",
    "get_default_store",
    "load_glossary",
    "load_questions",
]
