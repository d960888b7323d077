"""
Diagnosa — Knowledge base module

Static registry of candidate diseases and the symptom vocabulary.

Example:
    from diagnosa.knowledge_base import get_default_knowledge_base, KnowledgeBase

    kb = get_default_knowledge_base()
    for disease in kb.list_diseases():
        print(disease.id, disease.prior)

    # Externalized registry
    kb = KnowledgeBase.from_file("data/knowledge_base.yaml")
"""

from .registry import KnowledgeBase, get_default_knowledge_base
from .data import DEFAULT_SYMPTOMS, DEFAULT_DISEASES


__all__ = [
    "KnowledgeBase",
    "get_default_knowledge_base",
    "DEFAULT_SYMPTOMS",
    "DEFAULT_DISEASES",
]
