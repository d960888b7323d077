"""
Diagnosa — Encoding module

Vectorization of the registry and of symptom evidence for the scorer.

Components:
- SymptomVocabulary: symptom id ↔ index (canonical feature order)
- DiseaseEncoder: registry → characteristic matrix, priors
- EvidenceEncoder: evidence ids → binary vector

Example:
    from diagnosa.knowledge_base import get_default_knowledge_base
    from diagnosa.encoding import DiseaseEncoder, EvidenceEncoder

    encoder = DiseaseEncoder.from_knowledge_base(get_default_knowledge_base())
    matrix = encoder.encode_all()  # shape (8, 18)

    evidence = EvidenceEncoder(encoder.vocabulary).encode(["demam", "batuk"])
"""

from .symptom_vocabulary import SymptomVocabulary
from .disease_encoder import DiseaseEncoder
from .evidence_encoder import EvidenceEncoder


__all__ = [
    "SymptomVocabulary",
    "DiseaseEncoder",
    "EvidenceEncoder",
]
