"""
Diagnosa — Disease encoding

Turns the disease registry into numpy arrays.
Each disease is a binary vector x ∈ {0,1}^D over the symptom vocabulary.
"""

import numpy as np
from typing import Dict, List, Optional

from diagnosa.knowledge_base import KnowledgeBase
from .symptom_vocabulary import SymptomVocabulary


class DiseaseEncoder:
    """
    Encodes diseases as characteristic-symptom vectors.

    - 1 = symptom is in the disease's characteristic set
    - 0 = it is not

    Example:
        encoder = DiseaseEncoder.from_knowledge_base(kb)

        vector = encoder.encode("flu")   # shape (18,)
        matrix = encoder.encode_all()    # shape (8, 18)
        priors = encoder.priors()        # shape (8,)
    """

    def __init__(self, vocabulary: SymptomVocabulary, knowledge_base: KnowledgeBase):
        """
        Args:
            vocabulary: Symptom vocabulary (canonical order)
            knowledge_base: Disease registry
        """
        self.vocabulary = vocabulary
        self.knowledge_base = knowledge_base

        # Registry order, not sorted: ties are broken by it
        self._disease_to_idx: Dict[str, int] = {
            disease_id: idx for idx, disease_id in enumerate(knowledge_base.disease_ids)
        }
        self._idx_to_disease: Dict[int, str] = {
            idx: disease_id for disease_id, idx in self._disease_to_idx.items()
        }

    @classmethod
    def from_knowledge_base(cls, knowledge_base: KnowledgeBase) -> "DiseaseEncoder":
        vocabulary = SymptomVocabulary.from_knowledge_base(knowledge_base)
        return cls(vocabulary, knowledge_base)

    @property
    def vector_dim(self) -> int:
        return self.vocabulary.size

    @property
    def disease_count(self) -> int:
        return len(self._disease_to_idx)

    @property
    def disease_ids(self) -> List[str]:
        return [self._idx_to_disease[i] for i in range(self.disease_count)]

    def index_to_disease(self, index: int) -> Optional[str]:
        return self._idx_to_disease.get(index)

    def encode(self, disease_id: str) -> Optional[np.ndarray]:
        """
        Binary characteristic-symptom vector.

        Returns:
            Vector shape (D,) or None if the disease is unknown
        """
        disease = self.knowledge_base.get_disease(disease_id)
        if disease is None:
            return None

        vector = np.zeros(self.vector_dim, dtype=np.float64)
        for idx in self.vocabulary.get_indices(disease.symptoms):
            vector[idx] = 1.0

        return vector

    def encode_all(self) -> np.ndarray:
        """
        Matrix shape (N_diseases, D), rows in registry order.
        """
        matrix = np.zeros((self.disease_count, self.vector_dim), dtype=np.float64)

        for idx, disease_id in enumerate(self.disease_ids):
            matrix[idx] = self.encode(disease_id)

        return matrix

    def priors(self) -> np.ndarray:
        """Prior weights p(D), registry order"""
        return np.array(
            [d.prior for d in self.knowledge_base.list_diseases()],
            dtype=np.float64
        )

    def get_symptom_frequencies(self) -> Dict[str, int]:
        """In how many diseases each symptom appears"""
        counts = self.encode_all().sum(axis=0)
        return {
            symptom: int(counts[idx])
            for idx, symptom in enumerate(self.vocabulary.symptoms)
        }

    def __repr__(self) -> str:
        return f"DiseaseEncoder(diseases={self.disease_count}, symptoms={self.vector_dim})"
