"""
Diagnosa — Evidence encoding

Turns the caller's symptom ids into a binary evidence vector.
"""

import numpy as np
from typing import Iterable, List, Tuple

from .symptom_vocabulary import SymptomVocabulary


class EvidenceEncoder:
    """
    Encodes one request's evidence.

    Duplicates collapse, unknown ids are ignored.

    Example:
        encoder = EvidenceEncoder(vocabulary)
        vector = encoder.encode(["demam", "batuk", "demam"])   # two ones
        known, unknown = encoder.split(["demam", "???"])
    """

    def __init__(self, vocabulary: SymptomVocabulary):
        self.vocabulary = vocabulary

    @property
    def vector_dim(self) -> int:
        return self.vocabulary.size

    def encode(self, symptoms: Iterable[str]) -> np.ndarray:
        """
        Binary presence vector shape (D,).
        """
        vector = np.zeros(self.vector_dim, dtype=np.float64)
        for idx in self.vocabulary.get_indices(symptoms):
            vector[idx] = 1.0
        return vector

    def split(self, symptoms: Iterable[str]) -> Tuple[List[str], List[str]]:
        """(known ids in canonical order, unknown ids)"""
        return self.vocabulary.partition(symptoms)

    def symptom_coverage(self, symptoms: Iterable[str]) -> float:
        """Share of the vocabulary covered by the known symptoms [0, 1]"""
        if self.vocabulary.size == 0:
            return 0.0
        return len(self.vocabulary.get_indices(symptoms)) / self.vocabulary.size

    def __repr__(self) -> str:
        return f"EvidenceEncoder(vector_dim={self.vector_dim})"
