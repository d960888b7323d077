"""
Diagnosa — Symptom vocabulary

Maps symptom ids to feature indices and back.
The index order is the canonical feature order of the model.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from diagnosa.knowledge_base import KnowledgeBase


class SymptomVocabulary:
    """
    Vocabulary: symptom id ↔ index

    Example:
        vocab = SymptomVocabulary.from_knowledge_base(kb)

        idx = vocab.symptom_to_index("batuk")   # 1
        vocab.index_to_symptom(0)                # "demam"
        vocab.size                               # 18
    """

    def __init__(self):
        self._symptom_to_idx: Dict[str, int] = {}
        self._idx_to_symptom: Dict[int, str] = {}
        self._frozen: bool = False

    @classmethod
    def from_knowledge_base(cls, kb: KnowledgeBase) -> "SymptomVocabulary":
        """Vocabulary in the knowledge base's canonical symptom order"""
        return cls.from_symptoms(kb.symptom_ids)

    @classmethod
    def from_symptoms(cls, symptoms: Iterable[str]) -> "SymptomVocabulary":
        """
        Build a frozen vocabulary, keeping first-seen order.

        Args:
            symptoms: Symptom ids

        Returns:
            SymptomVocabulary
        """
        vocab = cls()
        for symptom in symptoms:
            vocab.add_symptom(symptom)
        vocab.freeze()
        return vocab

    def add_symptom(self, symptom: str) -> int:
        """
        Add a symptom id.

        Returns:
            Index of the symptom
        """
        if self._frozen:
            raise RuntimeError("Vocabulary is frozen. Cannot add new symptoms.")

        if symptom in self._symptom_to_idx:
            return self._symptom_to_idx[symptom]

        idx = len(self._symptom_to_idx)
        self._symptom_to_idx[symptom] = idx
        self._idx_to_symptom[idx] = symptom

        return idx

    def freeze(self) -> None:
        self._frozen = True

    def symptom_to_index(self, symptom: str) -> Optional[int]:
        """Index of a symptom, or None if the id is unknown"""
        return self._symptom_to_idx.get(symptom)

    def index_to_symptom(self, index: int) -> Optional[str]:
        return self._idx_to_symptom.get(index)

    def has_symptom(self, symptom: str) -> bool:
        return symptom in self._symptom_to_idx

    @property
    def size(self) -> int:
        return len(self._symptom_to_idx)

    @property
    def symptoms(self) -> List[str]:
        """All symptom ids in index order"""
        return [self._idx_to_symptom[i] for i in range(self.size)]

    def get_indices(self, symptoms: Iterable[str]) -> List[int]:
        """
        Sorted, de-duplicated indices of the known symptoms.

        Unknown ids are skipped.
        """
        indices = set()
        for symptom in symptoms:
            idx = self.symptom_to_index(symptom)
            if idx is not None:
                indices.add(idx)
        return sorted(indices)

    def partition(self, symptoms: Iterable[str]) -> Tuple[List[str], List[str]]:
        """
        Split ids into (known, unknown).

        Matching is exact: "DEMAM" or " demam" is unknown.
        Known ids come back de-duplicated in canonical order;
        unknown ids keep their input order, de-duplicated.
        """
        symptoms = list(symptoms)
        unknown: List[str] = []
        for symptom in symptoms:
            if symptom not in self._symptom_to_idx and symptom not in unknown:
                unknown.append(symptom)
        known = [self.index_to_symptom(i) for i in self.get_indices(symptoms)]
        return known, unknown

    def __len__(self) -> int:
        return self.size

    def __contains__(self, symptom: str) -> bool:
        return self.has_symptom(symptom)

    def __repr__(self) -> str:
        return f"SymptomVocabulary(size={self.size}, frozen={self._frozen})"
