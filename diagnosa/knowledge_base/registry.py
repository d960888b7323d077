"""
Diagnosa — Knowledge base

Read-only registry of diseases and the symptom vocabulary.

File format (YAML or JSON):
{
  "symptoms": [{"id": "demam", "label": "Demam"}, ...],
  "diseases": [
    {"id": "flu", "name": "...", "description": "...",
     "symptoms": ["demam", ...], "prior": 0.15},
    ...
  ]
}
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import yaml
from pydantic import ValidationError

from diagnosa.schemas import Symptom, Disease
from .data import DEFAULT_SYMPTOMS, DEFAULT_DISEASES


logger = logging.getLogger(__name__)


class KnowledgeBase:
    """
    Static registry of diseases and symptoms.

    Symptom order is the canonical feature order; disease order is the
    registry order used to break ties when ranking.

    Example:
        kb = get_default_knowledge_base()

        kb.list_symptoms()[0].id      # "demam"
        kb.get_disease("flu").prior   # 0.15
        "batuk" in kb                 # True
    """

    def __init__(self, symptoms: Iterable[Symptom], diseases: Iterable[Disease]):
        """
        Args:
            symptoms: Symptom vocabulary in canonical order
            diseases: Diseases in registry order

        Raises:
            ValueError: duplicate ids, or a disease refers to an unknown symptom
        """
        self._symptoms: tuple = tuple(symptoms)
        self._diseases: tuple = tuple(diseases)

        self._symptom_by_id: Dict[str, Symptom] = {}
        for symptom in self._symptoms:
            if symptom.id in self._symptom_by_id:
                raise ValueError(f"Duplicate symptom id: {symptom.id!r}")
            self._symptom_by_id[symptom.id] = symptom

        self._disease_by_id: Dict[str, Disease] = {}
        for disease in self._diseases:
            if disease.id in self._disease_by_id:
                raise ValueError(f"Duplicate disease id: {disease.id!r}")
            unknown = [s for s in disease.symptoms if s not in self._symptom_by_id]
            if unknown:
                raise ValueError(
                    f"Disease {disease.id!r} refers to unknown symptoms: {unknown}"
                )
            self._disease_by_id[disease.id] = disease

        if not self._diseases:
            raise ValueError("Knowledge base has no diseases")

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "KnowledgeBase":
        """
        Build from a plain dict (see module docstring for the layout).

        Raises:
            ValueError: malformed data
        """
        try:
            symptoms = [Symptom(**s) for s in data.get("symptoms", [])]
            diseases = [Disease(**d) for d in data.get("diseases", [])]
        except (ValidationError, TypeError) as e:
            raise ValueError(f"Invalid knowledge base data: {e}") from e
        return cls(symptoms, diseases)

    @classmethod
    def from_file(cls, path: str) -> "KnowledgeBase":
        """
        Load from a YAML (.yaml/.yml) or JSON file.

        Raises:
            FileNotFoundError: file does not exist
            ValueError: malformed data
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Knowledge base file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            try:
                if path.suffix.lower() == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
            except (json.JSONDecodeError, yaml.YAMLError) as e:
                raise ValueError(f"Malformed knowledge base file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Knowledge base file must contain a mapping: {path}")

        kb = cls.from_dict(data)
        logger.info("Loaded knowledge base from %s: %d diseases, %d symptoms",
                    path, len(kb.disease_ids), len(kb.symptom_ids))
        return kb

    def to_dict(self) -> Dict[str, Any]:
        return {
            "symptoms": [s.model_dump() for s in self._symptoms],
            "diseases": [
                {**d.model_dump(), "symptoms": list(d.symptoms)}
                for d in self._diseases
            ],
        }

    def save(self, path: str) -> None:
        """Save as JSON (.json) or YAML (anything else)"""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)
            else:
                yaml.safe_dump(self.to_dict(), f, allow_unicode=True, sort_keys=False)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def list_symptoms(self) -> List[Symptom]:
        """All symptoms in canonical order"""
        return list(self._symptoms)

    def list_diseases(self) -> List[Disease]:
        """All diseases in registry order"""
        return list(self._diseases)

    def get_symptom(self, symptom_id: str) -> Optional[Symptom]:
        return self._symptom_by_id.get(symptom_id)

    def get_disease(self, disease_id: str) -> Optional[Disease]:
        return self._disease_by_id.get(disease_id)

    def has_symptom(self, symptom_id: str) -> bool:
        return symptom_id in self._symptom_by_id

    @property
    def symptom_ids(self) -> List[str]:
        return [s.id for s in self._symptoms]

    @property
    def disease_ids(self) -> List[str]:
        return [d.id for d in self._diseases]

    def __len__(self) -> int:
        return len(self._diseases)

    def __contains__(self, symptom_id: str) -> bool:
        return self.has_symptom(symptom_id)

    def __repr__(self) -> str:
        return f"KnowledgeBase(diseases={len(self._diseases)}, symptoms={len(self._symptoms)})"


@lru_cache(maxsize=1)
def get_default_knowledge_base() -> KnowledgeBase:
    """Compiled-in registry: 8 diseases, 18 symptoms"""
    return KnowledgeBase(DEFAULT_SYMPTOMS, DEFAULT_DISEASES)
