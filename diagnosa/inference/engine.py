"""
Diagnosa — Naive Bayes inference engine

For every disease D and every symptom s of the vocabulary:

    logProb(D) = log(p(D) + ε)
               + Σ_s [ s ∈ evidence ? log(p(s|D) + ε) : log(1 − p(s|D) + ε) ]

The log-posteriors are normalized with log-sum-exp, converted to
percentages (summing to 100 over the registry), banded, sorted
descending (ties keep registry order) and truncated to top_k.

The engine is a pure function of (evidence, knowledge base): all arrays are
precomputed once and read-only, so one instance can be shared between
threads without locking.
"""

import logging
from functools import lru_cache
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from diagnosa.config import DiagnosaConfig, get_default_config
from diagnosa.knowledge_base import KnowledgeBase, get_default_knowledge_base
from diagnosa.encoding import DiseaseEncoder, EvidenceEncoder
from diagnosa.schemas import ConfidenceLevel, DiagnosisResult, DiagnosisReport

from .likelihood import likelihood_matrix, log_sum_exp


logger = logging.getLogger(__name__)


class NaiveBayesEngine:
    """
    Posterior-probability scorer over a fixed disease registry.

    Example:
        engine = NaiveBayesEngine()

        results = engine.diagnose(["mual", "muntah", "pusing"])
        results[0].disease_id            # "migrain"
        results[0].confidence            # ConfidenceLevel.HIGH

        distribution = engine.posterior(["demam"])   # all 8 diseases, sums to 100
    """

    def __init__(
        self,
        knowledge_base: Optional[KnowledgeBase] = None,
        config: Optional[DiagnosaConfig] = None
    ):
        """
        Args:
            knowledge_base: Disease registry (default: compiled-in)
            config: Scorer configuration (default: get_default_config())
        """
        self.knowledge_base = knowledge_base or get_default_knowledge_base()
        self.config = config or get_default_config()

        self.disease_encoder = DiseaseEncoder.from_knowledge_base(self.knowledge_base)
        self.evidence_encoder = EvidenceEncoder(self.disease_encoder.vocabulary)
        self._diseases = self.knowledge_base.list_diseases()

        nb = self.config.naive_bayes
        eps = nb.epsilon

        self._likelihoods = likelihood_matrix(self.disease_encoder.encode_all(), nb.alpha)
        self._log_present = np.log(self._likelihoods + eps)
        self._log_absent = np.log(1.0 - self._likelihoods + eps)
        self._log_priors = np.log(self.disease_encoder.priors() + eps)

        for array in (self._likelihoods, self._log_present, self._log_absent, self._log_priors):
            array.flags.writeable = False

    @classmethod
    def from_config(cls, config: DiagnosaConfig) -> "NaiveBayesEngine":
        """Engine whose registry comes from config.knowledge_base_path when set"""
        if config.knowledge_base_path:
            knowledge_base = KnowledgeBase.from_file(config.knowledge_base_path)
        else:
            knowledge_base = get_default_knowledge_base()
        return cls(knowledge_base, config)

    @property
    def vocabulary(self):
        return self.disease_encoder.vocabulary

    @property
    def likelihood_matrix(self) -> np.ndarray:
        """Smoothed p(s|D), shape (N_diseases, N_symptoms)"""
        return self._likelihoods

    # -------------------------------------------------------------------------
    # Scoring
    # -------------------------------------------------------------------------

    @staticmethod
    def _as_list(evidence: Iterable[str]) -> List[str]:
        if isinstance(evidence, str):
            return [evidence]
        return list(evidence)

    def _split_evidence(self, evidence: List[str]) -> Tuple[List[str], List[str]]:
        known, unknown = self.evidence_encoder.split(evidence)
        if unknown:
            logger.warning("Ignoring unknown symptom ids: %s", ", ".join(unknown))
        return known, unknown

    def log_probabilities(self, evidence: Iterable[str]) -> np.ndarray:
        """
        Unnormalized log-posterior for every disease, registry order.

        Every vocabulary symptom contributes: present ones their likelihood,
        absent ones the complement.
        """
        present = self.evidence_encoder.encode(self._as_list(evidence)) > 0
        terms = np.where(present, self._log_present, self._log_absent)
        return self._log_priors + terms.sum(axis=1)

    def _percentages(self, known: List[str]) -> np.ndarray:
        log_probs = self.log_probabilities(known)
        evidence_norm = log_sum_exp(log_probs)
        return np.exp(log_probs - evidence_norm) * 100.0

    def posterior(self, evidence: Iterable[str]) -> Dict[str, float]:
        """
        Full posterior distribution in percent, every disease, registry order.

        Returns:
            {disease_id: percent}, or {} when the evidence collection is empty
        """
        evidence = self._as_list(evidence)
        if not evidence:
            return {}

        known, _ = self._split_evidence(evidence)
        percents = self._percentages(known)
        return {
            disease.id: float(p)
            for disease, p in zip(self._diseases, percents)
        }

    def _rank(self, known: List[str]) -> List[DiagnosisResult]:
        percents = self._percentages(known)
        thresholds = self.config.confidence

        # Stable sort keeps registry order between equal scores
        order = np.argsort(-percents, kind="stable")[:self.config.naive_bayes.top_k]

        results = []
        for idx in order:
            disease_id = self.disease_encoder.index_to_disease(int(idx))
            disease = self.knowledge_base.get_disease(disease_id)
            percent = min(100.0, max(0.0, float(percents[idx])))
            results.append(DiagnosisResult(
                disease_id=disease.id,
                name=disease.name,
                description=disease.description,
                probability_percent=percent,
                confidence=ConfidenceLevel.from_percent(
                    percent, high=thresholds.high, medium=thresholds.medium
                ),
                matching_symptoms=[s for s in known if s in disease.symptoms],
            ))

        logger.debug(
            "Scored %d diseases for %s; top: %s",
            len(self._diseases), known,
            results[0].disease_id if results else None
        )
        return results

    def diagnose(self, evidence: Iterable[str]) -> List[DiagnosisResult]:
        """
        Ranked diagnosis results.

        Args:
            evidence: Symptom ids, matched exactly; duplicates collapse,
                unknown ids match no disease

        Returns:
            Up to top_k results sorted by probability_percent descending;
            [] only when the evidence collection is empty. Evidence made of
            unknown ids alone is scored with every symptom absent.
        """
        evidence = self._as_list(evidence)
        if not evidence:
            return []

        known, _ = self._split_evidence(evidence)
        return self._rank(known)

    def diagnose_report(self, evidence: Iterable[str]) -> DiagnosisReport:
        """diagnose() plus the evidence actually used and the ids ignored"""
        evidence = self._as_list(evidence)
        if not evidence:
            return DiagnosisReport()

        known, unknown = self._split_evidence(evidence)
        return DiagnosisReport(
            evidence=known,
            ignored_symptoms=unknown,
            symptom_coverage=self.evidence_encoder.symptom_coverage(known),
            results=self._rank(known),
        )

    def __repr__(self) -> str:
        return (
            f"NaiveBayesEngine(diseases={len(self._diseases)}, "
            f"symptoms={self.vocabulary.size}, alpha={self.config.naive_bayes.alpha})"
        )


@lru_cache(maxsize=1)
def get_default_engine() -> NaiveBayesEngine:
    """Shared engine over the compiled-in registry and default config"""
    return NaiveBayesEngine()


def diagnose(evidence: Iterable[str]) -> List[DiagnosisResult]:
    """Ranked diagnosis with the default engine"""
    return get_default_engine().diagnose(evidence)
