"""
Diagnosa — Inference module

Naive Bayes posterior over the disease registry.

Components:
- likelihood.py: Laplace-smoothed p(s|D), log-sum-exp
- engine.py: NaiveBayesEngine, diagnose()

Example:
    from diagnosa.inference import diagnose

    for result in diagnose(["demam", "batuk", "sesak-napas"]):
        print(f"{result.name}: {result.probability_percent:.1f}% ({result.confidence.value})")
"""

from .likelihood import symptom_likelihood, likelihood_matrix, log_sum_exp
from .engine import NaiveBayesEngine, get_default_engine, diagnose


__all__ = [
    "NaiveBayesEngine",
    "get_default_engine",
    "diagnose",
    "symptom_likelihood",
    "likelihood_matrix",
    "log_sum_exp",
]
