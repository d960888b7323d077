"""
Diagnosa — Likelihood model

Laplace-smoothed p(s|D) and log-space helpers.

    p(s|D) = (1 + α) / (|D| + 2α)   if s is characteristic of D
    p(s|D) =       α / (|D| + 2α)   otherwise
"""

import numpy as np


def symptom_likelihood(is_characteristic: bool, symptom_count: int, alpha: float = 1.0) -> float:
    """
    p(s|D) for a single symptom.

    Args:
        is_characteristic: s belongs to D's characteristic set
        symptom_count: |D.symptoms|
        alpha: Smoothing constant

    Returns:
        Probability in (0, 1)
    """
    denominator = symptom_count + 2 * alpha
    if is_characteristic:
        return (1 + alpha) / denominator
    return alpha / denominator


def likelihood_matrix(disease_matrix: np.ndarray, alpha: float = 1.0) -> np.ndarray:
    """
    p(s|D) for every disease (rows) and symptom (columns).

    Args:
        disease_matrix: Binary characteristic matrix shape (N, D)
        alpha: Smoothing constant

    Returns:
        Matrix shape (N, D)
    """
    counts = disease_matrix.sum(axis=1, keepdims=True)
    return (disease_matrix + alpha) / (counts + 2 * alpha)


def log_sum_exp(values: np.ndarray) -> float:
    """log(Σ exp(v)) without overflow/underflow"""
    values = np.asarray(values, dtype=np.float64)
    if values.size == 0:
        return float("-inf")
    max_value = np.max(values)
    if not np.isfinite(max_value):
        return float(max_value)
    return float(max_value + np.log(np.sum(np.exp(values - max_value))))
