"""
Tests for the inference module

Run: pytest tests/test_inference_engine.py -v
"""

import logging
import math
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest


RESPIRATORY = {"covid", "pneumonia", "bronkitis", "asma"}
WITHOUT_SESAK_NAPAS = {"flu", "tbc", "sinusitis", "migrain"}


def _reference_log_prob(evidence, disease, vocabulary, alpha=1.0, eps=1e-10):
    """Straight loop over the vocabulary, one term per symptom"""
    n = len(disease.symptoms)
    log_prob = math.log(disease.prior + eps)
    for symptom in vocabulary:
        if symptom in disease.symptoms:
            p = (1 + alpha) / (n + 2 * alpha)
        else:
            p = alpha / (n + 2 * alpha)
        if symptom in evidence:
            log_prob += math.log(p + eps)
        else:
            log_prob += math.log(1 - p + eps)
    return log_prob


# =============================================================================
# likelihood.py
# =============================================================================

def test_symptom_likelihood():
    """Laplace smoothing with alpha=1"""
    from diagnosa.inference import symptom_likelihood

    assert symptom_likelihood(True, 5) == pytest.approx(2 / 7)
    assert symptom_likelihood(False, 5) == pytest.approx(1 / 7)
    assert symptom_likelihood(True, 6) == pytest.approx(2 / 8)
    assert symptom_likelihood(False, 6) == pytest.approx(1 / 8)
    assert symptom_likelihood(True, 0, alpha=2.0) == pytest.approx(3 / 4)

    print("✓ p(s|D) smoothing")


def test_likelihood_matrix(engine):
    """Vectorized table matches the scalar formula"""
    from diagnosa.inference import symptom_likelihood

    table = engine.likelihood_matrix
    kb = engine.knowledge_base

    assert table.shape == (8, 18)

    for i, disease in enumerate(kb.list_diseases()):
        for j, symptom in enumerate(kb.symptom_ids):
            expected = symptom_likelihood(symptom in disease.symptoms, disease.symptom_count)
            assert table[i, j] == pytest.approx(expected)

    print(f"✓ Likelihood table {table.shape}")


def test_likelihood_matrix_is_read_only(engine):
    with pytest.raises(ValueError):
        engine.likelihood_matrix[0, 0] = 0.5


def test_log_sum_exp():
    """No overflow/underflow at extreme magnitudes"""
    from diagnosa.inference import log_sum_exp

    assert log_sum_exp(np.array([-1000.0, -1000.0])) == pytest.approx(-1000.0 + math.log(2))
    assert log_sum_exp(np.array([1000.0, 1000.0])) == pytest.approx(1000.0 + math.log(2))
    assert log_sum_exp(np.array([0.0])) == pytest.approx(0.0)
    assert log_sum_exp(np.array([])) == float("-inf")

    print("✓ log-sum-exp")


# =============================================================================
# engine.py
# =============================================================================

def test_empty_evidence(engine):
    assert engine.diagnose([]) == []
    assert engine.diagnose(set()) == []
    assert engine.posterior([]) == {}
    assert engine.diagnose_report([]).is_empty


def test_log_probabilities_match_reference(engine):
    """Every vocabulary symptom contributes, present or absent"""
    kb = engine.knowledge_base
    evidence = {"demam", "batuk", "nyeri-dada"}

    log_probs = engine.log_probabilities(evidence)
    expected = [
        _reference_log_prob(evidence, d, kb.symptom_ids)
        for d in kb.list_diseases()
    ]

    assert np.allclose(log_probs, expected, rtol=0, atol=1e-9)
    print(f"✓ Log-probabilities: {np.round(log_probs, 3)}")


def test_posterior_sums_to_100(engine, knowledge_base):
    """Normalized over the whole registry, before truncation"""
    evidences = [[s] for s in knowledge_base.symptom_ids]
    evidences.append(knowledge_base.symptom_ids)
    evidences.append(["demam", "batuk", "sesak-napas"])

    for evidence in evidences:
        distribution = engine.posterior(evidence)
        assert list(distribution) == knowledge_base.disease_ids
        assert sum(distribution.values()) == pytest.approx(100.0, abs=1e-6)

    print(f"✓ Posterior sums to 100 for {len(evidences)} evidence sets")


def test_results_sorted_and_truncated(engine, knowledge_base):
    for symptom in knowledge_base.symptom_ids:
        results = engine.diagnose([symptom])

        assert len(results) == 5
        for a, b in zip(results, results[1:]):
            assert a.probability_percent >= b.probability_percent

    print("✓ Every single-symptom diagnosis returns 5 ranked results")


def test_confidence_bands_consistent(engine, knowledge_base):
    from diagnosa.schemas import ConfidenceLevel

    checked = 0
    evidences = [[s] for s in knowledge_base.symptom_ids] + [
        ["mual", "muntah", "pusing"],
        ["demam", "batuk", "sesak-napas"],
        ["batuk-berdarah", "berkeringat-malam", "penurunan-berat-badan"],
    ]
    for evidence in evidences:
        for result in engine.diagnose(evidence):
            p = result.probability_percent
            if p > 40:
                assert result.confidence == ConfidenceLevel.HIGH
            elif p > 20:
                assert result.confidence == ConfidenceLevel.MEDIUM
            else:
                assert result.confidence == ConfidenceLevel.LOW
            checked += 1

    print(f"✓ {checked} results banded consistently")


def test_idempotent(engine):
    evidence = {"demam", "sakit-kepala", "hidung-tersumbat"}
    assert engine.diagnose(evidence) == engine.diagnose(evidence)


def test_respiratory_scenario(engine):
    """demam + batuk + sesak-napas"""
    evidence = {"demam", "batuk", "sesak-napas"}
    results = engine.diagnose(evidence)
    distribution = engine.posterior(evidence)

    assert results[0].disease_id in RESPIRATORY
    assert results[0].disease_id == "bronkitis"

    # All three carry every evidence symptom
    for disease_id in ("covid", "pneumonia", "bronkitis"):
        for other in WITHOUT_SESAK_NAPAS:
            assert distribution[disease_id] > distribution[other]

    print("✓ Respiratory scenario:")
    for r in results:
        print(f"    {r.name}: {r.probability_percent:.2f}% ({r.confidence.value})")


def test_migraine_scenario(engine):
    """mual + muntah + pusing → only migrain has all three"""
    from diagnosa.schemas import ConfidenceLevel

    results = engine.diagnose({"mual", "muntah", "pusing"})

    assert results[0].disease_id == "migrain"
    assert results[0].confidence == ConfidenceLevel.HIGH
    assert results[0].matching_symptoms == ["mual", "muntah", "pusing"]

    print(f"✓ Migraine scenario: {results[0].probability_percent:.2f}%")


def test_unknown_symptom_ignored(engine):
    assert engine.diagnose({"demam", "not-a-real-symptom"}) == engine.diagnose({"demam"})


def test_only_unknown_symptoms_scored_as_all_absent(engine):
    """Non-empty evidence always ranks; unknown ids match nothing"""
    results = engine.diagnose(["not-a-real-symptom", "???"])

    assert len(results) == 5
    assert all(r.matching_symptoms == [] for r in results)
    assert results == engine.diagnose(["something-else"])

    distribution = engine.posterior(["not-a-real-symptom"])
    assert sum(distribution.values()) == pytest.approx(100.0, abs=1e-6)

    # Same scores as evidence with every vocabulary symptom absent
    assert np.allclose(
        engine.log_probabilities(["not-a-real-symptom"]),
        engine.log_probabilities([]),
    )


def test_unknown_symptom_logs_warning(engine, caplog):
    with caplog.at_level(logging.WARNING, logger="diagnosa.inference.engine"):
        engine.diagnose(["demam", "not-a-real-symptom"])

    assert "not-a-real-symptom" in caplog.text


def test_duplicates_collapse(engine):
    expected = engine.diagnose(["demam"])

    assert engine.diagnose(["demam", "demam"]) == expected
    assert engine.diagnose("demam") == expected


def test_ids_matched_exactly(engine):
    """Case or whitespace variants are unknown ids, not matches"""
    for variant in ["DEMAM", " Demam ", "demam "]:
        results = engine.diagnose([variant])

        assert results == engine.diagnose(["not-a-real-symptom"])
        assert all(r.matching_symptoms == [] for r in results)

        report = engine.diagnose_report([variant])
        assert report.evidence == []
        assert report.ignored_symptoms == [variant]

    assert engine.diagnose(["demam", "DEMAM"]) == engine.diagnose(["demam"])


def test_diagnose_report(engine):
    report = engine.diagnose_report(["batuk", "xyz", "demam", "batuk"])

    # Canonical vocabulary order
    assert report.evidence == ["demam", "batuk"]
    assert report.ignored_symptoms == ["xyz"]
    assert report.results == engine.diagnose(["demam", "batuk"])

    summary = report.to_summary()
    assert summary["top_diagnosis"] == report.results[0].name
    assert summary["ignored_count"] == 1
    assert report.symptom_coverage == pytest.approx(2 / 18)

    unknown_only = engine.diagnose_report(["xyz"])
    assert unknown_only.evidence == []
    assert unknown_only.symptom_coverage == 0.0
    assert len(unknown_only.results) == 5


def test_registry_order_breaks_ties():
    """Identical diseases keep registry order"""
    from diagnosa.knowledge_base import KnowledgeBase
    from diagnosa.inference import NaiveBayesEngine
    from diagnosa.schemas import Symptom, Disease

    symptoms = [Symptom(id="a", label="A"), Symptom(id="b", label="B")]
    diseases = [
        Disease(id="second", name="Second", symptoms=("a",), prior=0.2),
        Disease(id="first", name="First", symptoms=("a",), prior=0.2),
        Disease(id="other", name="Other", symptoms=("b",), prior=0.2),
    ]
    engine = NaiveBayesEngine(KnowledgeBase(symptoms, diseases))

    results = engine.diagnose(["a"])

    assert [r.disease_id for r in results] == ["second", "first", "other"]
    assert results[0].probability_percent == results[1].probability_percent


def test_top_k_from_config(knowledge_base):
    from diagnosa.config import DiagnosaConfig, NaiveBayesConfig
    from diagnosa.inference import NaiveBayesEngine

    engine = NaiveBayesEngine(knowledge_base, DiagnosaConfig(naive_bayes=NaiveBayesConfig(top_k=3)))
    assert len(engine.diagnose(["demam"])) == 3

    engine = NaiveBayesEngine(knowledge_base, DiagnosaConfig(naive_bayes=NaiveBayesConfig(top_k=20)))
    assert len(engine.diagnose(["demam"])) == 8


def test_engine_from_config_file(kb_path):
    from diagnosa.config import DiagnosaConfig
    from diagnosa.inference import NaiveBayesEngine

    engine = NaiveBayesEngine.from_config(DiagnosaConfig(knowledge_base_path=str(kb_path)))
    default = NaiveBayesEngine()

    assert engine.diagnose(["mual", "pusing"]) == default.diagnose(["mual", "pusing"])


def test_module_level_diagnose(engine):
    from diagnosa import diagnose
    from diagnosa.inference import get_default_engine

    assert get_default_engine() is get_default_engine()
    assert diagnose(["demam", "batuk"]) == engine.diagnose(["demam", "batuk"])
    assert diagnose([]) == []


def test_concurrent_calls(engine):
    """Shared engine, no locking"""
    evidence = ["demam", "batuk", "kelelahan"]
    expected = engine.diagnose(evidence)

    with ThreadPoolExecutor(max_workers=8) as pool:
        outputs = list(pool.map(lambda _: engine.diagnose(evidence), range(64)))

    assert all(out == expected for out in outputs)
