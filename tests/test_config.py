"""
Tests for configuration

Run: pytest tests/test_config.py -v
"""

import pytest


def test_default_config():
    from diagnosa.config import get_default_config

    config = get_default_config()

    assert config.naive_bayes.alpha == 1.0
    assert config.naive_bayes.epsilon == 1e-10
    assert config.naive_bayes.top_k == 5
    assert config.confidence.high == 40.0
    assert config.confidence.medium == 20.0
    assert config.knowledge_base_path is None

    print(f"✓ Default config: {config.project_name} v{config.version}")


def test_default_config_is_fresh():
    from diagnosa.config import get_default_config

    a = get_default_config()
    a.naive_bayes.top_k = 3
    assert get_default_config().naive_bayes.top_k == 5


@pytest.mark.parametrize("kwargs", [
    {"alpha": 0.0},
    {"alpha": -1.0},
    {"epsilon": -1e-10},
    {"top_k": 0},
])
def test_invalid_naive_bayes_config(kwargs):
    from diagnosa.config import NaiveBayesConfig

    with pytest.raises(ValueError):
        NaiveBayesConfig(**kwargs)


@pytest.mark.parametrize("high,medium", [(20.0, 40.0), (120.0, 20.0), (40.0, -1.0)])
def test_invalid_thresholds(high, medium):
    from diagnosa.config import ConfidenceThresholds

    with pytest.raises(ValueError):
        ConfidenceThresholds(high=high, medium=medium)


def test_save_and_load_config(tmp_path):
    from diagnosa.config import DiagnosaConfig, NaiveBayesConfig, save_config, load_config

    config = DiagnosaConfig(
        naive_bayes=NaiveBayesConfig(alpha=0.5, top_k=3),
        knowledge_base_path="data/knowledge_base.yaml",
    )
    path = tmp_path / "nested" / "config.yaml"
    save_config(config, str(path))

    loaded = load_config(str(path))

    assert loaded == config
    assert loaded.naive_bayes.alpha == 0.5
    assert loaded.knowledge_base_path == "data/knowledge_base.yaml"


def test_partial_config(tmp_path):
    from diagnosa.config import load_config

    path = tmp_path / "config.yaml"
    path.write_text("naive_bayes:\n  top_k: 2\n", encoding="utf-8")

    config = load_config(str(path))

    assert config.naive_bayes.top_k == 2
    assert config.naive_bayes.alpha == 1.0
    assert config.confidence.high == 40.0


def test_empty_config_file(tmp_path):
    from diagnosa.config import load_config, get_default_config

    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config(str(path)) == get_default_config()


def test_unknown_key_rejected():
    from diagnosa.config import config_from_dict

    with pytest.raises(ValueError):
        config_from_dict({"naive_bayes": {"beta": 2.0}})

    with pytest.raises(ValueError):
        config_from_dict({"som": {}})


def test_missing_config_file(tmp_path):
    from diagnosa.config import load_config

    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.yaml"))


def test_malformed_config_file(tmp_path):
    from diagnosa.config import load_config

    path = tmp_path / "config.yaml"
    path.write_text("naive_bayes: {top_k: 2\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Malformed"):
        load_config(str(path))


def test_config_file_must_be_mapping(tmp_path):
    from diagnosa.config import load_config

    path = tmp_path / "config.yaml"
    path.write_text("- top_k\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(str(path))
