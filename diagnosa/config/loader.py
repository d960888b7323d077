"""Diagnosa — Configuration loading"""
import yaml
from pathlib import Path
from dataclasses import asdict
from typing import Any, Dict
from .settings import DiagnosaConfig, NaiveBayesConfig, ConfidenceThresholds


def save_yaml(data: Dict[str, Any], path: str) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, default_flow_style=False, allow_unicode=True, sort_keys=False)


def load_yaml(path: str) -> dict:
    """
    Raises:
        FileNotFoundError: file does not exist
        ValueError: not valid YAML
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        try:
            return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Malformed YAML in {path}: {e}") from e


def config_from_dict(data: Dict[str, Any]) -> DiagnosaConfig:
    """Build DiagnosaConfig from a (possibly partial) nested dict"""
    data = dict(data or {})
    try:
        naive_bayes = NaiveBayesConfig(**(data.pop("naive_bayes", None) or {}))
        confidence = ConfidenceThresholds(**(data.pop("confidence", None) or {}))
        return DiagnosaConfig(naive_bayes=naive_bayes, confidence=confidence, **data)
    except TypeError as e:
        raise ValueError(f"Invalid configuration: {e}") from e


def save_config(config: DiagnosaConfig, path: str) -> None:
    save_yaml(asdict(config), path)


def load_config(path: str) -> DiagnosaConfig:
    data = load_yaml(path)
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file must contain a mapping: {path}")
    return config_from_dict(data)
