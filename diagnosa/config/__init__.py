"""Diagnosa — Configuration module"""
from .settings import (
    DiagnosaConfig,
    get_default_config,
    NaiveBayesConfig,
    ConfidenceThresholds,
)
from .loader import save_config, load_config, config_from_dict, save_yaml, load_yaml

__all__ = [
    "DiagnosaConfig",
    "get_default_config",
    "NaiveBayesConfig",
    "ConfidenceThresholds",
    "save_config",
    "load_config",
    "config_from_dict",
    "save_yaml",
    "load_yaml",
]
