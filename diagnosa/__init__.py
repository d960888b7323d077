"""
Diagnosa — Naive Bayes disease diagnosis calculator

Estimates, from a set of observed symptoms, the relative likelihood of a
fixed set of candidate diseases.

Modules:
- config: System configuration
- schemas: Pydantic data models
- knowledge_base: Disease registry and symptom vocabulary
- encoding: Vectorization of the registry and of evidence
- inference: Naive Bayes posterior, ranking, confidence bands
- api: REST API
- cli: Command-line interface
"""

__version__ = "1.0.0"

from .config import DiagnosaConfig, get_default_config
from .inference import NaiveBayesEngine, diagnose
