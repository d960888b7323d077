"""
Diagnosa — System settings

All parameters are collected in dataclasses for:
- Typed access via config.naive_bayes.alpha
- Serialization to YAML/JSON
"""

from dataclasses import dataclass, field
from typing import Optional


# =============================================================================
# NAIVE BAYES CONFIGURATION
# =============================================================================

@dataclass
class NaiveBayesConfig:
    """Parameters of the Naive Bayes scorer"""

    # Laplace (add-one) smoothing of p(s|D)
    alpha: float = 1.0

    # Added before every logarithm
    epsilon: float = 1e-10

    # How many ranked diseases are returned
    top_k: int = 5

    def __post_init__(self):
        if self.alpha <= 0:
            raise ValueError(f"alpha must be positive, got {self.alpha}")
        if self.epsilon < 0:
            raise ValueError(f"epsilon must be non-negative, got {self.epsilon}")
        if self.top_k < 1:
            raise ValueError(f"top_k must be at least 1, got {self.top_k}")


# =============================================================================
# CONFIDENCE BANDS
# =============================================================================

@dataclass
class ConfidenceThresholds:
    """Posterior percentage thresholds (strict greater-than)"""
    high: float = 40.0
    medium: float = 20.0

    def __post_init__(self):
        if not 0.0 <= self.medium <= self.high <= 100.0:
            raise ValueError(
                f"Expected 0 <= medium <= high <= 100, got medium={self.medium}, high={self.high}"
            )


# =============================================================================
# MAIN CONFIGURATION
# =============================================================================

@dataclass
class DiagnosaConfig:
    """
    Main Diagnosa configuration.

    Example:
        config = DiagnosaConfig()
        print(config.naive_bayes.alpha)   # 1.0
        print(config.confidence.high)     # 40.0
    """

    # Metadata
    version: str = "1.0.0"
    project_name: str = "Diagnosa"

    # Components
    naive_bayes: NaiveBayesConfig = field(default_factory=NaiveBayesConfig)
    confidence: ConfidenceThresholds = field(default_factory=ConfidenceThresholds)

    # External knowledge base file (YAML/JSON); None = compiled-in registry
    knowledge_base_path: Optional[str] = None


def get_default_config() -> DiagnosaConfig:
    """Default configuration: alpha=1.0, epsilon=1e-10, top 5, bands 40/20"""
    return DiagnosaConfig()
