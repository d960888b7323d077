"""
Diagnosa — API Dependencies

Dependency injection for FastAPI: the engine is built once and shared.
"""

import logging
import threading
from typing import Optional

from fastapi import HTTPException

from diagnosa.config import load_config, get_default_config
from diagnosa.inference import NaiveBayesEngine

from .config import config


logger = logging.getLogger(__name__)


class EngineManager:
    """
    Holds the shared NaiveBayesEngine.
    Singleton pattern.
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True
        self.engine: Optional[NaiveBayesEngine] = None
        self.error: Optional[str] = None

    @property
    def is_loaded(self) -> bool:
        return self.engine is not None

    def load(
        self,
        knowledge_base_path: Optional[str] = None,
        config_path: Optional[str] = None
    ) -> bool:
        """
        Build the engine from the configured files.

        Returns:
            True on success; on failure the error is kept in self.error
        """
        if self.is_loaded:
            return True

        knowledge_base_path = knowledge_base_path or config.knowledge_base_path
        config_path = config_path or config.config_path

        try:
            diagnosa_config = load_config(config_path) if config_path else get_default_config()
            if knowledge_base_path:
                diagnosa_config.knowledge_base_path = knowledge_base_path

            self.engine = NaiveBayesEngine.from_config(diagnosa_config)
            self.error = None
            logger.info("Engine loaded: %r", self.engine)
            return True

        except (FileNotFoundError, ValueError) as e:
            self.error = str(e)
            logger.error("Failed to load engine: %s", e)
            return False

    def set_engine(self, engine: NaiveBayesEngine) -> None:
        """Replace the shared engine"""
        self.engine = engine
        self.error = None

    def reset(self) -> None:
        self.engine = None
        self.error = None

    def get_engine(self) -> NaiveBayesEngine:
        if not self.is_loaded:
            self.load()
        return self.engine


engine_manager = EngineManager()


def get_manager() -> EngineManager:
    """Dependency: engine manager"""
    return engine_manager


def require_engine() -> NaiveBayesEngine:
    """Dependency: shared engine, 503 if it failed to load"""
    engine = engine_manager.get_engine()
    if engine is None:
        raise HTTPException(
            status_code=503,
            detail=f"Diagnosis engine not available: {engine_manager.error}"
        )
    return engine
