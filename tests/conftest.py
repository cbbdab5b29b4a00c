"""
Shared pytest fixtures for detector tests.

Uses DI to inject temp-file SQLite databases and fake model judges, so no
test touches production state or the network.

The conftest patches the Config singleton at import time so that the
module-level `db = Database()` in common/database.py doesn't create
data/detector.db in the working directory.
"""

import asyncio
import os
import sys
import tempfile
from pathlib import Path

# Ensure project root is on sys.path so imports work from tests/
sys.path.insert(0, str(Path(__file__).parent.parent))

# Keep JSON log files out of the working tree
os.environ.setdefault("DETECTOR_LOG_DIR", os.path.join(tempfile.gettempdir(), "detector_test_logs"))

# Patch Config BEFORE anything else imports common.database, so the
# module-level `db = Database()` singleton points at a temp file.
import common.config as config_module
from common.config import Config

config_module.config._config = {
    "database": {"sqlite_path": os.path.join(tempfile.gettempdir(), "detector_test_singleton.db")},
    "paths": {},
}
Config._instance = config_module.config

# Now it's safe to import database and repos
import pytest
from common.database import Database
from common.errors import ModelFailure
from common.repositories import AnalysisRepository
from detection.judgment import PROVIDER_ANTHROPIC, ModelJudgmentPort, ProviderConfig
from detection.protocols import ModelJudge
from detection.service import DetectorService
from detection.types import ModelScore


class CountingJudge(ModelJudge):
    """Returns a fixed score and counts calls; optional delay to widen races."""

    def __init__(self, score=9, confidence=0.8, delay=0.0):
        self.fixed = ModelScore(value=score, confidence=confidence)
        self.delay = delay
        self.calls = 0

    @property
    def provider(self):
        return PROVIDER_ANTHROPIC

    @property
    def model(self):
        return "fake-model"

    async def score(self, text):
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        return self.fixed


class FailingJudge(CountingJudge):
    async def score(self, text):
        self.calls += 1
        raise ModelFailure(self.provider, "HTTP 500: boom")


class SlowJudge(CountingJudge):
    async def score(self, text):
        self.calls += 1
        await asyncio.sleep(5)
        return self.fixed


FAKE_PROVIDER = ProviderConfig(provider=PROVIDER_ANTHROPIC, model="fake-model", api_key="test-key")


@pytest.fixture
def memory_db(tmp_path):
    """Provides a fresh file-backed SQLite database with full schema.

    Uses tmp_path so each test gets an isolated database (unlike :memory:
    which creates a new DB per connection and loses schema).
    """
    db_file = str(tmp_path / "test_detector.db")
    return Database(db_path=db_file)


@pytest.fixture
def analysis_repo(memory_db):
    return AnalysisRepository(memory_db)


@pytest.fixture
def counting_judge():
    return CountingJudge()


@pytest.fixture
def heuristic_service(analysis_repo):
    """Service with no model provider configured."""
    return DetectorService(repository=analysis_repo, provider=ProviderConfig(), max_content_length=50_000)


@pytest.fixture
def model_service(analysis_repo, counting_judge):
    """Service backed by a CountingJudge scoring 9 at confidence 0.8."""
    return DetectorService(
        repository=analysis_repo,
        provider=FAKE_PROVIDER,
        port=ModelJudgmentPort(counting_judge, timeout_seconds=2.0),
        max_content_length=50_000,
    )
