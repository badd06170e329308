import os
import random
from pathlib import Path

import pytest
from dotenv import load_dotenv
from loguru import logger


@pytest.fixture(scope="session", autouse=True)
def env() -> None:
    # Load .env if present; otherwise set sane defaults for tests
    if Path(".env").exists():
        load_dotenv(".env")
    os.environ.setdefault("SIZEFILL_APP_ENV", "dev")
    os.environ["SIZEFILL_LOG_LEVEL"] = "DEBUG"
    os.environ["SIZEFILL_LOG_JSON"] = "false"
    os.environ["SIZEFILL_DEFAULT_DEVIATION"] = "0.0"
    os.environ["SIZEFILL_BUFFER_SIZE"] = "1024"
    os.environ.pop("SIZEFILL_MAX_SIZE", None)
    # Clear cached settings so modules see the pinned env
    from sizefill.core.config import get_settings

    get_settings.cache_clear()
    _ = get_settings()


@pytest.fixture(autouse=True)
def reset_log_sinks():
    yield
    # Sinks may point at a captured stream that pytest closes after the test
    logger.remove()


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1337)
