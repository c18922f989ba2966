# Ensure project root is on sys.path for tests
import sys, pathlib
root = pathlib.Path(__file__).resolve().parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))

from dataclasses import asdict
import pytest
from vouch.core.logging import logger
from vouch.system.settings import settings

@pytest.fixture(autouse=True)
def _restore_settings():
    saved = asdict(settings.data)
    yield
    for name, value in saved.items():
        setattr(settings.data, name, value)
    logger.set_level(settings.data.log_level)
