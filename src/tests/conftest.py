import pytest

from boxingpython.ai.config import clear_config_cache
from boxingpython.base.upload import VideoUpload

from .stubs import ScriptedClient


@pytest.fixture
def upload():
    return VideoUpload(data=b"\x00" * 2048, media_type="video/mp4", filename="bag_session.mp4")


@pytest.fixture
def scripted_client():
    return ScriptedClient


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Run every test in an empty directory with a fresh config cache."""
    monkeypatch.chdir(tmp_path)
    clear_config_cache()
    yield
    clear_config_cache()
