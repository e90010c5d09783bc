import os

# pygame has to run headless
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from pgcss import CSS


@pytest.fixture
def css():
    return CSS((1280, 720))
