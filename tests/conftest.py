import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random  # noqa: E402

import pygame  # noqa: E402
import pytest  # noqa: E402
from icecream import ic  # noqa: E402

from client.app import ClientApp  # noqa: E402
from client.config_manager import ConfigManager  # noqa: E402
from core.config import Settings  # noqa: E402

ic.disable()

# segundos por unidade: users = 3 unidades, failing = 2 unidades
DELAY_UNIT = 0.01


class AlwaysFail(random.Random):
    def random(self) -> float:
        return 0.0


class NeverFail(random.Random):
    def random(self) -> float:
        return 0.999


class ExplodingRandom(random.Random):
    def random(self) -> float:
        raise AssertionError("random source must not be consulted")


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, fetch_delay_unit=DELAY_UNIT, fetch_failure_rate=0.2)


@pytest.fixture
def make_app(settings, tmp_path):
    """Build a ClientApp drawing on an off-screen surface."""

    def _make(rng: random.Random | None = None, delay_unit: float | None = None) -> ClientApp:
        app_settings = settings
        if delay_unit is not None:
            app_settings = settings.model_copy(update={"fetch_delay_unit": delay_unit})
        app = ClientApp(
            app_settings,
            rng=rng or NeverFail(),
            config_manager=ConfigManager(tmp_path / "client_config.json"),
        )
        app.screen = pygame.Surface((settings.client_width, settings.client_height))
        app.running = True
        return app

    return _make
