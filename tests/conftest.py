from __future__ import annotations

import datetime as dt

import pytest
from fastapi.testclient import TestClient

from flora_services.api.analytics_app import create_analytics_app
from flora_services.api.notification_app import create_notification_app
from flora_services.config.settings import Settings, get_settings

FIXED_NOW = dt.datetime(2025, 3, 8, 9, 15, 30, 123456, tzinfo=dt.UTC)


@pytest.fixture()
def settings() -> Settings:
    get_settings.cache_clear()
    return Settings(environment="test")


@pytest.fixture()
def empty_settings() -> Settings:
    get_settings.cache_clear()
    return Settings(environment="test", seed_fixtures=False)


@pytest.fixture()
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture()
def analytics_client(settings: Settings, fixed_clock):
    app = create_analytics_app(settings, clock=fixed_clock)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def empty_analytics_client(empty_settings: Settings, fixed_clock):
    app = create_analytics_app(empty_settings, clock=fixed_clock)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def notification_client(settings: Settings, fixed_clock):
    app = create_notification_app(settings, clock=fixed_clock)
    with TestClient(app) as test_client:
        yield test_client
