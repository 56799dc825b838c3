from __future__ import annotations

from datetime import datetime
from typing import Callable

import pytest

from app.core.settings import Settings
from helpers import SUBMITTED_AT, EmailJsRecorder, make_settings


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def emailjs() -> EmailJsRecorder:
    return EmailJsRecorder()


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    return lambda: SUBMITTED_AT
