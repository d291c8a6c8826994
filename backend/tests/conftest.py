import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from allergy_guard import main


@pytest.fixture(name="client")
def client_fixture():
    return TestClient(main.app)


@pytest.fixture(name="peanut_profile")
def peanut_profile_fixture():
    return [
        {"name": "peanuts", "severity": 9, "reason": "Peanut Allergy"},
        {"name": "milk", "severity": 5, "reason": "Lactose Intolerant"},
    ]
