import os

import pytest

# Keep test runs from writing log files into the project tree
os.environ["LOG_TO_FILE"] = "0"

from votermatch.config import reset_config  # noqa: E402
from votermatch.models import OwnerRecord, VoterRecord  # noqa: E402


def make_voter(**overrides):
    """Voter with every field present, so only the overridden ones vary."""
    data = {
        "name_first": "JOHN",
        "name_last": "SMITH",
        "name_prefix": "",
        "name_middle": "",
        "name_suffix": "",
        "house_number": "123",
        "house_fraction": "",
        "pre_dir": "",
        "street": "MAIN ST",
        "type": "",
        "post_dir": "",
        "building_number": "",
        "apartment_number": "",
        "mail_street": "",
        "zip": "94601",
        "mail_zip": "",
        "phone_1": "",
        "phone_2": "",
        "voter_id": "V1",
        "email": "",
        "city": "OAKLAND",
        "mail_city": "",
    }
    data.update(overrides)
    return VoterRecord.from_dict(data)


def make_owner(**overrides):
    data = {"name": "JOHN SMITH", "address": "123 MAIN ST", "zip": "94601"}
    data.update(overrides)
    return OwnerRecord.from_dict(data)


@pytest.fixture(autouse=True)
def _fresh_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def owner():
    return make_owner()


@pytest.fixture
def voter():
    return make_voter()


@pytest.fixture
def owner_factory():
    return make_owner


@pytest.fixture
def voter_factory():
    return make_voter
