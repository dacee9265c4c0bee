import pytest

from fakes import FakeSession
from wechat_sdk.config import MchConfig, MiniConfig, PayConfig

API_KEY = "192006250b4c09247ec02edce69f6a2d"


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def pay_config():
    return PayConfig(app_id="wx123", mch_id="1900", api_key=API_KEY)


@pytest.fixture
def mch_config():
    return MchConfig(app_id="wx123", mch_id="1900", api_key=API_KEY)


@pytest.fixture
def mini_config():
    return MiniConfig(app_id="wx123", app_secret="secret")
