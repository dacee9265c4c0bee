import json
from urllib.parse import parse_qs, urlparse

import pytest

from fakes import FakeSession
from wechat_sdk.constants import API_CONFIGS
from wechat_sdk.context import background
from wechat_sdk.errors import APIError, TokenMissingError
from wechat_sdk.http import CtxHttp
from wechat_sdk.services.mini.models import SubscribeMessageReq, WxCodeUnlimitedReq
from wechat_sdk.services.mini.wechat_mini import WeChatMini

PNG = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR"


def make_mini(mini_config, session, token=""):
    mini = WeChatMini(mini_config, client=CtxHttp(session))
    mini.set_access_token(token)
    return mini


def test_code2session(mini_config):
    session = FakeSession(content=b'{"openid": "o123", "session_key": "sk", "unionid": "u1"}')
    mini = make_mini(mini_config, session)

    resp = mini.code2session(background(), "081abc")

    assert resp.openid == "o123"
    assert resp.session_key == "sk"
    assert resp.errcode == 0
    url = urlparse(session.calls[0]["url"])
    assert session.calls[0]["method"] == API_CONFIGS["code2session"]["method"] == "GET"
    assert url._replace(query="").geturl() == API_CONFIGS["code2session"]["url"]
    assert parse_qs(url.query) == {
        "appid": ["wx123"],
        "secret": ["secret"],
        "js_code": ["081abc"],
        "grant_type": ["authorization_code"],
    }


def test_access_token(mini_config):
    session = FakeSession(content=b'{"access_token": "TOKEN", "expires_in": 7200}')
    resp = make_mini(mini_config, session).access_token(background())

    assert resp.access_token == "TOKEN"
    assert resp.expires_in == 7200
    assert parse_qs(urlparse(session.calls[0]["url"]).query)["grant_type"] == ["client_credential"]


def test_access_token_error_is_returned(mini_config):
    session = FakeSession(content=b'{"errcode": 40013, "errmsg": "invalid appid"}')
    resp = make_mini(mini_config, session).access_token(background())
    assert resp.errcode == 40013
    assert resp.access_token == ""


@pytest.mark.parametrize(
    "call",
    [
        lambda m: m.send_subscribe_message(background(), SubscribeMessageReq(touser="o123")),
        lambda m: m.wxcode_unlimited(background(), WxCodeUnlimitedReq(scene="abc")),
        lambda m: m.check_image(background(), PNG),
        lambda m: m.check_message(background(), "hello"),
    ],
)
def test_token_required(mini_config, call):
    session = FakeSession()
    with pytest.raises(TokenMissingError):
        call(make_mini(mini_config, session))
    assert session.calls == []


def test_send_subscribe_message(mini_config):
    session = FakeSession(content=b'{"errcode": 0, "errmsg": "ok"}')
    mini = make_mini(mini_config, session, token="TOKEN")
    req = SubscribeMessageReq(touser="o123", template_id="tpl", data={"thing1": {"value": "内容"}})

    resp = mini.send_subscribe_message(background(), req)

    assert resp.errcode == 0
    call = session.calls[0]
    assert call["url"].endswith("?access_token=TOKEN")
    assert json.loads(call["data"])["data"] == {"thing1": {"value": "内容"}}


def test_wxcode_unlimited_returns_image(mini_config):
    session = FakeSession(content=PNG)
    mini = make_mini(mini_config, session, token="TOKEN")

    assert mini.wxcode_unlimited(background(), WxCodeUnlimitedReq(scene="abc")) == PNG
    assert json.loads(session.calls[0]["data"])["scene"] == "abc"


def test_wxcode_unlimited_json_is_error(mini_config):
    session = FakeSession(content=b'{"errcode": 40001, "errmsg": "invalid credential"}')
    mini = make_mini(mini_config, session, token="TOKEN")

    with pytest.raises(APIError) as exc_info:
        mini.wxcode_unlimited(background(), WxCodeUnlimitedReq(scene="abc"))
    assert exc_info.value.errcode == 40001
    assert str(exc_info.value) == "invalid credential"


def test_check_image_multipart(mini_config):
    session = FakeSession(content=b'{"errcode": 87014, "errmsg": "risky content"}')
    mini = make_mini(mini_config, session, token="TOKEN")

    resp = mini.check_image(background(), PNG)

    assert resp.errcode == 87014
    call = session.calls[0]
    assert call["headers"]["Content-Type"].startswith("multipart/form-data; boundary=")
    assert b'name="media"' in call["data"]
    assert PNG in call["data"]


def test_check_message(mini_config):
    session = FakeSession(content=b'{"errcode": 0, "errmsg": "ok"}')
    mini = make_mini(mini_config, session, token="TOKEN")

    assert mini.check_message(background(), "hello").errcode == 0
    assert json.loads(session.calls[0]["data"]) == {"content": "hello"}
