from dataclasses import dataclass, field

import pytest

from wechat_sdk.codec import flatten, from_json, from_xml, to_json, to_xml, xml_to_dict
from wechat_sdk.errors import SerializationError
from wechat_sdk.services.mini.models import WxCodeUnlimitedReq
from wechat_sdk.services.pay.models import PrepayReturn, QueryOrderResp


def test_flatten_uses_wire_names():
    prepay = PrepayReturn(app_id="wx123", time_stamp="1", nonce_str="n", package="prepay_id=p", sign_type="MD5")
    assert flatten(prepay) == {
        "appId": "wx123",
        "timeStamp": "1",
        "nonceStr": "n",
        "package": "prepay_id=p",
        "signType": "MD5",
        "paySign": "",
    }


def test_flatten_none_is_empty():
    assert flatten({"a": None, "b": 3}) == {"a": "", "b": "3"}


def test_to_xml_root_and_children():
    body = to_xml({"appid": "wx123", "total_fee": 1, "body": "a<b&c"})
    assert body.startswith(b"<xml>")
    assert xml_to_dict(body) == {"appid": "wx123", "total_fee": "1", "body": "a<b&c"}


def test_from_xml_coerces_ints_and_ignores_unknown():
    body = (
        b"<xml><return_code><![CDATA[SUCCESS]]></return_code>"
        b"<trade_state><![CDATA[NOTPAY]]></trade_state>"
        b"<total_fee>101</total_fee><cash_fee></cash_fee>"
        b"<unknown_field>x</unknown_field></xml>"
    )
    resp = from_xml(QueryOrderResp, body)
    assert resp.return_code == "SUCCESS"
    assert resp.trade_state == "NOTPAY"
    assert resp.total_fee == 101
    assert resp.cash_fee == 0


def test_from_xml_invalid():
    with pytest.raises(SerializationError):
        from_xml(QueryOrderResp, b"not xml")


def test_to_json_nested():
    req = WxCodeUnlimitedReq(scene="abc", width=430)
    assert to_json(req) == (
        b'{"scene": "abc", "page": "", "width": 430, "auto_color": false, '
        b'"line_color": {"r": 0, "g": 0, "b": 0}, "is_hyaline": false}'
    )


@dataclass
class Sample:
    name: str = ""
    count: int = 0
    tags: list = field(default_factory=list)


def test_from_json():
    obj = from_json(Sample, b'{"name": "x", "count": "3", "other": 1}')
    assert obj == Sample(name="x", count=3)


@pytest.mark.parametrize("data", [b"\x89PNG\r\n", b"[1, 2]", b"{bad"])
def test_from_json_invalid(data):
    with pytest.raises(SerializationError):
        from_json(Sample, data)
