"""请求/响应结构与 XML、JSON、扁平参数字典之间的转换

结构体用 dataclass 表示, 字段的线上名称默认等于字段名,
可以通过 field(metadata={"name": "appId"}) 指定。
"""
import dataclasses
import json
import typing
from collections.abc import Mapping
from xml.etree import ElementTree

from .errors import SerializationError


def wire_name(f: dataclasses.Field) -> str:
    return f.metadata.get("name", f.name)


def _items(obj):
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return [(wire_name(f), getattr(obj, f.name)) for f in dataclasses.fields(obj)]
    if isinstance(obj, Mapping):
        return list(obj.items())
    raise SerializationError(f"不支持的请求对象类型: {type(obj).__name__}")


def _flat_value(key, value) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        raise SerializationError(f"参数 {key} 不能为布尔值")
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    raise SerializationError(f"参数 {key} 无法转换为字符串: {type(value).__name__}")


def flatten(obj) -> dict[str, str]:
    """把请求对象展开成 {参数名: 字符串值}, 只支持扁平结构

    Raises:
        SerializationError: 对象或字段值无法表示为字符串
    """
    flat = {}
    for key, value in _items(obj):
        if not isinstance(key, str):
            raise SerializationError(f"参数名必须为字符串: {key!r}")
        flat[key] = _flat_value(key, value)
    return flat


def to_xml(obj) -> bytes:
    """序列化为以 <xml> 为根节点的报文, 每个参数一个子节点"""
    root = ElementTree.Element("xml")
    for key, value in flatten(obj).items():
        ElementTree.SubElement(root, key).text = value
    return ElementTree.tostring(root, encoding="unicode", short_empty_elements=False).encode("utf-8")


def _plain(obj):
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {wire_name(f): _plain(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
    if isinstance(obj, Mapping):
        return {k: _plain(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_plain(v) for v in obj]
    return obj


def to_json(obj) -> bytes:
    try:
        return json.dumps(_plain(obj), ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(f"JSON序列化失败: {str(e)}") from e


def _coerce(tp, value):
    if value is None:
        return None
    if tp is int:
        return int(value) if value != "" else 0
    if tp is str:
        return value if isinstance(value, str) else str(value)
    return value


def from_dict(cls, data: Mapping):
    """按字段注解构造结构体, 多余字段忽略, 缺失字段使用默认值"""
    hints = typing.get_type_hints(cls)
    kwargs = {}
    for f in dataclasses.fields(cls):
        key = wire_name(f)
        if key not in data:
            continue
        try:
            value = _coerce(hints.get(f.name), data[key])
        except (TypeError, ValueError) as e:
            raise SerializationError(f"字段 {key} 类型错误: {str(e)}") from e
        if value is not None:
            kwargs[f.name] = value
    return cls(**kwargs)


def xml_to_dict(data) -> dict[str, str]:
    try:
        root = ElementTree.fromstring(data)
    except ElementTree.ParseError as e:
        raise SerializationError(f"XML解析失败: {str(e)}") from e
    return {child.tag: (child.text or "") for child in root}


def from_xml(cls, data):
    return from_dict(cls, xml_to_dict(data))


def from_json(cls, data):
    try:
        payload = json.loads(data)
    except ValueError as e:
        raise SerializationError(f"JSON解析失败: {str(e)}") from e
    if not isinstance(payload, Mapping):
        raise SerializationError("JSON响应不是对象")
    return from_dict(cls, payload)
