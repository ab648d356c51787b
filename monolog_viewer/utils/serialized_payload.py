"""PHP serialize() 载荷识别.

旧版日志写入方会把数组/对象以 PHP `serialize()` 格式写进 message 字段,
列表页需要识别并以占位文案替代.

判定规则: 整个字符串恰好解码为一个 PHP 序列化值即视为序列化数据,
值的类型不限(包括 `b:0;`,即序列化后的 false);合法值之后还有多余文本时视为普通文本.
"""

from __future__ import annotations

from io import BytesIO

import phpserialize

# UnicodeEncodeError 属于 ValueError;深度嵌套的数组会触发 RecursionError.
_DECODE_ERRORS: tuple[type[Exception], ...] = (ValueError, TypeError, RecursionError)


def is_serialized_payload(message: object) -> bool:
    """判断 message 是否为完整的 PHP 序列化载荷.

    Args:
        message: 日志行的 message 字段.

    Returns:
        bool: 能被完整解码时返回 True.

    """
    if not isinstance(message, str) or not message:
        return False

    try:
        stream = BytesIO(message.encode("utf-8"))
        phpserialize.load(stream, object_hook=phpserialize.phpobject)
    except _DECODE_ERRORS:
        return False
    return not stream.read(1)
