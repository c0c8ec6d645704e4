from __future__ import annotations

from ..core.errors import (
    ClipboardError,
    MissingAssetError,
    NetworkError,
    ReelGrabError,
    RemoteError,
    SaveError,
    ValidationError,
)


def translate_error(error: BaseException) -> dict:
    """将异常对象转换为用户友好的错误字典。

    返回值保持稳定的 keys：title/content/suggestion/raw_error。
    """

    raw = str(error.cause) if isinstance(error, ReelGrabError) and error.cause else str(error)

    result = {
        "title": "Something went wrong",
        "content": "An unexpected error occurred. Please try again.",
        "suggestion": "1. Try again\n2. Check the log file",
        "raw_error": raw,
    }

    if not isinstance(error, ReelGrabError):
        return result

    result["title"] = error.title
    result["content"] = error.message

    if isinstance(error, ValidationError):
        result["suggestion"] = (
            "Links look like https://www.instagram.com/reels/<id>/ "
            "or https://www.instagram.com/p/<id>/"
        )
    elif isinstance(error, ClipboardError):
        result["suggestion"] = "Click the input and paste with Ctrl+V."
    elif isinstance(error, NetworkError):
        result["suggestion"] = (
            "1. Check your network connection\n"
            "2. Check the proxy settings in config.json\n"
            "3. Try again in a moment"
        )
    elif isinstance(error, RemoteError):
        result["suggestion"] = "Make sure the post is public and the link is correct."
    elif isinstance(error, MissingAssetError):
        result["suggestion"] = "The post may not contain a video."
    elif isinstance(error, SaveError):
        result["suggestion"] = "Check that the download folder exists and is writable."
    else:
        result["suggestion"] = ""

    return result
