"""ReelGrab 错误类型

每个错误都携带一条可直接展示给用户的消息。
"""

from __future__ import annotations


class ReelGrabError(Exception):
    """所有可预期错误的基类。"""

    title = "Error"
    default_message = "Something went wrong."

    def __init__(self, message: str | None = None, *, cause: BaseException | None = None):
        self.message = message or self.default_message
        self.cause = cause
        super().__init__(self.message)


class ValidationError(ReelGrabError):
    """输入为空或格式不符，本地判定，不发起网络请求。"""

    title = "Invalid URL"
    default_message = "Please enter a valid Instagram reel or post URL"


class ClipboardError(ReelGrabError):
    title = "Clipboard unavailable"
    default_message = "Unable to paste from clipboard. Please paste manually."


class NetworkError(ReelGrabError):
    """传输失败、超时或解析服务返回了无法识别的响应。"""

    title = "Download failed"
    default_message = "Failed to download reel. Please try again."


class RemoteError(ReelGrabError):
    """解析服务明确返回 success=false，消息原样透传。"""

    title = "Service error"
    default_message = "The extraction service could not process this link."


class MissingAssetError(ReelGrabError):
    title = "No video found"
    default_message = "Video URL not found"


class SaveError(ReelGrabError):
    title = "Save failed"
    default_message = "Unable to save the video file."
