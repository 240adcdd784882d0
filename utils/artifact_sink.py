"""截图落盘 + 挂到 Allure 报告

截图失败只记录 warning，不会让用例失败
"""
import logging
import time
from pathlib import Path

import allure

from utils.errors import ScreenshotCaptureFailure

logger = logging.getLogger(__name__)

SUCCESS = "success"
FAILURE = "failure"

# 文件名上限 255 字节，label 之外还要留给 mode、时间戳和序号
MAX_LABEL_LEN = 100


class ArtifactSink:

    def __init__(self, root="artifacts"):
        self.screenshot_dir = Path(root) / "screenshots"

    def prepare(self, directory=None):
        directory = Path(directory) if directory is not None else self.screenshot_dir
        directory.mkdir(parents=True, exist_ok=True)
        return directory

    def screenshot_path(self, label, mode: str, directory=None) -> Path:
        # 毫秒时间戳；同一毫秒内重名时追加序号
        directory = Path(directory) if directory is not None else self.screenshot_dir
        timestamp = time.strftime("%Y%m%d-%H%M%S") + f"-{int(time.time() * 1000) % 1000:03d}"
        safe_label = "".join(c if c.isalnum() or c in "-_" else "_" for c in str(label))[:MAX_LABEL_LEN]
        path = directory / f"{safe_label}-{mode}-{timestamp}.png"
        n = 1
        while path.exists():
            n += 1
            path = directory / f"{safe_label}-{mode}-{timestamp}-{n}.png"
        return path

    def capture_on_success(self, page, label: str, directory=None):
        return self._capture(page, label, SUCCESS, directory)

    def capture_on_failure(self, page, label: str, directory=None):
        """directory 为空时写到 artifacts/screenshots，失败用例传入 attempt 目录"""
        return self._capture(page, label, FAILURE, directory)

    def _capture(self, page, label, mode: str, directory=None):
        try:
            self.prepare(directory)
            path = self.screenshot_path(label, mode, directory)
            page.screenshot(path=str(path), full_page=True)
            allure.attach.file(path, name=f"{label}-{mode}", attachment_type=allure.attachment_type.PNG)
        except Exception as e:
            logger.warning("%s", ScreenshotCaptureFailure(f"{label} 截图失败: {e}"))
            return None
        logger.info("截图已保存: %s", path)
        return path
