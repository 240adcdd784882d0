import json
import logging
import shutil
from pathlib import Path

import allure
import pytest
from playwright.sync_api import sync_playwright

from config.pages import BROWSER, HEADLESS, DEFAULT_TIMEOUT_MS, LOGIN_STATE_FILE
from scripts.save_login_state import login_and_store
from utils.artifact_sink import ArtifactSink

logger = logging.getLogger(__name__)

ARTIFACTS_DIR = "artifacts"


# ================== Session Fixtures ==================
@pytest.fixture(scope="session")
def playwright_instance():
    with sync_playwright() as p:
        # 站点元素统一使用 data-test 属性，get_by_test_id 按它定位
        p.selectors.set_test_id_attribute("data-test")
        yield p


@pytest.fixture(scope="session")
def browser(playwright_instance):
    """浏览器只启动一次"""
    browser = getattr(playwright_instance, BROWSER).launch(headless=HEADLESS)
    yield browser
    browser.close()


@pytest.fixture(scope="session")
def artifact_sink():
    """测试session启动前，清空 artifacts、videos、tracing"""
    for path in [ARTIFACTS_DIR, "videos", "tracing"]:
        shutil.rmtree(path, ignore_errors=True)  # 删除目录及其包含的所有文件和子目录
    sink = ArtifactSink(ARTIFACTS_DIR)
    sink.prepare()
    return sink


@pytest.fixture(scope="session")
def login_state(browser):
    """确保 login.json 存在且有效，只有 need_login 用例会用到"""
    login_file = Path(LOGIN_STATE_FILE)
    if not login_file.exists() or login_file.stat().st_size == 0:
        logger.info("login.json不存在或无效，重新生成")
        login_and_store(browser)
    else:
        logger.info("login.json已存在且有效，跳过生成")
    return str(login_file)


# ================== Function Fixtures ==================
@pytest.fixture(scope="function")
def context(browser, artifact_sink, request):
    """
    每个测试方法一个全新 context
    - need_login 用例基于 login.json 直接进入登录态
    - 视频 + tracing 每个 attempt 单独目录
    """
    attempt = getattr(request.node, "execution_count", 1)
    request.node._failed = False  # rerun 时重置上一次 attempt 的失败标记
    attempt_dir = f"attempt_{attempt}"
    record_video_dir = Path("videos") / attempt_dir
    record_tracing_dir = Path("tracing") / attempt_dir
    record_video_dir.mkdir(parents=True, exist_ok=True)
    record_tracing_dir.mkdir(parents=True, exist_ok=True)

    need_login = request.node.get_closest_marker("need_login") is not None
    storage_state = request.getfixturevalue("login_state") if need_login else None

    context = browser.new_context(
        storage_state=storage_state,
        record_video_dir=str(record_video_dir),
        # video文件只有在context.close()后才会真正落盘
        record_video_size={"width": 1280, "height": 720},
        no_viewport=True)
    context.set_default_timeout(DEFAULT_TIMEOUT_MS)

    # tracing 需要手动 start→stop→ 指定zip路径
    context.tracing.start(
        name=attempt_dir,
        screenshots=True,
        snapshots=True,
        sources=True)

    yield context

    #  ======== teardown阶段 ========
    trace_path = record_tracing_dir / "trace.zip"
    try:
        context.tracing.stop(path=trace_path)  # trace.zip 在这里真正生成
    finally:
        context.close()  # 先close：释放video文件句柄、video真正写入磁盘

    #  ======== 执行成功用例删除video、trace ========
    if not getattr(request.node, "_failed", False):
        shutil.rmtree(record_video_dir, ignore_errors=True)
        shutil.rmtree(record_tracing_dir, ignore_errors=True)
        return

    #  ======== 执行失败用例移动video、trace到artifacts目录 ========
    # makereport hook 早于 fixture teardown，video 和 trace 只能在这里收集
    target_dir = failure_dir(request.node, attempt)
    target_dir.mkdir(parents=True, exist_ok=True)

    for video_file in record_video_dir.glob("*.webm"):
        shutil.move(str(video_file), target_dir / video_file.name)
        allure.attach.file(target_dir / video_file.name, name="Video",
                           attachment_type=allure.attachment_type.WEBM)
    if trace_path.exists():
        shutil.move(str(trace_path), target_dir / "trace.zip")
        allure.attach.file(target_dir / "trace.zip", name="Playwright-Trace.zip")
    shutil.rmtree(record_video_dir, ignore_errors=True)
    shutil.rmtree(record_tracing_dir, ignore_errors=True)


@pytest.fixture(scope="function")
def page(context):
    """每个测试方法一个新 page"""
    page = context.new_page()
    console_errors = []  # 所有 console.error 都收集到这里

    # page.on("console") 是浏览器级别监听，不会因为跳转丢失
    page.on(
        "console",
        lambda msg: console_errors.append({
            "type": msg.type,
            "text": msg.text,
            "location": str(msg.location)
        }) if msg.type == "error" else None
    )
    page._console_errors = console_errors  # 挂到page上，方便hook里取
    yield page
    page.close()


def failure_dir(item, attempt) -> Path:
    module_name = item.module.__name__.split(".")[-1]
    class_name = item.cls.__name__ if item.cls else "no_class"
    return Path(ARTIFACTS_DIR) / module_name / class_name / item.name / f"attempt_{attempt}"


# ================== Pytest Hook：失败处理 ==================
@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    测试失败时自动保存：
    - 截图
    - URL
    - Console errors
    """
    outcome = yield
    rep = outcome.get_result()

    # 只处理 call 阶段失败
    if rep.when != "call" or not rep.failed:
        return

    # 标记失败（告诉 context fixture 保留 video 和 trace）
    item._failed = True

    page = item.funcargs.get("page")
    sink = item.funcargs.get("artifact_sink")
    if not page:
        return

    attempt = getattr(item, "execution_count", 1)
    base_dir = failure_dir(item, attempt)
    base_dir.mkdir(parents=True, exist_ok=True)

    if sink is not None:
        sink.capture_on_failure(page, item.name, base_dir)
    (base_dir / "url.txt").write_text(page.url, encoding="utf-8")
    console = json.dumps(getattr(page, "_console_errors", []), indent=2, ensure_ascii=False)
    (base_dir / "console_errors.json").write_text(console, encoding="utf-8")

    allure.attach(page.url, name="Page-Url", attachment_type=allure.attachment_type.TEXT)
    allure.attach(console, name="Console-Errors", attachment_type=allure.attachment_type.JSON)
