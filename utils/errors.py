"""测试层异常分类

- AssertionMismatch：页面校验不符合预期（业务回归）
- PageTimeout：等待页面/元素超时（环境或网络抖动，单独归类便于排查）
- UnknownRoleError：测试数据工厂收到未知角色（用例编写错误，浏览器交互前即失败）
- ScreenshotCaptureFailure：截图失败，只在 ArtifactSink 内部记录，不向外抛
- IllegalTransition：状态机模型中不存在的页面跳转
"""


class AssertionMismatch(AssertionError):
    pass


class PageTimeout(Exception):
    pass


class UnknownRoleError(ValueError):
    def __init__(self, role, known=()):
        self.role = role
        super().__init__(f"未知的用户角色：{role!r}，可选：{', '.join(known)}")


class ScreenshotCaptureFailure(Exception):
    pass


class IllegalTransition(Exception):
    def __init__(self, screen, action):
        self.screen = screen
        self.action = action
        super().__init__(f"{screen.name} 页面不支持操作 {action.name}")
