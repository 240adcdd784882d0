from utils.errors import AssertionMismatch


def check(condition, message: str):
    """校验失败时立即抛出 AssertionMismatch（不受 python -O 影响）"""
    if not condition:
        raise AssertionMismatch(message)
