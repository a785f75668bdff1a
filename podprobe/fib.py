"""
Fibonacci 负载模块 - 故意使用指数级递归制造 CPU 压力
"""
import time
from typing import Dict, Optional

DEFAULT_N = 10
MAX_N = 45  # 上限，避免计算时间失控


def normalize_n(raw: Optional[str]) -> int:
    """
    规范化查询参数 n
    缺失或非法 -> 默认值；负数 -> 0；超过上限 -> MAX_N
    """
    if raw is None:
        return DEFAULT_N
    text = str(raw).strip()
    sign = text[:1] if text[:1] in ("+", "-") else ""
    digits = text[len(sign):]
    # 超长数字串直接按符号截断，避免 int() 的位数限制
    if digits.isascii() and digits.isdigit() and len(digits.lstrip("0")) > 2:
        return 0 if sign == "-" else MAX_N
    try:
        n = int(text)
    except ValueError:
        return DEFAULT_N
    return min(max(n, 0), MAX_N)


def fib(n: int) -> int:
    if n <= 1:
        return n
    return fib(n - 1) + fib(n - 2)


def compute(n: int) -> Dict[str, object]:
    """计算第 n 项并记录耗时（毫秒）"""
    start = time.perf_counter()
    result = fib(n)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return {"n": n, "result": result, "computation_ms": elapsed_ms}
