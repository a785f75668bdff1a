#!/usr/bin/env python3
"""
单元2: Fibonacci 负载测试

测试内容：
- 参数规范化（默认值、上限、非法输入）
- 递归结果正确性
- 耗时记录
"""
import sys
import pytest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from podprobe.fib import normalize_n, fib, compute, DEFAULT_N, MAX_N


def _iterative_fib(n):
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


class TestNormalize:
    """参数规范化测试"""
    
    @pytest.mark.parametrize("raw,expected", [
        (None, DEFAULT_N),
        ("", DEFAULT_N),
        ("abc", DEFAULT_N),
        ("1.5", DEFAULT_N),
        ("0", 0),
        ("20", 20),
        ("45", 45),
        ("46", MAX_N),
        ("1000000", MAX_N),
        ("-3", 0),
        ("010", 10),
        ("+7", 7),
        ("+-500", DEFAULT_N),
        ("9" * 5000, MAX_N),
        ("-" + "9" * 5000, 0),
    ])
    def test_normalize(self, raw, expected):
        assert normalize_n(raw) == expected
    
    def test_cap_value(self):
        assert MAX_N == 45
        assert DEFAULT_N == 10


class TestFib:
    """递归结果测试"""
    
    def test_base_cases(self):
        assert fib(0) == 0
        assert fib(1) == 1
    
    def test_known_value(self):
        assert fib(10) == 55
    
    def test_sequence_matches_iterative(self):
        for n in range(0, 26):
            assert fib(n) == _iterative_fib(n), f"fib({n}) 结果错误"


class TestCompute:
    """计算结果结构测试"""
    
    def test_compute_fields(self):
        result = compute(15)
        assert result["n"] == 15
        assert result["result"] == 610
        assert isinstance(result["computation_ms"], float)
        assert result["computation_ms"] >= 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
