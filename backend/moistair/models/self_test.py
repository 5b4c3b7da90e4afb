"""
Pydantic models for the verification harness.
"""

from typing import Optional

from pydantic import BaseModel


class SelfTestCase(BaseModel):
    """One reference check: resolve from an input pair and compare one field."""
    name: str
    var1: str
    val1: float
    var2: str
    val2: float
    field: str             # ThermodynamicState attribute to compare
    expected: float
    tolerance: float       # absolute


class SelfTestResult(BaseModel):
    name: str
    passed: bool
    expected: float
    tolerance: float
    actual: Optional[float] = None
    error: Optional[str] = None   # message when resolution itself failed


class SelfTestReport(BaseModel):
    passed: int
    total: int
    results: list[SelfTestResult]
