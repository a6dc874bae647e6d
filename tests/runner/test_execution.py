"""Tests for configuration and execution-policy helpers."""

import pytest

from cut_and_run.errors import ConfigurationError
from cut_and_run.runner import execution


def test_executor_override_modes(monkeypatch) -> None:
    monkeypatch.setenv(execution.EXECUTOR_ENV, "serial")
    assert execution.describe_executor(execution.get_executor_class()) == "serial"

    monkeypatch.setenv(execution.EXECUTOR_ENV, "threads")
    assert execution.describe_executor(execution.get_executor_class()) == "threads"

    monkeypatch.setenv(execution.EXECUTOR_ENV, "Processes")
    assert execution.describe_executor(execution.get_executor_class()) == "processes"


def test_executor_defaults_to_threads(monkeypatch) -> None:
    monkeypatch.delenv(execution.EXECUTOR_ENV, raising=False)
    assert execution.describe_executor(execution.get_executor_class()) == "threads"


def test_unknown_executor_rejected(monkeypatch) -> None:
    monkeypatch.setenv(execution.EXECUTOR_ENV, "fibers")
    with pytest.raises(ConfigurationError):
        execution.get_executor_class()


class TestGetThreadCount:
    """Test cases for get_thread_count."""

    def test_unset_uses_default(self, monkeypatch) -> None:
        monkeypatch.delenv(execution.THREAD_COUNT_ENV, raising=False)
        assert execution.get_thread_count() == execution.DEFAULT_THREAD_COUNT

    def test_reads_integer(self, monkeypatch) -> None:
        monkeypatch.setenv(execution.THREAD_COUNT_ENV, "12")
        assert execution.get_thread_count() == 12

    @pytest.mark.parametrize("value", ["four", "4x", "-2", "0", "1.5", "²"])
    def test_rejects_malformed_values(self, monkeypatch, value: str) -> None:
        monkeypatch.setenv(execution.THREAD_COUNT_ENV, value)
        with pytest.raises(ConfigurationError):
            execution.get_thread_count()


def test_describe_executor_names_every_policy() -> None:
    for policy, executor_class in execution.EXECUTOR_POLICIES.items():
        assert execution.describe_executor(executor_class) == policy


class TestThreadCountParsing:
    """OMP_NUM_THREADS is read the way strtoul reads it."""

    @pytest.mark.parametrize(("value", "expected"), [(" 4", 4), ("+4", 4), ("\t08", 8)])
    def test_accepts_leading_space_and_plus_sign(self, monkeypatch, value: str, expected: int) -> None:
        monkeypatch.setenv(execution.THREAD_COUNT_ENV, value)
        assert execution.get_thread_count() == expected

    @pytest.mark.parametrize("value", ["4 ", "4\n", "+", "++4", "+-4"])
    def test_rejects_trailing_characters(self, monkeypatch, value: str) -> None:
        monkeypatch.setenv(execution.THREAD_COUNT_ENV, value)
        with pytest.raises(ConfigurationError):
            execution.get_thread_count()

    def test_blank_uses_default(self, monkeypatch) -> None:
        monkeypatch.setenv(execution.THREAD_COUNT_ENV, "   ")
        assert execution.get_thread_count() == execution.DEFAULT_THREAD_COUNT
