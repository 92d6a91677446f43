"""
Tests for the Result wrapper
"""
import pytest

from commonlibs.core import Result


class TestResultConstruction:
    """Test constructors and factories"""

    def test_empty(self):
        """Empty result has no data and is a failure"""
        result = Result()
        assert result.get_data() is None
        assert result.get_result() is False
        assert result.get_message() is None
        assert result.is_error()

    def test_data_only_defaults_to_failure(self):
        """Data alone does not mark the result successful"""
        result = Result({"id": 1})
        assert result.get_data() == {"id": 1}
        assert result.is_error()
        assert not result.is_success()

    def test_data_and_flag(self):
        """Explicit flag is stored"""
        result = Result("payload", True)
        assert result.get_data() == "payload"
        assert result.is_success()

    @pytest.mark.parametrize("data", [0, "", [], {"k": "v"}, object()])
    def test_success_factory(self, data):
        """success() keeps the exact payload and sets the flag"""
        result = Result.success(data)
        assert result.is_success()
        assert not result.is_error()
        assert result.get_data() is data
        assert result.get_message() is None

    @pytest.mark.parametrize("message", ["not found", "", "실패"])
    def test_error_factory(self, message):
        """error() keeps the message and leaves data absent"""
        result = Result.error(message)
        assert result.is_error()
        assert not result.is_success()
        assert result.get_message() == message
        assert result.get_data() is None


class TestResultSetters:
    """Test fluent setters and the flag setter"""

    def test_set_data_is_fluent(self):
        """set_data returns the same instance"""
        result = Result()
        assert result.set_data(42) is result
        assert result.get_data() == 42

    def test_set_message_is_fluent(self):
        """set_message returns the same instance"""
        result = Result()
        assert result.set_message("done") is result
        assert result.get_message() == "done"

    def test_chaining(self):
        """Fluent setters can be chained"""
        result = Result().set_data([1, 2]).set_message("two items")
        assert result.get_data() == [1, 2]
        assert result.get_message() == "two items"

    def test_set_result_returns_previous_value(self):
        """set_result returns the flag held before the call"""
        result = Result()
        assert result.set_result(True) is False
        assert result.is_success()
        assert result.set_result(False) is True
        assert result.is_error()

    def test_set_result_same_value(self):
        """Setting the same value returns that value"""
        result = Result.success("x")
        assert result.set_result(True) is True
        assert result.is_success()

    def test_accessors_follow_flag(self):
        """is_success / is_error never disagree with the stored flag"""
        result = Result()
        for flag in (True, False, True):
            result.set_result(flag)
            assert result.is_success() == flag
            assert result.is_error() == (not flag)


class TestResultString:
    """Test diagnostic string"""

    def test_str_renders_all_fields(self):
        """All three fields appear in str()"""
        assert str(Result.success(1)) == "Result [data=1, result=True, message=None]"
        assert str(Result.error("bad")) == "Result [data=None, result=False, message=bad]"
