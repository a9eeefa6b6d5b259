#
# Result Type Tests
#

# Third party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from atproto_errors import SchemeError
from atproto_result import Err, Ok


# Tests ----------------------------------------------------------------------------------------------------------------


class TestResult:
    def test_ok(self):
        res = Ok("at://example.com")
        assert res.ok
        assert res.value == "at://example.com"

    def test_err_keeps_error_instance(self):
        error = SchemeError("http:")
        res = Err(error)
        assert not res.ok
        assert res.error is error

    def test_equality(self):
        assert Ok(1) == Ok(1)
        assert Ok(1) != Err(1)

    def test_frozen(self):
        res = Ok(1)
        with pytest.raises(AttributeError):
            res.value = 2
