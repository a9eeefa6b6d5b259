#
# AT URI Error Taxonomy Tests
#

# Third party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from atproto_errors import (
    ArityError,
    AtURIError,
    ConstructionError,
    SchemeError,
    SegmentForm,
    SerializationError,
)


# Tests ----------------------------------------------------------------------------------------------------------------


class TestErrors:
    @pytest.mark.parametrize(
        "error",
        [
            pytest.param(SchemeError("http:"), id="scheme"),
            pytest.param(ArityError(SegmentForm.LOWER, 5, 4), id="arity"),
            pytest.param(ConstructionError("collection w/o authority"), id="construction"),
            pytest.param(SerializationError("no authority"), id="serialization"),
        ],
    )
    def test_hierarchy(self, error):
        """Every failure kind is an AtURIError and a ValueError."""
        assert isinstance(error, AtURIError)
        assert isinstance(error, ValueError)

    def test_scheme_message(self):
        error = SchemeError("http:")
        assert error.token == "http:"
        assert str(error) == "Bad protocol 'http:', must be 'at:'"

    def test_scheme_missing_token(self):
        assert SchemeError(None).token is None

    def test_arity_message(self):
        error = ArityError(SegmentForm.RELATIVE_UPPER, 3, 2)
        assert (error.form, error.count, error.limit) == (SegmentForm.RELATIVE_UPPER, 3, 2)
        assert str(error) == "relative upper part count 3 is greater than the maximum of 2"
