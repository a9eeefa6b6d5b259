#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from atproto_util import AtURI

FULL_URI = "at://example.com/com.example.something.other/probablygoodrkey"

# Fixtures -------------------------------------------------------------------------------------------------------------


@pytest.fixture
def full_uri() -> str:
    """A rooted reference carrying all three parts."""
    return FULL_URI


@pytest.fixture
def full_aturi() -> AtURI:
    return AtURI("example.com", "com.example.something.other", "probablygoodrkey")
