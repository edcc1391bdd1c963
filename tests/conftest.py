import pytest

from offline_summarizer.languages import get_profile
from offline_summarizer.summarize import Summarizer


@pytest.fixture
def spot_text():
    return "See Spot. See Spot run. Run Spot, run!"


@pytest.fixture
def english():
    return get_profile("english")


@pytest.fixture
def summarizer():
    return Summarizer("english")
