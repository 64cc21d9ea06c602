import pytest

from complexcolor import ColorSpaceMode


@pytest.fixture(params=list(ColorSpaceMode), ids=lambda m: m.value)
def mode(request):
    """Run a test once per supported color space."""
    return request.param
