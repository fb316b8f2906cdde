import pytest

from validbench.validators import VALIDATORS

CURRENT_YEAR = 2030


@pytest.fixture(params=list(VALIDATORS), ids=[name.capitalize() for name in VALIDATORS])
def validator(request):
    return request.param, VALIDATORS[request.param]
