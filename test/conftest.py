import pytest

from .fixture import LogCapture


@pytest.fixture
def logcapture():
    with LogCapture.caplog('nestconf') as capture:
        yield capture


@pytest.fixture
def users_source():
    return {
        'users': {
            'foo': {
                'id': None,
                'name': None,
            },
            'bar': {},
        },
    }
