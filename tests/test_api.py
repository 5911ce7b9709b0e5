"""Tests for the REST API"""

import pytest

from totp_backend import create_app
from totp_backend.app import load_config

TEST_KEY = "12345678901234567890"


@pytest.fixture
def client():
    app = create_app({'TESTING': True})
    with app.test_client() as client:
        yield client


def test_index(client):
    response = client.get('/')
    assert response.status_code == 200
    data = response.get_json()
    assert data['algorithm'] == 'HMAC-SHA512'
    assert data['defaults'] == {'resolution': 30, 'offset': 0, 'digits': 8}
    assert data['digits_range'] == [1, 18]


def test_generate_with_timestamp(client):
    response = client.post('/api/totp', json={'key': TEST_KEY, 'timestamp': 59})
    assert response.status_code == 200
    assert response.get_json() == {
        'code': '52477064',
        'digits': 8,
        'counter': 1,
        'valid_for': 1,
    }


def test_generate_with_options(client):
    response = client.post('/api/totp', json={
        'key': TEST_KEY, 'timestamp': 59, 'resolution': 60, 'offset': 29, 'digits': 6,
    })
    assert response.status_code == 200
    data = response.get_json()
    assert data['code'] == '257280'
    assert data['counter'] == 0


def test_generate_uses_server_clock(client, monkeypatch):
    monkeypatch.setattr('totp_backend.routes.time.time', lambda: 59.0)
    response = client.post('/api/totp', json={'key': TEST_KEY})
    assert response.status_code == 200
    assert response.get_json()['code'] == '52477064'


def test_cors_header_present(client):
    response = client.post('/api/totp', json={'key': TEST_KEY, 'timestamp': 59},
                           headers={'Origin': 'http://example.com'})
    assert response.headers.get('Access-Control-Allow-Origin') in ('http://example.com', '*')


@pytest.mark.parametrize('body', [
    None,
    {},
    {'key': 123},
    ['not', 'an', 'object'],
])
def test_missing_or_bad_key(client, body):
    response = client.post('/api/totp', json=body)
    assert response.status_code == 400
    assert 'error' in response.get_json()


@pytest.mark.parametrize('extra', [
    {'resolution': 0},
    {'digits': 0},
    {'digits': 19},
    {'digits': '8'},
    {'offset': 60},
    {'timestamp': -1},
])
def test_generator_errors_are_400(client, extra):
    body = {'key': TEST_KEY, 'timestamp': 59}
    body.update(extra)
    response = client.post('/api/totp', json=body)
    assert response.status_code == 400
    assert response.get_json()['error']


def test_load_config_from_env(monkeypatch):
    monkeypatch.setenv('TOTP_API_HOST', '127.0.0.1')
    monkeypatch.setenv('TOTP_API_PORT', '8080')
    monkeypatch.setenv('TOTP_API_DEBUG', 'true')
    assert load_config() == {'HOST': '127.0.0.1', 'PORT': 8080, 'DEBUG': True}


def test_config_override():
    app = create_app({'PORT': 9000})
    assert app.config['PORT'] == 9000
