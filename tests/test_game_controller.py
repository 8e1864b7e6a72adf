"""
Tests for the game HTTP endpoints.
"""

import pytest

from conftest import make_source
from wordle_engine import create_app
from wordle_engine.config import TestingConfig
from wordle_engine.services.game_service import initialize_game_service


@pytest.fixture
def client():
    initialize_game_service(make_source("CRANE", "MANGO"), max_attempts=6)
    app = create_app(TestingConfig)
    with app.test_client() as client:
        yield client


def _new_game(client):
    response = client.post('/api/new_game')
    assert response.status_code == 200
    return response.get_json()


def test_new_game(client):
    data = _new_game(client)

    assert data['success']
    assert data['game_id']
    assert data['state']['attempts_used'] == 0
    assert data['state']['answer'] is None
    assert data['state']['letter_status']['A'] == 'UNUSED'


def test_winning_guess(client):
    game_id = _new_game(client)['game_id']

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'crane'})
    data = response.get_json()

    assert response.status_code == 200
    assert data['feedback']['pattern'] == 'GGGGG'
    assert data['feedback']['correct'] is True
    assert data['feedback']['marks'] == ['CORRECT'] * 5
    assert data['state']['game_over'] is True
    assert data['state']['won'] is True
    assert data['state']['answer'] == 'CRANE'
    assert data['state']['guess_results'][0][0] == ['C', 'CORRECT']


def test_guess_after_game_over_conflicts(client):
    game_id = _new_game(client)['game_id']
    client.post(f'/api/game/{game_id}/guess', json={'guess': 'CRANE'})

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'MANGO'})

    assert response.status_code == 409
    assert response.get_json()['code'] == 'game_over'


def test_unknown_word(client):
    game_id = _new_game(client)['game_id']

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'zzzzz'})

    assert response.status_code == 400
    assert response.get_json()['code'] == 'unknown_word'

    state = client.get(f'/api/game/{game_id}/state').get_json()['state']
    assert state['attempts_used'] == 0


@pytest.mark.parametrize("payload", [{'guess': 'AB'}, {'guess': None}, {'guess': 42}])
def test_invalid_shape(client, payload):
    game_id = _new_game(client)['game_id']

    response = client.post(f'/api/game/{game_id}/guess', json=payload)

    assert response.status_code == 400
    assert response.get_json()['code'] == 'invalid_shape'


def test_missing_guess_body(client):
    game_id = _new_game(client)['game_id']

    response = client.post(f'/api/game/{game_id}/guess', json={})

    assert response.status_code == 400
    assert response.get_json()['error'] == 'Guess is required'


def test_unknown_game(client):
    response = client.get('/api/game/does-not-exist/state')

    assert response.status_code == 404
    assert response.get_json()['code'] == 'game_not_found'

    response = client.post('/api/game/does-not-exist/guess', json={'guess': 'CRANE'})
    assert response.status_code == 404


def test_restart(client):
    game_id = _new_game(client)['game_id']
    client.post(f'/api/game/{game_id}/guess', json={'guess': 'CRANE'})

    response = client.post(f'/api/game/{game_id}/restart')
    state = response.get_json()['state']

    assert response.status_code == 200
    assert state['attempts_used'] == 0
    assert state['game_over'] is False
    assert state['answer'] is None


def test_delete_game(client):
    game_id = _new_game(client)['game_id']

    assert client.delete(f'/api/game/{game_id}').get_json()['success'] is True

    response = client.delete(f'/api/game/{game_id}')
    assert response.status_code == 404
    assert response.get_json()['success'] is False


def test_health(client):
    _new_game(client)

    data = client.get('/api/health').get_json()

    assert data['status'] == 'healthy'
    assert data['active_games'] == 1
    assert data['log_stats']['game_events'] >= 1
