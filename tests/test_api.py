import logging

import pytest

import wordle_game
from wordle_game.config import TestingConfig


def create(client, **body):
    res = client.post('/api/game', json=body)
    assert res.status_code == 201, res.get_json()
    return res.get_json()


def test_create_default_session(client):
    data = create(client)
    assert data['success'] is True
    assert data['state']['mode'] == 'normal'
    assert data['state']['max_rounds'] == 6
    assert 'answer' not in data['state']


def test_create_hard_session_with_config(client):
    data = create(client, mode='hard', config={'word_list': ['crane', 'trace', 'react', 'lofty'], 'max_rounds': 4})
    state = data['state']
    assert state['candidates_remaining'] == 4
    assert state['answer_finalized'] is False
    assert state['max_rounds'] == 4


def test_create_rejects_bad_mode_and_config(client):
    res = client.post('/api/game', json={'mode': 'absurd'})
    assert res.status_code == 400
    assert res.get_json()['success'] is False

    res = client.post('/api/game', json={'config': {'word_list': ['crane'], 'max_rounds': 0}})
    assert res.status_code == 400
    assert res.get_json()['error_type'] == 'ConfigError'


def test_hard_mode_play_through(client):
    session_id = create(client, mode='hard', config={'word_list': ['crane', 'trace', 'react', 'lofty']})['session_id']

    res = client.post(f'/api/game/{session_id}/guess', json={'guess': 'CRANE'})
    data = res.get_json()
    assert res.status_code == 200
    assert [r['result'] for r in data['result']] == ['miss'] * 5
    assert [r['letter'] for r in data['result']] == list('crane')
    assert data['state']['answer_finalized'] is True
    assert 'answer' not in data['state']

    data = client.post(f'/api/game/{session_id}/guess', json={'guess': 'lofty'}).get_json()
    assert data['state']['won'] is True
    assert data['state']['answer'] == 'lofty'

    res = client.post(f'/api/game/{session_id}/guess', json={'guess': 'lofty'})
    assert res.status_code == 409
    assert res.get_json()['error'] == 'Game is already over'


def test_guess_validation(client):
    session_id = create(client)['session_id']

    res = client.post(f'/api/game/{session_id}/guess', json={})
    assert res.status_code == 400

    res = client.post(f'/api/game/{session_id}/guess', json={'guess': 'abc'})
    assert res.status_code == 400
    assert res.get_json()['error'] == 'Guess must be exactly 5 letters'

    state = client.get(f'/api/game/{session_id}/state').get_json()['state']
    assert state['current_round'] == 0


def test_unknown_session_is_404(client):
    assert client.get('/api/game/nope/state').status_code == 404
    assert client.post('/api/game/nope/guess', json={'guess': 'crane'}).status_code == 404
    assert client.put('/api/game/nope', json={}).status_code == 404
    assert client.delete('/api/game/nope').status_code == 404


def test_reset_session(client):
    session_id = create(client, config={'word_list': ['crane'], 'max_rounds': 2})['session_id']
    client.post(f'/api/game/{session_id}/guess', json={'guess': 'crane'})

    res = client.put(f'/api/game/{session_id}', json={'config': {'max_rounds': 5}})
    state = res.get_json()['state']
    assert res.status_code == 200
    assert state['current_round'] == 0
    assert state['game_over'] is False
    assert state['max_rounds'] == 5

    res = client.put(f'/api/game/{session_id}', json={'config': {'word_list': []}})
    assert res.status_code == 400


def test_delete_session(client):
    session_id = create(client)['session_id']
    assert client.delete(f'/api/game/{session_id}').get_json() == {'success': True}
    assert client.get(f'/api/game/{session_id}/state').status_code == 404


def test_expired_session_is_404_after_next_create(client, clock):
    session_id = create(client)['session_id']
    clock.advance(3601)
    create(client)
    assert client.get(f'/api/game/{session_id}/state').status_code == 404


def test_config_endpoints_feed_new_sessions(client, validator):
    res = client.post('/api/config/words', json={'words': ['bumps', 'xylyl', 'brain']})
    data = res.get_json()
    assert data['added'] == ['bumps']
    assert data['invalid'] == ['xylyl']
    assert data['duplicates'] == ['brain']

    res = client.put('/api/config/max_rounds', json={'max_rounds': 8})
    assert res.get_json()['config']['max_rounds'] == 8
    assert client.put('/api/config/max_rounds', json={'max_rounds': 30}).status_code == 400

    config = client.get('/api/config').get_json()
    assert 'bumps' in config['config']['word_list']
    assert config['statistics']['total_words'] == config['word_count']

    assert create(client)['state']['max_rounds'] == 8

    res = client.delete('/api/config/words', json={'words': ['bumps']})
    assert res.get_json()['removed'] == ['bumps']

    res = client.post('/api/config/reset')
    assert res.get_json()['config']['max_rounds'] == 6
    assert client.post('/api/config/words', json={}).status_code == 400


def test_health(client):
    create(client)
    data = client.get('/api/health').get_json()
    assert data['status'] == 'healthy'
    assert data['active_sessions'] == 1


def test_broken_builtin_word_list_fails_app_start(monkeypatch, store, validator):
    monkeypatch.setattr(wordle_game, 'WORD_LIST', ['crane', 'cr4ne'])
    with pytest.raises(ValueError):
        wordle_game.create_app(TestingConfig, session_store=store, word_validator=validator)


def test_game_events_carry_client_address(client, caplog):
    caplog.set_level(logging.INFO, logger='wordle_game')
    session_id = create(client)['session_id']

    events = [r.getMessage() for r in caplog.records if '"GAME_EVENT"' in r.getMessage()]
    created = [m for m in events if '"session_created"' in m and session_id in m]
    assert created
    assert '"user_ip": "127.0.0.1"' in created[0]
