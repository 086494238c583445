import random

import pytest

import app as app_module
import config
from app import create_app
from console import chat
from responder import Responder
from responses import farewell_text, welcome_text


@pytest.fixture
def responder(tmp_path):
    responses = tmp_path / 'responses.txt'
    responses.write_text("linux,We take Linux support very seriously.\n", encoding='utf-8')
    defaults = tmp_path / 'default.txt'
    defaults.write_text("Tell me more...\n", encoding='utf-8')
    return Responder(str(responses), str(defaults), rng=random.Random(0))


@pytest.fixture
def client(responder):
    app = create_app(responder)
    app.config['TESTING'] = True
    return app.test_client()


def test_get_returns_keyword_reply(client):
    resp = client.post('/get', json={'message': 'My LINUX box crashed'})
    assert resp.status_code == 200
    assert resp.get_json() == {'reply': 'We take Linux support very seriously.'}


def test_get_falls_back_to_default(client):
    resp = client.post('/get', json={'message': 'hello'})
    assert resp.get_json()['reply'] == 'Tell me more...'


def test_get_without_json_body(client):
    resp = client.post('/get', data='not json')
    assert resp.status_code == 200
    assert resp.get_json()['reply'] == 'Tell me more...'


def test_get_with_json_array_body(client):
    resp = client.post('/get', json=['linux'])
    assert resp.status_code == 200
    assert resp.get_json()['reply'] == 'Tell me more...'


def test_get_with_non_string_message(client):
    resp = client.post('/get', json={'message': ['linux']})
    assert resp.status_code == 200
    assert resp.get_json()['reply'] == 'Tell me more...'


def test_create_app_configures_logging_before_loading(monkeypatch, responder):
    calls = []
    monkeypatch.setattr(config, 'configure_logging', lambda: calls.append('logging'))

    def fake_responder(*args):
        calls.append('load')
        return responder

    monkeypatch.setattr(app_module, 'Responder', fake_responder)
    create_app()
    assert calls == ['logging', 'load']


def test_health(client):
    data = client.get('/health').get_json()
    assert data == {'status': 'ok', 'keywords': 1, 'defaults': 1}


def test_console_chat_until_bye(responder):
    inputs = iter(["I use linux", "hmm", "  BYE "])
    output = []
    chat(responder, read=lambda prompt: next(inputs), write=output.append)
    assert output == [
        welcome_text,
        'We take Linux support very seriously.',
        'Tell me more...',
        farewell_text,
    ]


def test_console_chat_stops_on_eof(responder):
    def read(prompt):
        raise EOFError

    output = []
    chat(responder, read=read, write=output.append)
    assert output == [welcome_text, farewell_text]
