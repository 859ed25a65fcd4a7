"""
Integration Tests for Flask API
===============================
Tests for the interleave API endpoints.
"""
import pytest
import sys
import os
import json
from unittest.mock import Mock, patch

os.environ.setdefault('VERBOSE_DEBUG', 'false')
os.environ.setdefault('LOG_TO_FILE', 'false')

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from interleave.database.connection import Database
from interleave.exceptions import APIError, ConfigError
from interleave.models.translation import TranslationPayload
from interleave.services.openai_client import TranslationClient


@pytest.fixture
def translation_client():
    mock_client = Mock(spec=TranslationClient)
    mock_client.is_configured.return_value = True
    mock_client.translate.return_value = TranslationPayload(
        translated_text='Hello world',
        words=[('Hallo', ['hello', 'hi', 'hey']), ('Welt', ['world', 'earth', 'globe'])]
    )
    return mock_client


@pytest.fixture
def database(tmp_path):
    db = Database(tmp_path / 'api.db')
    yield db
    db.close()


@pytest.fixture
def client(database, translation_client):
    """Create test client for Flask app."""
    from interleave.app import create_app

    app = create_app(testing=True, database=database, client=translation_client)
    app.config['TESTING'] = True

    with app.test_client() as client:
        yield client


def post_text(client, text):
    return client.post('/api/newtranslation', data=text.encode('utf-8'), content_type='text/plain')


class TestHealthEndpoint:
    """Test health check endpoint."""

    def test_health_returns_json(self, client):
        response = client.get('/api/health')
        assert response.status_code == 200
        assert response.content_type == 'application/json'

    def test_health_has_status(self, client):
        data = json.loads(client.get('/api/health').data)
        assert data['status'] == 'healthy'
        assert data['database'] == 'connected'

    def test_health_degraded_without_key(self, client, translation_client):
        translation_client.is_configured.return_value = False
        data = json.loads(client.get('/api/health').data)
        assert data['status'] == 'degraded'


class TestStaticFiles:
    """Test static file serving."""

    def test_index_page(self, client):
        response = client.get('/')
        assert response.status_code == 200
        assert b'Interleave' in response.data

    def test_client_route_falls_back_to_index(self, client):
        response = client.get('/reader/12')
        assert response.status_code == 200
        assert response.data == client.get('/').data

    def test_serves_bundle_file(self, client, tmp_path, monkeypatch):
        from interleave.config import config

        bundle = tmp_path / 'bundle'
        (bundle / 'static' / 'assets').mkdir(parents=True)
        (bundle / 'static' / 'index.html').write_text('<div id="root"></div>')
        (bundle / 'static' / 'assets' / 'app.js').write_text('console.log(1)')
        monkeypatch.setattr(config.paths, 'bundle_dir', str(bundle))

        assert client.get('/assets/app.js').data == b'console.log(1)'
        assert client.get('/settings').data == b'<div id="root"></div>'

    def test_unknown_api_path_is_not_spa(self, client):
        response = client.get('/api/unknown')
        assert response.status_code == 404
        assert 'error' in json.loads(response.data)


class TestNewTranslationEndpoint:
    """Test POST /api/newtranslation."""

    def test_creates_translation(self, client, translation_client):
        response = post_text(client, 'Hallo Welt')
        assert response.status_code == 200

        data = json.loads(response.data)
        assert data['id'] == 1
        assert data['originalText'] == 'Hallo Welt'
        assert data['translation'] == 'Hello world'
        assert data['language'] == 'de'
        assert 'createdAt' in data
        translation_client.translate.assert_called_once_with('Hallo Welt')

    def test_raw_body_is_passed_as_submitted(self, client, translation_client):
        text = 'Über den Wolken\nmuss die Freiheit wohl grenzenlos sein. '
        post_text(client, text)
        translation_client.translate.assert_called_once_with(text)

    def test_empty_body(self, client, translation_client):
        response = post_text(client, '   ')
        assert response.status_code == 400
        assert 'error' in json.loads(response.data)
        translation_client.translate.assert_not_called()

    def test_api_error_returns_500(self, client, translation_client):
        translation_client.translate.side_effect = APIError(429, 'slow down')

        response = post_text(client, 'Hallo Welt')
        assert response.status_code == 500
        data = json.loads(response.data)
        assert '429' in data['error']

        assert json.loads(client.get('/api/translations').data) == []

    def test_badly_shaped_envelope_returns_wrapped_error(self, database):
        from interleave.app import create_app

        translation_client = TranslationClient(api_key='sk-test', api_url='https://api.example.test/v1/responses')
        upstream = Mock(status_code=200, text='')
        upstream.json.return_value = {'output': [{'content': {'text': 'x'}}]}

        app = create_app(testing=True, database=database, client=translation_client)
        with app.test_client() as client:
            with patch.object(translation_client.session, 'post', return_value=upstream):
                response = post_text(client, 'Hallo Welt')

        assert response.status_code == 500
        assert json.loads(response.data) == {'error': 'no translation provided in response'}

    def test_missing_key_returns_500(self, client, translation_client):
        translation_client.translate.side_effect = ConfigError('OpenAI API key not configured')

        response = post_text(client, 'Hallo Welt')
        assert response.status_code == 500
        assert json.loads(response.data) == {'error': 'OpenAI API key not configured'}


class TestTranslationsEndpoint:
    """Test translation read and delete endpoints."""

    def test_list_empty(self, client):
        response = client.get('/api/translations')
        assert response.status_code == 200
        assert json.loads(response.data) == []

    def test_list_after_create(self, client):
        post_text(client, 'Hallo Welt')
        post_text(client, 'Guten Tag')

        data = json.loads(client.get('/api/translations').data)
        assert sorted(item['id'] for item in data) == [1, 2]

    def test_get_translation(self, client):
        created = json.loads(post_text(client, 'Hallo Welt').data)

        response = client.get(f"/api/translations/{created['id']}")
        assert response.status_code == 200
        assert json.loads(response.data) == created

    def test_get_missing_translation(self, client):
        response = client.get('/api/translations/99')
        assert response.status_code == 500
        assert 'not found' in json.loads(response.data)['error']

    def test_get_invalid_id(self, client):
        response = client.get('/api/translations/abc')
        assert response.status_code == 400
        assert json.loads(response.data) == {'error': 'Invalid ID'}

    def test_get_non_ascii_digit_id(self, client):
        response = client.get('/api/translations/\u0663')
        assert response.status_code == 400
        assert json.loads(response.data) == {'error': 'Invalid ID'}

    def test_delete_translation(self, client):
        created = json.loads(post_text(client, 'Hallo Welt').data)

        response = client.delete(f"/api/translations/{created['id']}")
        assert response.status_code == 200
        assert json.loads(response.data) == {'message': 'Translation deleted'}

        assert client.get(f"/api/translations/{created['id']}").status_code == 500

    def test_delete_missing_translation(self, client):
        response = client.delete('/api/translations/99')
        assert response.status_code == 500
        assert 'not found' in json.loads(response.data)['error']

    def test_delete_invalid_id(self, client):
        response = client.delete('/api/translations/1.5')
        assert response.status_code == 400


class TestDefinitionsEndpoint:
    """Test GET /api/definitions/<word>."""

    def test_get_definitions(self, client):
        post_text(client, 'Hallo Welt')

        response = client.get('/api/definitions/Hallo')
        assert response.status_code == 200
        assert json.loads(response.data) == ['hello', 'hi', 'hey']

    def test_definitions_survive_delete(self, client):
        created = json.loads(post_text(client, 'Hallo Welt').data)
        client.delete(f"/api/translations/{created['id']}")

        response = client.get('/api/definitions/Welt')
        assert json.loads(response.data) == ['world', 'earth', 'globe']

    def test_missing_word(self, client):
        response = client.get('/api/definitions/Nichts')
        assert response.status_code == 500
        assert 'not found' in json.loads(response.data)['error']


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
