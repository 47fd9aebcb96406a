import base64
import os
import sys
import pytest

# Ensure the backend root (containing the `quizgame` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from quizgame import create_app, bcrypt
from quizgame.storage import JsonDocumentStore, GAME_RUNS, QUESTIONS, USERS


QUESTIONS_FIXTURE = [
    {
        'id': '11111111-1111-4111-8111-111111111111',
        'question': 'What is 2 + 2?',
        'options': ['3', '4', '5', '22'],
        'correctAnswer': 1,
    },
    {
        'id': '22222222-2222-4222-8222-222222222222',
        'question': 'Which colour do you get by mixing blue and yellow?',
        'options': ['Green', 'Purple', 'Orange', 'Brown'],
        'correctAnswer': 0,
    },
    {
        'id': '33333333-3333-4333-8333-333333333333',
        'question': 'What is the capital of France?',
        'options': ['Lyon', 'Marseille', 'Paris', 'Nice'],
        'correctAnswer': 2,
    },
]

PASSWORD = '123'


class TestConfig:
    TESTING = True
    SECRET_KEY = 'test-secret'
    JWT_SECRET = 'test-jwt-secret'
    JWT_ALGORITHM = 'HS256'
    BCRYPT_LOG_ROUNDS = 4
    CORS_ORIGINS = []
    SEED_PASSWORD = PASSWORD
    DATA_DIR = None


@pytest.fixture()
def data_dir(tmp_path):
    store = JsonDocumentStore(str(tmp_path))
    store.write(QUESTIONS, QUESTIONS_FIXTURE)
    store.write(GAME_RUNS, [])
    return str(tmp_path)


@pytest.fixture()
def flask_app(data_dir):
    config = type('Config', (TestConfig,), {'DATA_DIR': data_dir})
    application = create_app(config)
    # Seed inside a short-lived context; requests must each get their own
    with application.app_context():
        hashed = bcrypt.generate_password_hash(PASSWORD).decode('utf-8')
        application.extensions['quiz_store'].write(USERS, [
            {'userName': 'Iris', 'password': hashed},
            {'userName': 'Max', 'password': hashed},
        ])
    yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def store(flask_app):
    return flask_app.extensions['quiz_store']


def basic_auth(user_name, password):
    raw = f'{user_name}:{password}'.encode('utf-8')
    return {'Authorization': 'Basic ' + base64.b64encode(raw).decode('ascii')}


def bearer(token):
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture()
def token_for(client):
    def fetch(user_name, password=PASSWORD):
        res = client.post('/authenticate', headers=basic_auth(user_name, password))
        assert res.status_code == 200
        return res.get_json()['token']
    return fetch


@pytest.fixture()
def new_run(client, token_for):
    def create(user_name):
        res = client.post('/game-runs', headers=bearer(token_for(user_name)))
        assert res.status_code == 200
        return res.get_json()['runId']
    return create
