import os


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Signing key for bearer tokens issued by /authenticate
    JWT_SECRET = os.environ.get('JWT_SECRET') or 'super-secret'
    JWT_ALGORITHM = 'HS256'
    # Directory holding users.json, questions.json and game-runs.json;
    # relative paths resolve against the working directory
    DATA_DIR = os.path.abspath(os.environ.get('DATA_DIR') or 'data')
    CORS_ORIGINS = [
        o.strip() for o in os.environ.get(
            'CORS_ORIGINS',
            'http://localhost:5173,http://127.0.0.1:5173',
        ).split(',') if o.strip()
    ]
    # Password given to users created by `flask data-reset`
    SEED_PASSWORD = os.environ.get('SEED_PASSWORD', '123')
