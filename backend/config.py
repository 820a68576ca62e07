import os


def _origins(value):
    if not value or value.strip() == '*':
        return '*'
    return [origin.strip() for origin in value.split(',') if origin.strip()]


def _optional_int(value):
    return int(value) if value not in (None, '') else None


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Comma separated list, or '*' for any origin
    CORS_ORIGINS = _origins(os.environ.get('CORS_ORIGINS', '*'))
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/')
    # Size of a new Find Number board (numbers 1..N)
    FIND_NUMBER_COUNT = int(os.environ.get('FIND_NUMBER_COUNT', '25'))
    # Seeds bot moves and Find Number shuffles; unset means nondeterministic
    RANDOM_SEED = _optional_int(os.environ.get('RANDOM_SEED'))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
    HOST = os.environ.get('HOST', '0.0.0.0')
    PORT = int(os.environ.get('PORT', '3001'))
