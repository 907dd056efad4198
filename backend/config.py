import os


def _csv(value):
    return [item.strip() for item in value.split(',') if item.strip()]


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    CORS_ORIGINS = _csv(os.environ.get(
        'CORS_ORIGINS',
        'http://localhost:5173,http://127.0.0.1:5173,http://localhost:5174,http://127.0.0.1:5174',
    ))
    SOCKETIO_NAMESPACE = os.environ.get('SOCKETIO_NAMESPACE', '/ws')
    # Question budget and the counts at which automatic hints fire
    QUESTION_LIMIT = int(os.environ.get('QUESTION_LIMIT', '20'))
    LENGTH_HINT_AT = int(os.environ.get('LENGTH_HINT_AT', '10'))
    CHOSUNG_HINT_AT = int(os.environ.get('CHOSUNG_HINT_AT', '15'))
    # Display name used when a guesser sends no nickname
    DEFAULT_GUESSER_NAME = os.environ.get('DEFAULT_GUESSER_NAME', '정답자')
    # Reserved texts that trigger a visual effect instead of being recorded
    HINT_EFFECT_TRIGGER = os.environ.get('HINT_EFFECT_TRIGGER', '/fireworks')
    CHAT_EFFECT_TRIGGERS = _csv(os.environ.get('CHAT_EFFECT_TRIGGERS', '/confetti,/hearts,/shake'))
