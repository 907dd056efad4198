from flask import Blueprint, current_app, jsonify

main = Blueprint('main', __name__)


@main.route('/')
def index():
    registry = current_app.extensions['twentyq']['registry']
    return jsonify({
        'message': 'Welcome to the twenty questions server!',
        'namespace': current_app.config.get('SOCKETIO_NAMESPACE', '/ws'),
        'active_rooms': len(registry),
    })
