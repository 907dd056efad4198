from flask import Blueprint, current_app, jsonify

from twentyq.errors import NotFound

rooms = Blueprint('rooms', __name__)


@rooms.route('/<string:room_code>', methods=['GET'])
def get_room(room_code):
    """
    Public summary of a live room, for a lobby to check a code before
    joining. Never includes the secret word.
    """
    registry = current_app.extensions['twentyq']['registry']
    try:
        session = registry.get(room_code)
    except NotFound as exc:
        return jsonify({'error': exc.message}), 404

    return jsonify({
        'roomCode': session.room_code,
        'hostName': session.host_name,
        'players': [g.name for g in session.roster],
        'questionCount': session.question_count,
        'questionLimit': current_app.config.get('QUESTION_LIMIT', 20),
        'waitingForAnswer': session.pending_question_id,
        'gameOver': session.game_over,
    }), 200
