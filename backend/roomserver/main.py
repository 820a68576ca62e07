from flask import Blueprint, current_app, jsonify

main = Blueprint('main', __name__)


@main.route('/')
def index():
    return 'Game rooms Socket.IO server'


@main.route('/health')
def health():
    # Bot rooms are never reclaimed, so room counts only show growth here
    rooms = current_app.extensions['game_rooms']
    return jsonify({'status': 'ok', 'rooms': rooms.room_counts()})
