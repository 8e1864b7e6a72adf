"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from dataclasses import asdict
from flask import Blueprint, request, jsonify
from ..errors import GameAlreadyOver, GameError, GameNotFound, GuessError
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _error_status(error: GameError) -> int:
    """HTTP status for an engine error."""
    if isinstance(error, GameNotFound):
        return 404
    if isinstance(error, GameAlreadyOver):
        return 409
    if isinstance(error, GuessError):
        return 400
    return 500


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _game_error_response(error: GameError, action: str, game_id=None, **kwargs):
    error_response = {
        'success': False,
        'error': str(error),
        'code': error.code
    }
    game_logger.log_server_response(request, action, False, error_response, game_id, **kwargs)
    return jsonify(error_response), _error_status(error)


def _unexpected_error_response(error: Exception, action: str, game_id=None):
    game_logger.log_error(request, error, action, game_id)
    error_response = {
        'success': False,
        'error': str(error)
    }
    game_logger.log_server_response(request, action, False, error_response, game_id)
    return jsonify(error_response), 500


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    try:
        game_logger.log_user_action(request, 'new_game')

        game_id = game_service.create_new_game()
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            word_length=state.word_length, max_attempts=state.max_attempts
        )

        return jsonify(response_data)

    except GameError as e:
        return _game_error_response(e, 'new_game')
    except Exception as e:
        return _unexpected_error_response(e, 'new_game')


@game_bp.route('/game/<game_id>/state', methods=['GET'])
def get_state(game_id):
    """Get current game state."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            attempts_used=state.attempts_used, game_over=state.game_over
        )

        return jsonify(response_data)

    except GameError as e:
        return _game_error_response(e, 'get_state', game_id)
    except Exception as e:
        return _unexpected_error_response(e, 'get_state', game_id)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
def make_guess(game_id):
    """Submit a guess for validation and evaluation."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or 'guess' not in data:
            error_response = {
                'success': False,
                'error': 'Guess is required',
                'code': 'invalid_shape'
            }
            game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
            return jsonify(error_response), 400

        guess = data['guess']

        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess)

        feedback = game_service.make_guess(game_id, guess)
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'feedback': {
                'guess': feedback.guess,
                'marks': [mark.value for mark in feedback.marks],
                'pattern': feedback.pattern,
                'correct': feedback.is_correct
            },
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=feedback.guess, attempts_used=state.attempts_used, game_over=state.game_over
        )

        return jsonify(response_data)

    except GameError as e:
        return _game_error_response(e, 'submit_guess', game_id, attempted_guess=str(data.get('guess')))
    except Exception as e:
        return _unexpected_error_response(e, 'submit_guess', game_id)


@game_bp.route('/game/<game_id>/restart', methods=['POST'])
def restart_game(game_id):
    """Start over with a new secret word under the same game id."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    try:
        game_logger.log_user_action(request, 'restart_game', game_id)

        game_service.restart_game(game_id)
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(request, 'restart_game', True, response_data, game_id)

        return jsonify(response_data)

    except GameError as e:
        return _game_error_response(e, 'restart_game', game_id)
    except Exception as e:
        return _unexpected_error_response(e, 'restart_game', game_id)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    game_service = get_game_service()
    if not game_service:
        return _service_unavailable()

    try:
        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)

        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr or 'unknown')
            return jsonify(response_data)

        response_data['error'] = 'Game not found'
        response_data['code'] = GameNotFound.code
        return jsonify(response_data), 404

    except Exception as e:
        return _unexpected_error_response(e, 'delete_game', game_id)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy' if game_service else 'degraded',
            'active_games': game_service.active_games_count() if game_service else 0,
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
