"""
Wordle Rules Engine

Word selection, guess validation, feedback generation and the game state
machine, plus a small Flask API for hosting game sessions.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config

__version__ = "1.0.0"


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.
    
    Args:
        config_class: Configuration class to use
        
    Returns:
        Flask application instance with the game blueprint registered
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    
    CORS(app)
    
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp, url_prefix='/api')
    
    return app
