"""
Wordle Game Server - Main Entry Point

Initializes the game service and starts the Flask application.
"""

import argparse

from wordle_engine import create_app
from wordle_engine.config import Config, config
from wordle_engine.config.game_settings import get_word_statistics, validate_word_list_integrity
from wordle_engine.errors import WordSourceError
from wordle_engine.services.game_service import initialize_game_service
from wordle_engine.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    parser = argparse.ArgumentParser(description="Run the Wordle game server.")
    parser.add_argument('--env', choices=sorted(config), default='default',
                        help="Configuration profile to use")
    args = parser.parse_args()
    config_class = config[args.env]

    try:
        print("Initializing services...")

        validate_word_list_integrity()
        stats = get_word_statistics()
        print(f"✓ Word list loaded: {stats['total_words']} words")

        initialize_game_service()
        print("✓ Game service initialized successfully")

        app = create_app(config_class)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Wordle Server Starting")

        print(f"\nStarting Wordle Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print("=" * 50)

        app.run(host=Config.HOST, port=Config.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Server shutting down (KeyboardInterrupt)")
    except WordSourceError as e:
        print(f"Word list error: {e}")
        game_logger.logger.error(f"Word list error: {e}")
        raise
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
