"""
Wordle Game Server - Main Entry Point

This is the main entry point for the Wordle game server.
It builds the Flask application from the environment configuration and
starts the development server.
"""

import os

from wordle_game import create_app
from wordle_game.config import config
from wordle_game.utils.game_logger import game_logger


def main():
    """Main function to create the app and start the server."""
    config_class = config[os.getenv('FLASK_ENV', 'default')]
    try:
        print("Creating Flask application...")
        app = create_app(config_class)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Wordle Server Starting")

        print(f"\nStarting Wordle Game Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print(f"Session TTL: {config_class.SESSION_TTL_SECONDS}s")
        print("=" * 50)

        app.run(host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
