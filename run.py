"""Entry point for the To-Do List API.

Intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Usage:
    python run.py
"""
from todo_api.app.run import main


if __name__ == "__main__":
    main()
