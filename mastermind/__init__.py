"""
Mastermind - Command-line client for a remote Mastermind game service.

The service owns the secret code and the scoring. This client:
- Creates a game session on the service
- Collects and validates guesses locally
- Submits guesses and renders the black/white score
- Cleans up the session on win or exit, and offers a replay
"""

__version__ = "0.1.0"
