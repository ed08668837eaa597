"""PWAAT accessibility installer (Python-first, state-driven).

Core design goals:
- Find the Phoenix Wright Ace Attorney Trilogy install without asking
- Install MelonLoader into it idempotently
- Never leave a downloaded archive behind
- Centralized logging
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
