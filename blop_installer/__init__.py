"""BLOP installer front-end (terminal wizard for Arch Linux live media).

Core design goals:
- Stack-based screen navigation with a single active screen
- External tools do the real work; we only hand off and report
- Failures never corrupt navigation state
- Centralized logging
"""

__all__ = []
