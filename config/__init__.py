"""
Configuration Module for the lobby control plane.

All settings live in ``config.settings`` and are read from the
environment (and a local ``.env`` file) at import time.
"""
