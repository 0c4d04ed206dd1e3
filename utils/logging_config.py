"""
Logging presets for the lobby control plane.

``development`` logs everything at DEBUG in a readable layout;
``production`` logs INFO and above on one compact line per record.
"""

import logging

LOG_PRESETS = {
    'development': {
        'level': logging.DEBUG,
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    },
    'production': {
        'level': logging.INFO,
        'format': 'ts=%(asctime)s level=%(levelname)s logger=%(name)s msg="%(message)s"'
    }
}


def configure_logging(preset: str = 'production') -> None:
    """
    Configure root logging from a named preset.

    Args:
        preset: ``development`` or ``production``

    Raises:
        ValueError: If the preset is unknown
    """
    if preset not in LOG_PRESETS:
        raise ValueError(f"Unknown log config '{preset}', expected one of {sorted(LOG_PRESETS)}")

    options = LOG_PRESETS[preset]
    logging.basicConfig(level=options['level'], format=options['format'], force=True)

    # Client libraries are noisy at DEBUG
    for name in ('botocore', 'boto3', 'urllib3'):
        logging.getLogger(name).setLevel(logging.WARNING)
