import logging

_configured = False


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Attach a stderr handler to the package logger once; later calls only adjust the level."""
    global _configured
    logger = logging.getLogger("shapetest")
    logger.setLevel(level)
    if _configured:
        return logger
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    _configured = True
    return logger
