import logging

def setup_logger():
    logger = logging.getLogger("stepseq")
    
    # Handlers and levels belong to the application; stay silent otherwise
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
        
    return logger

logger = setup_logger()
