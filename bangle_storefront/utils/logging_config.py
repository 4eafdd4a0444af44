"""
Logging configuration for the storefront core.
"""
import os
import logging
from datetime import datetime
import threading

# Track if logging has been initialized
_logging_initialized = False
_logging_lock = threading.Lock()


def setup_logging(log_level=logging.INFO, log_dir="logs"):
    """
    Set up logging configuration.
    
    Args:
        log_level: Logging level (default: INFO)
        log_dir: Directory for log files (default: "logs")
    
    Returns:
        logging.Logger: Configured logger
    """
    global _logging_initialized
    
    with _logging_lock:
        if _logging_initialized:
            return logging.getLogger()
        
        # Configure root logger
        logger = logging.getLogger()
        logger.setLevel(log_level)
        
        # Clear any existing handlers
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)
        
        os.makedirs(log_dir, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = os.path.join(log_dir, f"storefront_report_{timestamp}.log")
        
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        
        logger.info(f"Logging initialized. Log file: {log_file}")
        
        _logging_initialized = True
        
        return logger


def get_logger(name):
    """
    Get a logger for a specific module.
    
    Library modules only name their logger; handlers are attached by
    setup_logging() when an application entry point runs.
    
    Args:
        name: Name of the module (typically __name__)
    
    Returns:
        logging.Logger: Logger instance
    """
    return logging.getLogger(name)
