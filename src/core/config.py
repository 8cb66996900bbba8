import logging


class Config:
    APP_NAME = "calcdemo"
    LOG_LEVEL = logging.INFO
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    # Demonstration operands, one (a, b) pair per operation
    ADD_OPERANDS = (10, 5)
    SUBTRACT_OPERANDS = (10, 5)
    MAX_OPERANDS = (10, 5)
    DIVIDE_OPERANDS = (10, 5)
