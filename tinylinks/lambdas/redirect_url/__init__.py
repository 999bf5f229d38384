from tinylinks.utils import initialize_logging


initialize_logging()
