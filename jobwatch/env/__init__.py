from .configure_logging import configure_logging as configure_logging
from .env import Env as Env
from .load_env import load_env as load_env
