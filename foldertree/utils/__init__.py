from foldertree.utils.logging import get_logger, setup_logging
from foldertree.utils.api_response import ok


__all__= [
    "get_logger",
    "setup_logging",
    "ok",
]
