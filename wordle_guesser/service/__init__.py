from .handler import RequestBody, ResponseBody, handle_request, lambda_handler
from .logs import setup_logging

__all__ = ["RequestBody", "ResponseBody", "handle_request", "lambda_handler", "setup_logging"]
