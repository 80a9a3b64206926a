"""Mock asynchronous requests for exercising the classifier."""

from .mock_requests import RequestRejected, mock_request, run_demo

__all__ = ["RequestRejected", "mock_request", "run_demo"]
