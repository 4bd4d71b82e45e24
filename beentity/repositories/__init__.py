from .session_gateway import SessionGateway

__all__ = [
    "SessionGateway",
]
