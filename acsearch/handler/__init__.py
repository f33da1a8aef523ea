from .handlers import CollectingEmitHandler, EmitHandler, FirstMatchHandler

__all__ = ["EmitHandler", "CollectingEmitHandler", "FirstMatchHandler"]
