from .dialogue_engine import DialogueEngine
from .session_manager import SessionManager

__all__ = ["SessionManager", "DialogueEngine"]
