from .file_storage import JsonFileStorage
from .memory_storage import InMemoryStorage
from .repository import KeyValueStorage
from .session_storage import SessionStorage

__all__ = ["JsonFileStorage", "InMemoryStorage", "KeyValueStorage", "SessionStorage"]
