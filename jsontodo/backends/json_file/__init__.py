from .store import JSONFileTodoStore
