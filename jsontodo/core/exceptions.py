class TodoNotFoundException(Exception):
    def __init__(self, id: "str"):
        self.id = id
        super(TodoNotFoundException, self).__init__("Todo not found.")


class TodoValidationException(Exception):
    def __init__(self, message: "str"):
        self.message = message
        super(TodoValidationException, self).__init__(message)


class StorageException(Exception):
    def __init__(self, path: "str", operation: "str", cause: "Exception"):
        self.path = path
        self.operation = operation
        super().__init__(
            "Failed to %s todo storage at '%s': %s" % (operation, path, cause)
        )
