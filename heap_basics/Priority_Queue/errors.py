class InvalidArgumentError(ValueError):
    """
    Raised for a negative capacity or priority. The heap is left untouched.
    """


class EmptyQueueError(IndexError):
    """
    Raised when the maximum is requested from a heap with no entries.
    """
