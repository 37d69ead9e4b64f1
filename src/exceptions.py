"""Exceptions raised by the thread view and its mail stores."""


class ThreadViewError(Exception):
    """Base exception for all thread view errors."""

    def __init__(self, message: str, recovery_hint: str | None = None):
        super().__init__(message)
        self.recovery_hint = recovery_hint

    def __str__(self):
        base = super().__str__()
        if self.recovery_hint:
            return f"{base}\nHint: {self.recovery_hint}"
        return base


class ThreadNotFoundError(ThreadViewError):
    """No messages resolved for the requested thread."""

    def __init__(self, account_id: int, thread_id: int):
        super().__init__(
            f"Thread {thread_id} not found for account {account_id}",
            recovery_hint="Check the thread id, or whether all of its messages were deleted",
        )
        self.account_id = account_id
        self.thread_id = thread_id


class InvalidFlagError(ThreadViewError, ValueError):
    """A flag name outside of the message flags a store can set."""

    pass


class MailboxFormatError(ThreadViewError):
    """A mailbox JSON document that cannot be read as folders and messages."""

    pass
