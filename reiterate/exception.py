"""
Exceptions raised by the reiterate adaptors
"""


class ReentrantPullError(RuntimeError):
    """
    Raised when the source of an adaptor is pulled while another pull
    on the same adaptor is still in progress.

    This is a programming error, typically the source itself (or code
    it calls) advancing a cursor of the adaptor that is pulling from it.
    """

    def __init__(self, adaptor: object | None = None, msg: str | None = None):
        if msg is None:
            msg = "The source is already being pulled, reentrant pull is not allowed"
            if adaptor is not None:
                msg += f" ({adaptor!r})"
        super().__init__(msg)
        self.adaptor = adaptor
