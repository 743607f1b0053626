"""Sample: logger interface with default exception logging."""

from ..interfaces import ILogSink, log_exception


class InterfaceSample:
    """Logs a message, then records a caught exception."""

    def __init__(self, logger: ILogSink):
        self.logger = logger

    async def handle(self) -> None:
        """Run sample."""
        self.logger.log("Test Message")
        try:
            raise NotImplementedError("this sample was not implemented")
        except NotImplementedError as e:
            log_exception(self.logger, e)
