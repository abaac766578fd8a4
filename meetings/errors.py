class BrokerError(Exception):
    pass


class ValidationError(BrokerError):
    pass


class NotFoundError(BrokerError):
    pass


class UpstreamError(BrokerError):
    pass
