class VaCreatorError(Exception):
    pass


# --- Ошибки разбора аргументов: прерывают весь запуск ---

class ArgumentGrammarError(VaCreatorError):
    pass


class ArgumentCountError(ArgumentGrammarError):
    pass


class UnrecognizedAnalyticsTypeError(ArgumentGrammarError):
    pass


class UnrecognizedCommandError(ArgumentGrammarError):
    pass


class InvalidNumericValueError(ArgumentGrammarError):
    pass


class MissingRangeBoundError(ArgumentGrammarError):
    pass


class EmptyIdentifierListError(ArgumentGrammarError):
    pass


# --- Ошибки отправки: касаются только одного stream_id ---

class DispatchError(VaCreatorError):
    def __init__(self, stream_id, message):
        super().__init__(message)
        self.stream_id = stream_id


class TransportFailureError(DispatchError):
    pass


class NonSuccessStatusError(DispatchError):
    def __init__(self, stream_id, status_code, body):
        super().__init__(stream_id, f"HTTP status: {status_code}")
        self.status_code = status_code
        self.body = body
