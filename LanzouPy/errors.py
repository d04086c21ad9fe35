class BaseLanzouError(Exception):
    def __init__(self, message=None):
        super().__init__(message)
        self.message = message

class PatternNotFound(BaseLanzouError):
    def __init__(self, message="\nExpected pattern not found in page."):
        super().__init__(message)

class ChallengeNotFound(PatternNotFound):
    def __init__(self, message="\nCould not find acw_sc__v2 challenge token (arg1) in page."):
        super().__init__(message)

class DataBlockNotFound(PatternNotFound):
    def __init__(self, message="\nCould not find 'data : {...}' block in page."):
        super().__init__(message)

class FormBlockNotFound(PatternNotFound):
    def __init__(self, message="\nCould not find 'data : '...'' form string in page."):
        super().__init__(message)

class MalformedInput(BaseLanzouError):
    def __init__(self, message="\nInput found but could not be parsed."):
        super().__init__(message)

class ChallengeUnsolved(BaseLanzouError):
    def __init__(self, message="\nSite kept serving the challenge page after solving it."):
        super().__init__(message)

class FetchError(BaseLanzouError):
    def __init__(self, message="\nError fetching page."):
        super().__init__(message)
