"""
Error kinds shared by every layer.

Each error carries the code and HTTP status it is reported with. ``detail`` is
what a client gets to see; ``str(error)`` is the full internal message and only
ever goes to the log.
"""


class RecipeBankError(Exception):
    code: str = "internal_error"
    status_code: int = 500
    public_message: str = "An internal server error occurred"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.public_message)

    @property
    def detail(self) -> str:
        return self.public_message


# request decoding


class InvalidJSONError(RecipeBankError):
    code = "invalid_json"
    status_code = 400
    public_message = "The request body contains invalid JSON"


class InvalidQueryParamsError(RecipeBankError):
    code = "invalid_query_params"
    status_code = 400
    public_message = "One or more query parameters are invalid"

    def __init__(self, param: str = "") -> None:
        self.param = param
        super().__init__(f"{param} parameter is invalid" if param else None)

    @property
    def detail(self) -> str:
        if self.param:
            return f"Invalid query parameter: {self.param}"
        return self.public_message


class MissingPathParamError(RecipeBankError):
    code = "missing_path_param"
    status_code = 400
    public_message = "A required path parameter is missing"

    def __init__(self, param: str = "") -> None:
        self.param = param
        super().__init__(f"{param} parameter is required" if param else None)

    @property
    def detail(self) -> str:
        if self.param:
            return f"Missing required path parameter: {self.param}"
        return self.public_message


class RequestTooLargeError(RecipeBankError):
    code = "request_too_large"
    status_code = 413
    public_message = "The request body exceeds the maximum allowed size"


# service


class RecipeValidationError(RecipeBankError):
    code = "validation_error"
    status_code = 400
    public_message = "The recipe is invalid"

    @property
    def detail(self) -> str:
        return str(self)


class InvalidInputError(RecipeBankError):
    code = "invalid_input"
    status_code = 400
    public_message = "The provided input data is invalid or incomplete"

    @property
    def detail(self) -> str:
        return str(self)


class AIUnsupportedError(RecipeBankError):
    code = "ai_unsupported"
    status_code = 400
    public_message = "AI processing is not supported/enabled"


class AIError(RecipeBankError):
    code = "ai_error"
    status_code = 400
    public_message = "An error occurred while processing the AI request"


# storage


class InvalidIDError(RecipeBankError):
    code = "invalid_id"
    status_code = 400
    public_message = "The provided ID is invalid or malformed"


class NotFoundError(RecipeBankError):
    code = "not_found"
    status_code = 404
    public_message = "The requested resource was not found"

    def __init__(self, resource: str = "resource", identifier: str = "") -> None:
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} with ID {identifier} not found")

    @property
    def detail(self) -> str:
        return f"The requested {self.resource} was not found"


class DatabaseError(RecipeBankError):
    pass
