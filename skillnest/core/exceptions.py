class AppException(Exception):
    def __init__(
        self,
        message: str,
        status_code: int = 400,
        error_code: str = "BUSINESS_ERROR"
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        super().__init__(self.message)

class MissingFieldError(AppException):
    def __init__(self, message: str):
        super().__init__(message=message, status_code=400, error_code="MISSING_FIELD")

class UnsupportedFileError(AppException):
    def __init__(self, message: str):
        super().__init__(message=message, status_code=400, error_code="UNSUPPORTED_FILE")

class NotFoundError(AppException):
    def __init__(self, entity: str):
        super().__init__(message=f"{entity} not found", status_code=404, error_code="NOT_FOUND")

class AuthenticationError(AppException):
    def __init__(self, message: str = "Invalid or missing API key"):
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTH_FAILED"
        )

class AIError(AppException):
    def __init__(self, message: str):
        super().__init__(
            message=message,
            status_code=500,
            error_code="AI_SERVICE_ERROR"
        )

class AIConfigError(AppException):
    def __init__(self):
        super().__init__(
            message="GROQ_API_KEY is not configured",
            status_code=500,
            error_code="AI_NOT_CONFIGURED"
        )

class AIRateLimitError(AppException):
    def __init__(self):
        super().__init__(
            message="Rate limit exceeded. Please try again later.",
            status_code=429,
            error_code="AI_RATE_LIMITED"
        )

class AIUsageLimitError(AppException):
    def __init__(self):
        super().__init__(
            message="AI usage limit reached. Please add credits.",
            status_code=402,
            error_code="AI_USAGE_LIMIT"
        )

class ExtractionError(AppException):
    def __init__(self, message: str = "Failed to extract text from PDF"):
        super().__init__(message=message, status_code=500, error_code="EXTRACTION_FAILED")
